"""
Reset the pool store.

DANGEROUS: This deletes all words and learning progress!
Only use when you want to start fresh for testing.

Usage:
    python -m scripts.maintenance.reset_learning_db [--yes]
"""

import argparse

from core import store
from core.logging_setup import setup_logging


def main():
    parser = argparse.ArgumentParser(description="Drop and recreate the pool store")
    parser.add_argument("--yes", action="store_true", help="Skip the confirmation prompt")
    args = parser.parse_args()

    setup_logging()

    print("=" * 60)
    print("WARNING: Reset Pool Store")
    print("=" * 60)
    print()
    print(f"Database: {store.get_database_url()}")
    print("This will DELETE for every word list:")
    print("  - Active and archived words (with attempt history)")
    print("  - Settings and statistics")
    print()

    confirmed = args.yes or input("Are you sure you want to reset? (type 'yes' to confirm): ").lower() == "yes"

    if confirmed:
        print("\nResetting database...")
        store.reset_db()
        print("✓ Database reset complete!")
        print("\nImport words again with `python -m scripts.import_words --file ...`.")
    else:
        print("\nCancelled. No changes made.")


if __name__ == "__main__":
    main()
