"""
Archive words that have been mastered for long enough.

Meant to be run on a cadence (e.g. daily from cron); the Streamlit app
also sweeps whenever it loads the pools.

Usage:
    python -m scripts.run_archive [--app nouns]
"""

import argparse

from core import store
from core.logging_setup import setup_logging


def main():
    parser = argparse.ArgumentParser(description="Move long-mastered words into the archive")
    parser.add_argument("--app", default=None, help="App (word list) name (default: APP_NAME or 'nouns')")
    args = parser.parse_args()

    setup_logging()
    app_name = args.app or store.get_app_name()

    store.init_db()
    archived = store.run_archive_process(app_name)
    metadata = store.load_metadata(app_name)

    print(f"✓ Archived {archived} word(s) for '{app_name}'")
    print(f"  Active: {metadata.stats.active_words}  Archived: {metadata.stats.archived_words}")


if __name__ == "__main__":
    main()
