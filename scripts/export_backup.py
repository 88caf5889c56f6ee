"""
Write a JSON backup of an app's pools and metadata.

The backup contains the active pool, the archived pool, the metadata
document and the export time. The metadata's lastBackup is updated.

Usage:
    python -m scripts.export_backup [--app nouns] [--out-dir backups]
"""

from __future__ import annotations

import argparse
import json
from datetime import datetime, timezone
from pathlib import Path

from core import store
from core.learning import dates
from core.logging_setup import setup_logging


def export_backup(app_name: str, out_dir: Path) -> Path:
    """
    Export the app to `<out_dir>/<app>-backup-<YYYY-MM-DD>.json`.

    Returns:
        Path of the written file
    """
    export = store.export_app(app_name)

    out_dir.mkdir(parents=True, exist_ok=True)
    path = out_dir / f"{app_name}-backup-{dates.today().isoformat()}.json"
    with path.open("w", encoding="utf-8") as f:
        json.dump(export, f, ensure_ascii=False, indent=2)

    metadata = store.load_metadata(app_name)
    metadata.last_backup = datetime.now(timezone.utc)
    store.save_metadata(app_name, metadata)
    return path


def main():
    parser = argparse.ArgumentParser(description="Export pools and metadata to a JSON backup")
    parser.add_argument("--app", default=None, help="App (word list) name (default: APP_NAME or 'nouns')")
    parser.add_argument("--out-dir", type=Path, default=Path("backups"), help="Backup directory")
    args = parser.parse_args()

    setup_logging()
    store.init_db()
    path = export_backup(args.app or store.get_app_name(), args.out_dir)
    print(f"✓ Backup written to {path}")


if __name__ == "__main__":
    main()
