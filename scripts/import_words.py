"""
Import words from CSV or JSON into the active pool.

CSV columns: id, de, article, plural, en, pt, example, examplePt, level,
difficulty, falseFriend, warning. Multiple translations in `en` and `pt`
are separated by ";".

JSON: a list of word objects, or a pool document ({"words": [...]}).

Words whose id is already in the active or archived pool are skipped.

Usage:
    python -m scripts.import_words --file data/nouns.csv [--app nouns] [--dry-run]
"""

from __future__ import annotations

import argparse
import json
from pathlib import Path

import pandas as pd
from pydantic import ValidationError

from core import store
from core.logging_setup import setup_logging
from core.schemas import ActiveWord, WordContent


LIST_SEPARATOR = ";"
TRUE_VALUES = {"1", "true", "yes", "y", "x"}


def parse_list(value: str) -> list[str]:
    """Split a ';'-separated CSV cell into a list of translations."""
    if not value or not str(value).strip():
        return []
    items = [item.strip() for item in str(value).split(LIST_SEPARATOR)]
    return [item for item in items if item]


def _row_to_record(row: dict) -> dict:
    record = {
        "id": int(row["id"]),
        "de": row["de"].strip(),
        "en": parse_list(row.get("en", "")),
        "pt": parse_list(row.get("pt", "")),
        "example": row.get("example", "").strip(),
        "examplePt": row.get("examplePt", "").strip(),
        "falseFriend": str(row.get("falseFriend", "")).strip().lower() in TRUE_VALUES,
    }
    for key in ("article", "plural", "level", "warning"):
        value = str(row.get(key, "")).strip()
        if value:
            record[key] = value.lower() if key == "article" else value
    difficulty = str(row.get("difficulty", "")).strip()
    if difficulty:
        record["difficulty"] = int(float(difficulty))
    return record


def read_csv_records(path: Path) -> list[dict]:
    df = pd.read_csv(path, dtype=str, keep_default_na=False)
    missing = {"id", "de"} - set(df.columns)
    if missing:
        raise ValueError(f"CSV is missing required columns: {', '.join(sorted(missing))}")
    return df.to_dict(orient="records")


def read_json_records(path: Path) -> list[dict]:
    with path.open(encoding="utf-8") as f:
        data = json.load(f)
    if isinstance(data, dict):
        data = data.get("words", [])
    if not isinstance(data, list):
        raise ValueError("JSON must be a list of words or an object with a 'words' list")
    return data


def load_words(path: Path) -> tuple[list[ActiveWord], int]:
    """
    Parse a word file into fresh active words.

    Progress fields in the input are ignored; every word starts learning.

    Returns:
        (valid words, number of invalid rows)
    """
    is_csv = path.suffix.lower() != ".json"
    records = read_csv_records(path) if is_csv else read_json_records(path)

    words: list[ActiveWord] = []
    invalid = 0
    for record in records:
        try:
            if is_csv:
                record = _row_to_record(record)
            content = WordContent.model_validate(record).content()
            words.append(ActiveWord(**content))
        except (ValidationError, ValueError, KeyError) as e:
            invalid += 1
            print(f"  ✗ Skipping invalid row {record.get('id', '?')}: {e}")
    return words, invalid


def import_words(path: Path, app_name: str, dry_run: bool = False) -> int:
    """
    Import words from `path` into the app's active pool.

    Returns:
        Number of words added
    """
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    words, invalid = load_words(path)
    print(f"Loaded {len(words)} words from {path} ({invalid} invalid)")

    store.init_db()
    if dry_run:
        known = {w.id for w in store.load_active(app_name)} | {w.id for w in store.load_archived(app_name)}
        added = sum(1 for w in words if w.id not in known)
        print(f"\n⚠ DRY RUN MODE - would add {added} word(s) to '{app_name}', skip {len(words) - added}")
        return added

    added = store.add_words(app_name, words)

    print(f"\n{'='*60}")
    print("Import complete!")
    print(f"{'='*60}")
    print(f"Added:             {added}")
    print(f"Already present:   {len(words) - added}")
    print(f"Invalid:           {invalid}")
    return added


def main():
    parser = argparse.ArgumentParser(description="Import words into the active pool")
    parser.add_argument("--file", type=Path, required=True, help="CSV or JSON word file")
    parser.add_argument("--app", default=None, help="App (word list) name (default: APP_NAME or 'nouns')")
    parser.add_argument("--dry-run", action="store_true", help="Report what would be added without writing")

    args = parser.parse_args()
    setup_logging()

    import_words(args.file, args.app or store.get_app_name(), dry_run=args.dry_run)


if __name__ == "__main__":
    main()
