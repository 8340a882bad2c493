"""Offline loader: creates the help article table and fills it from a JSON file.

Usage:
    python -m helpchat.load_articles data/help_articles.json [--replace]
"""

import argparse
import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, List

from sqlalchemy import delete, insert
from sqlalchemy.engine import Engine

from helpchat.config import Settings
from helpchat.db import create_db_engine, help_articles, metadata


def _parse_timestamp(value) -> datetime:
    if not value:
        return datetime.now(timezone.utc).replace(tzinfo=None)
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def read_articles(path: Path) -> List[Dict]:
    if not path.exists():
        raise FileNotFoundError(f"Articles file not found: {path}")

    with open(path, encoding="utf-8") as f:
        raw = json.load(f)

    if not isinstance(raw, list):
        raise ValueError(f"{path} must contain a JSON list of articles")

    rows = []
    for i, item in enumerate(raw):
        if not item.get("title") or not item.get("content"):
            raise ValueError(f"Article #{i} in {path} is missing a title or content")
        rows.append(
            {
                "title": item["title"],
                "content": item["content"],
                "keywords": item.get("keywords"),
                "last_updated": _parse_timestamp(item.get("last_updated")),
            }
        )
    return rows


def load_articles(engine: Engine, rows: List[Dict], replace: bool = False) -> int:
    metadata.create_all(engine, tables=[help_articles])

    with engine.begin() as conn:
        if replace:
            conn.execute(delete(help_articles))
        if rows:
            conn.execute(insert(help_articles), rows)

    return len(rows)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Load help articles into the database.")
    parser.add_argument("path", type=Path, help="JSON file with a list of articles")
    parser.add_argument("--replace", action="store_true", help="Delete existing articles first")
    args = parser.parse_args(argv)

    rows = read_articles(args.path)
    print(f"Loaded {len(rows)} articles from {args.path}")

    engine = create_db_engine(Settings.load(require_api_key=False))
    try:
        count = load_articles(engine, rows, replace=args.replace)
    finally:
        engine.dispose()

    print(f"Inserted {count} articles into '{help_articles.name}'")


if __name__ == "__main__":
    main()
