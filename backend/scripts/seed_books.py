"""Seed the configured book store from a JSON dataset.

Usage (from backend/):
    python -m scripts.seed_books [--file data/sample_books.json] [--force]

The store is chosen by BOOKSTORE_BACKEND exactly as the API chooses it, so the
same .env drives both.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from dotenv import load_dotenv

load_dotenv(Path(__file__).resolve().parents[1] / ".env")

from api.dependencies import build_store
from services.seed import seed_store
from settings import Settings

logger = logging.getLogger("seed_books")


def main(argv: list[str] | None = None) -> int:
    if not logger.handlers:
        logging.basicConfig(level=logging.INFO, format="%(message)s")
    config = Settings()
    parser = argparse.ArgumentParser(description="Insert sample books into the configured store.")
    parser.add_argument("--file", default=str(config.SEED_FILE), help="JSON list of books to insert.")
    parser.add_argument("--force", action="store_true", help="Seed even if the store already holds books.")
    args = parser.parse_args(argv)

    store = build_store(config)
    inserted = seed_store(store, Path(args.file), force=args.force)
    logger.info("Inserted %d books into the %s store", inserted, config.BOOKSTORE_BACKEND)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
