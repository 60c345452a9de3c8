"""
Seed the book collection from a local JSON dataset.

The dataset is a list of objects using either the lower-case field names
(``id``, ``title`` ...) or the legacy ones (``ID``, ``BookName`` ...).
"""
import json
import logging
from pathlib import Path
from typing import List

from domain.models import Book, normalize_keys
from repositories.base import BookStore

logger = logging.getLogger(__name__)


def load_seed_books(path: Path) -> List[Book]:
    """Load books from ``path``; entries without an id or title are skipped."""
    with Path(path).open("r", encoding="utf-8") as f:
        raw = json.load(f)
    if not isinstance(raw, list):
        raise ValueError(f"Seed file {path} must contain a JSON list")

    books: List[Book] = []
    for entry in raw:
        if not isinstance(entry, dict):
            continue
        book = Book.from_dict(normalize_keys(entry))
        if not book.id or not book.title:
            logger.warning("Skipping seed entry without id/title: %r", entry)
            continue
        books.append(book)
    return books


def seed_store(store: BookStore, path: Path, force: bool = False) -> int:
    """
    Insert the dataset at ``path`` into ``store``.

    Only runs on an empty store unless ``force`` is set. Books whose id is
    already present are skipped. Returns the number of books inserted.
    """
    if not force and not store.is_empty():
        logger.info("Store already holds books; skipping seed")
        return 0

    inserted = 0
    for book in load_seed_books(path):
        if store.count(book.id) > 0:
            continue
        store.insert(book)
        inserted += 1
    logger.info("Seeded %d books from %s", inserted, path)
    return inserted
