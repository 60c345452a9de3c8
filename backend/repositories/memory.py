"""
In-memory book store for development and tests.

Replace with the SQL or Mongo store for anything that must survive a restart.
"""
import threading
from typing import Dict, List, Optional

from domain.models import BOOK_FIELDS, Book


class InMemoryBookStore:
    """List-backed store; keeps insertion order."""

    def __init__(self, books: Optional[List[Book]] = None):
        self._books: List[Book] = list(books or [])
        self._lock = threading.Lock()

    def find_all(self) -> List[Book]:
        with self._lock:
            return [Book(**b.to_dict()) for b in self._books]

    def find_one(self, book_id: str) -> Optional[Book]:
        with self._lock:
            for b in self._books:
                if b.id == book_id:
                    return Book(**b.to_dict())
        return None

    def count(self, book_id: str) -> int:
        with self._lock:
            return sum(1 for b in self._books if b.id == book_id)

    def insert(self, book: Book) -> None:
        with self._lock:
            self._books.append(Book(**book.to_dict()))

    def update(self, book_id: str, fields: Dict[str, str]) -> int:
        with self._lock:
            for b in self._books:
                if b.id == book_id:
                    for name in BOOK_FIELDS:
                        if name in fields:
                            setattr(b, name, fields[name])
                    return 1
        return 0

    def delete(self, book_id: str) -> int:
        with self._lock:
            for i, b in enumerate(self._books):
                if b.id == book_id:
                    self._books.pop(i)
                    return 1
        return 0

    def is_empty(self) -> bool:
        with self._lock:
            return not self._books
