"""
The document store contract shared by every book store implementation.
"""
from typing import Dict, List, Optional, Protocol

from domain.models import Book


class BookStore(Protocol):
    """Collection of books keyed by an opaque string identifier."""

    def find_all(self) -> List[Book]:
        """Return every book, in insertion order."""
        ...

    def find_one(self, book_id: str) -> Optional[Book]:
        ...

    def count(self, book_id: str) -> int:
        """Number of stored books carrying ``book_id``."""
        ...

    def insert(self, book: Book) -> None:
        ...

    def update(self, book_id: str, fields: Dict[str, str]) -> int:
        """Replace the fields of the first matching book; return the matched count."""
        ...

    def delete(self, book_id: str) -> int:
        """Remove the first matching book; return the deleted count."""
        ...

    def is_empty(self) -> bool:
        ...
