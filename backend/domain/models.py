"""
Core domain models for the bookstore service.
These are framework-agnostic and shared by the stores, services and routes.
"""
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List

# Fields replaced by an update; the identifier never changes.
BOOK_FIELDS = ("title", "author", "edition", "pages", "year")

# Key names used by the legacy Mongo documents and request bodies.
LEGACY_FIELD_NAMES = {
    "ID": "id",
    "BookName": "title",
    "BookAuthor": "author",
    "BookEdition": "edition",
    "BookPages": "pages",
    "BookYear": "year",
}
FIELD_TO_LEGACY = {v: k for k, v in LEGACY_FIELD_NAMES.items()}


def normalize_keys(data: Dict[str, Any]) -> Dict[str, Any]:
    """Map legacy keys (``BookName`` ...) onto the lower-case field names."""
    return {LEGACY_FIELD_NAMES.get(k, k): v for k, v in data.items()}


@dataclass
class Book:
    """A single book record in the collection."""
    id: str
    title: str
    author: str = ""
    edition: str = ""
    pages: str = ""  # numeric, kept as text on the wire
    year: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Book":
        return cls(
            id=str(data.get("id", "")),
            title=str(data.get("title", "")),
            author=str(data.get("author", "")),
            edition=str(data.get("edition", "")),
            pages=str(data.get("pages", "")),
            year=str(data.get("year", "")),
        )


@dataclass
class BookGroup:
    """
    Derived, never persisted: a grouping key and the titles sharing it.

    Used for both the author and the year aggregations.
    """
    key: str
    books: List[str] = field(default_factory=list)
