import sys
from pathlib import Path

import pytest

# Ensure the backend package root is on sys.path for direct pytest runs
BACKEND_ROOT = Path(__file__).resolve().parents[1]
if str(BACKEND_ROOT) not in sys.path:
    sys.path.insert(0, str(BACKEND_ROOT))

from domain.models import Book  # noqa: E402
from repositories import InMemoryBookStore  # noqa: E402


@pytest.fixture
def memory_store():
    return InMemoryBookStore()


@pytest.fixture
def client(memory_store):
    """TestClient whose routes use the in-memory store."""
    from fastapi.testclient import TestClient

    from api.dependencies import get_store
    from api.main import app

    app.dependency_overrides[get_store] = lambda: memory_store
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


def make_book(book_id: str, title: str, author: str = "", year: str = "", **kw) -> Book:
    return Book(id=book_id, title=title, author=author, year=year, **kw)
