"""
Books API routes.
"""
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response
from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from api.dependencies import get_store
from domain.errors import StoreError
from domain.models import Book
from repositories.base import BookStore

router = APIRouter()
logger = logging.getLogger(__name__)


def _field(*names: str):
    return Field(default="", validation_alias=AliasChoices(*names))


class BookPayload(BaseModel):
    """Request body; accepts the legacy ``BookName``-style keys as well."""

    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    id: str = _field("ID", "id")
    title: str = _field("BookName", "title")
    author: str = _field("BookAuthor", "author")
    edition: str = _field("BookEdition", "edition")
    pages: str = _field("BookPages", "pages")
    year: str = _field("BookYear", "year")


class BookResponse(BaseModel):
    id: str
    title: str
    author: str
    edition: str
    pages: str
    year: str


def book_to_response(book: Book) -> BookResponse:
    """Convert domain Book to API response."""
    return BookResponse(**book.to_dict())


@router.get("", response_model=List[BookResponse])
def list_books(store: BookStore = Depends(get_store)):
    """List all books."""
    try:
        books = store.find_all()
    except StoreError:
        raise HTTPException(status_code=500, detail="DB error")
    return [book_to_response(b) for b in books]


@router.get("/{book_id}", response_model=BookResponse)
def get_book(book_id: str, store: BookStore = Depends(get_store)):
    """Get a book by ID."""
    try:
        book = store.find_one(book_id)
    except StoreError:
        raise HTTPException(status_code=500, detail="DB error")
    if not book:
        raise HTTPException(status_code=404, detail="Book not found")
    return book_to_response(book)


@router.post("", status_code=201)
def create_book(data: BookPayload, store: BookStore = Depends(get_store)):
    """Create a new book; the identifier must not exist yet."""
    if not data.id or not data.title:
        raise HTTPException(status_code=400, detail="Missing required fields: id and title")

    try:
        existing = store.count(data.id)
    except StoreError:
        raise HTTPException(status_code=500, detail="DB error")
    if existing > 0:
        raise HTTPException(status_code=409, detail="Duplicate entry")

    try:
        store.insert(Book(**data.model_dump()))
    except StoreError:
        raise HTTPException(status_code=500, detail="Insert error")
    logger.info("Created book %s", data.id)
    return Response(status_code=201)


@router.put("/{book_id}")
def update_book(book_id: str, data: BookPayload, store: BookStore = Depends(get_store)):
    """Replace the supplied fields of a book; the identifier itself is never changed."""
    fields = data.model_dump(exclude_unset=True, exclude={"id"})
    try:
        matched = store.update(book_id, fields)
    except StoreError:
        raise HTTPException(status_code=500, detail="Update error")
    if matched == 0:
        raise HTTPException(status_code=404, detail="Book not found")
    return Response(status_code=200)


@router.delete("/{book_id}")
def delete_book(book_id: str, store: BookStore = Depends(get_store)):
    """Delete a book."""
    try:
        deleted = store.delete(book_id)
    except StoreError:
        raise HTTPException(status_code=500, detail="Delete error")
    if deleted == 0:
        raise HTTPException(status_code=404, detail="Book not found")
    logger.info("Deleted book %s", book_id)
    return Response(status_code=200)
