"""
Read-only aggregation routes: titles grouped by author and by year.
"""
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from api.dependencies import get_store
from domain.errors import StoreError
from repositories.base import BookStore
from services.aggregation import authors_from_store, years_from_store

router = APIRouter()


class AuthorGroupResponse(BaseModel):
    author: str
    books: List[str]


class YearGroupResponse(BaseModel):
    year: str
    books: List[str]


@router.get("/authors", response_model=List[AuthorGroupResponse])
def list_authors(store: BookStore = Depends(get_store)):
    """Titles grouped by author."""
    try:
        groups = authors_from_store(store)
    except StoreError:
        raise HTTPException(status_code=500, detail="DB error")
    return [AuthorGroupResponse(author=g.key, books=g.books) for g in groups]


@router.get("/years", response_model=List[YearGroupResponse])
def list_years(store: BookStore = Depends(get_store)):
    """Titles grouped by publication year."""
    try:
        groups = years_from_store(store)
    except StoreError:
        raise HTTPException(status_code=500, detail="DB error")
    return [YearGroupResponse(year=g.key, books=g.books) for g in groups]
