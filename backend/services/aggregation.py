"""
Aggregation service: group book titles by author or by publication year.

Groups are derived on every read and never cached. Group order is the order in
which each key first appears in the input; titles keep their input order.
"""
from collections import defaultdict
from typing import Callable, Iterable, List

from domain.models import Book, BookGroup
from repositories.base import BookStore


def group_titles(books: Iterable[Book], key: Callable[[Book], str]) -> List[BookGroup]:
    """
    Partition ``books`` by ``key`` and collect the titles of each partition.

    Args:
        books: Snapshot of the collection
        key: Extracts the grouping value from a book

    Returns:
        One BookGroup per distinct key; empty input gives an empty list
    """
    titles_by_key: dict[str, List[str]] = defaultdict(list)
    for book in books:
        titles_by_key[key(book)].append(book.title)
    return [BookGroup(key=k, books=titles) for k, titles in titles_by_key.items()]


def group_by_author(books: Iterable[Book]) -> List[BookGroup]:
    return group_titles(books, lambda b: b.author)


def group_by_year(books: Iterable[Book]) -> List[BookGroup]:
    return group_titles(books, lambda b: b.year)


def authors_from_store(store: BookStore) -> List[BookGroup]:
    """Read the whole collection once and group it by author."""
    return group_by_author(store.find_all())


def years_from_store(store: BookStore) -> List[BookGroup]:
    """Read the whole collection once and group it by year."""
    return group_by_year(store.find_all())
