"""
Book store backed by SQLAlchemy (SQLite by default).
"""
import logging
from datetime import datetime
from typing import Dict, List, Optional

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from db import SessionLocal
from domain.errors import StoreError
from domain.models import BOOK_FIELDS, Book
from repositories.models import BookORM

logger = logging.getLogger(__name__)


def _book_from_orm(orm: BookORM) -> Book:
    return Book(
        id=orm.id,
        title=orm.title,
        author=orm.author,
        edition=orm.edition,
        pages=orm.pages,
        year=orm.year,
    )


def _first_match(session: Session, book_id: str) -> Optional[BookORM]:
    return (
        session.query(BookORM)
        .filter(BookORM.id == book_id)
        .order_by(BookORM.seq)
        .first()
    )


class SqlBookStore:
    """CRUD operations for books, one session per operation."""

    def __init__(self, session_factory: sessionmaker = SessionLocal):
        self.session_factory = session_factory

    def find_all(self) -> List[Book]:
        try:
            with self.session_factory() as session:
                books = session.query(BookORM).order_by(BookORM.seq).all()
                return [_book_from_orm(b) for b in books]
        except SQLAlchemyError as e:
            logger.exception("find_all failed")
            raise StoreError("find_all", str(e)) from e

    def find_one(self, book_id: str) -> Optional[Book]:
        try:
            with self.session_factory() as session:
                orm = _first_match(session, book_id)
                return _book_from_orm(orm) if orm else None
        except SQLAlchemyError as e:
            logger.exception("find_one failed for %s", book_id)
            raise StoreError("find_one", str(e)) from e

    def count(self, book_id: str) -> int:
        try:
            with self.session_factory() as session:
                return (
                    session.query(func.count(BookORM.seq))
                    .filter(BookORM.id == book_id)
                    .scalar()
                    or 0
                )
        except SQLAlchemyError as e:
            logger.exception("count failed for %s", book_id)
            raise StoreError("count", str(e)) from e

    def insert(self, book: Book) -> None:
        now = datetime.utcnow()
        try:
            with self.session_factory() as session:
                session.add(BookORM(**book.to_dict(), created_at=now, updated_at=now))
                session.commit()
        except SQLAlchemyError as e:
            logger.exception("insert failed for %s", book.id)
            raise StoreError("insert", str(e)) from e

    def update(self, book_id: str, fields: Dict[str, str]) -> int:
        try:
            with self.session_factory() as session:
                orm = _first_match(session, book_id)
                if not orm:
                    return 0
                for name in BOOK_FIELDS:
                    if name in fields:
                        setattr(orm, name, fields[name])
                orm.updated_at = datetime.utcnow()
                session.commit()
                return 1
        except SQLAlchemyError as e:
            logger.exception("update failed for %s", book_id)
            raise StoreError("update", str(e)) from e

    def delete(self, book_id: str) -> int:
        try:
            with self.session_factory() as session:
                orm = _first_match(session, book_id)
                if not orm:
                    return 0
                session.delete(orm)
                session.commit()
                return 1
        except SQLAlchemyError as e:
            logger.exception("delete failed for %s", book_id)
            raise StoreError("delete", str(e)) from e

    def is_empty(self) -> bool:
        try:
            with self.session_factory() as session:
                return session.query(BookORM.seq).first() is None
        except SQLAlchemyError as e:
            logger.exception("is_empty failed")
            raise StoreError("is_empty", str(e)) from e
