"""
SQLAlchemy ORM models for persistence.
"""
from datetime import datetime
from sqlalchemy import Column, DateTime, Integer, String

from db import Base


class BookORM(Base):
    __tablename__ = "books"

    # Surrogate key keeps retrieval in insertion order; uniqueness of ``id``
    # is checked by the API before insert, not by the table.
    seq = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String, nullable=False, index=True)
    title = Column(String, nullable=False)
    author = Column(String, nullable=False, default="")
    edition = Column(String, nullable=False, default="")
    pages = Column(String, nullable=False, default="")
    year = Column(String, nullable=False, default="")
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, nullable=False)
