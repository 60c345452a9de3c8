"""
Document store wiring for the API.

Routes receive the store through ``Depends(get_store)``; tests swap it with
``app.dependency_overrides[get_store]``.
"""
import logging
from functools import lru_cache

from repositories import InMemoryBookStore, SqlBookStore
from repositories.base import BookStore
from settings import Settings, settings

logger = logging.getLogger(__name__)


def build_store(config: Settings) -> BookStore:
    """Create the store selected by ``BOOKSTORE_BACKEND``."""
    backend = config.BOOKSTORE_BACKEND
    if backend == "sql":
        from db import init_db

        init_db()
        logger.info("Using SQL book store")
        return SqlBookStore()
    if backend == "mongo":
        from repositories.mongo import MongoBookStore

        return MongoBookStore.connect(
            config.MONGO_URI, config.MONGO_DATABASE, config.MONGO_COLLECTION
        )
    if backend == "memory":
        logger.info("Using in-memory book store")
        return InMemoryBookStore()
    raise ValueError(f"Unknown BOOKSTORE_BACKEND: {backend}")


@lru_cache(maxsize=1)
def get_store() -> BookStore:
    return build_store(settings)
