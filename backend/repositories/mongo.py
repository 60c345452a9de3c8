"""
Book store backed by a MongoDB collection (pymongo).

Documents use the legacy key names (``ID``, ``BookName``, ``BookAuthor``,
``BookEdition``, ``BookPages``, ``BookYear``) so existing collections stay
readable and writable.
"""
import logging
from typing import Any, Dict, List, Optional

from pymongo import ASCENDING, MongoClient
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from domain.errors import StoreError
from domain.models import BOOK_FIELDS, FIELD_TO_LEGACY, Book, normalize_keys

logger = logging.getLogger(__name__)

# Never return Mongo's internal ObjectId to callers.
_PROJECTION = {"_id": 0}
_ID_KEY = FIELD_TO_LEGACY["id"]


def _book_to_document(book: Book) -> Dict[str, Any]:
    return {FIELD_TO_LEGACY[k]: v for k, v in book.to_dict().items()}


def _book_from_document(doc: Dict[str, Any]) -> Book:
    return Book.from_dict(normalize_keys(doc))


def _id_filter(book_id: str) -> Dict[str, str]:
    return {_ID_KEY: book_id}


class MongoBookStore:
    """CRUD operations for books stored as documents keyed by ``ID``."""

    def __init__(self, collection: Collection):
        self.collection = collection

    @classmethod
    def connect(cls, uri: str, database: str, collection: str) -> "MongoBookStore":
        client = MongoClient(uri)
        logger.info("Using MongoDB collection %s.%s", database, collection)
        return cls(client[database][collection])

    def find_all(self) -> List[Book]:
        try:
            docs = self.collection.find({}, _PROJECTION).sort("_id", ASCENDING)
            return [_book_from_document(d) for d in docs]
        except PyMongoError as e:
            logger.exception("find_all failed")
            raise StoreError("find_all", str(e)) from e

    def find_one(self, book_id: str) -> Optional[Book]:
        try:
            doc = self.collection.find_one(_id_filter(book_id), _PROJECTION)
        except PyMongoError as e:
            logger.exception("find_one failed for %s", book_id)
            raise StoreError("find_one", str(e)) from e
        return _book_from_document(doc) if doc else None

    def count(self, book_id: str) -> int:
        try:
            return self.collection.count_documents(_id_filter(book_id))
        except PyMongoError as e:
            logger.exception("count failed for %s", book_id)
            raise StoreError("count", str(e)) from e

    def insert(self, book: Book) -> None:
        try:
            self.collection.insert_one(_book_to_document(book))
        except PyMongoError as e:
            logger.exception("insert failed for %s", book.id)
            raise StoreError("insert", str(e)) from e

    def update(self, book_id: str, fields: Dict[str, str]) -> int:
        changes = {FIELD_TO_LEGACY[name]: fields[name] for name in BOOK_FIELDS if name in fields}
        try:
            if not changes:
                # Older servers reject an empty $set; report the match only.
                return self.collection.count_documents(_id_filter(book_id), limit=1)
            res = self.collection.update_one(_id_filter(book_id), {"$set": changes})
        except PyMongoError as e:
            logger.exception("update failed for %s", book_id)
            raise StoreError("update", str(e)) from e
        return res.matched_count

    def delete(self, book_id: str) -> int:
        try:
            res = self.collection.delete_one(_id_filter(book_id))
        except PyMongoError as e:
            logger.exception("delete failed for %s", book_id)
            raise StoreError("delete", str(e)) from e
        return res.deleted_count

    def is_empty(self) -> bool:
        try:
            return self.collection.find_one({}, _PROJECTION) is None
        except PyMongoError as e:
            logger.exception("is_empty failed")
            raise StoreError("is_empty", str(e)) from e
