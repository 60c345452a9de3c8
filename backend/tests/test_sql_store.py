import pytest
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import sessionmaker

from db import init_db, make_engine
from domain.errors import StoreError
from repositories import SqlBookStore
from services.aggregation import group_by_year

from conftest import make_book


@pytest.fixture
def sql_store(tmp_path):
    engine = make_engine(f"sqlite:///{tmp_path / 'books.db'}")
    init_db(bind=engine)
    store = SqlBookStore(sessionmaker(bind=engine, autoflush=False, autocommit=False))
    yield store
    engine.dispose()


def test_insert_and_find_keep_insertion_order(sql_store):
    assert sql_store.is_empty()
    for book in (
        make_book("z9", "Last id first", author="a", year="2020"),
        make_book("a1", "Second", author="b", year="2020"),
        make_book("m5", "Third", author="a", year="2021"),
    ):
        sql_store.insert(book)

    assert not sql_store.is_empty()
    assert [b.id for b in sql_store.find_all()] == ["z9", "a1", "m5"]
    assert [g.books for g in group_by_year(sql_store.find_all())] == [
        ["Last id first", "Second"],
        ["Third"],
    ]


def test_count_find_one_update_delete(sql_store):
    sql_store.insert(make_book("b1", "Title", author="Someone", year="1999", edition="1st", pages="10"))
    assert sql_store.count("b1") == 1
    assert sql_store.count("missing") == 0

    assert sql_store.update("b1", {"title": "New title", "pages": "12"}) == 1
    book = sql_store.find_one("b1")
    assert book.title == "New title"
    assert book.pages == "12"
    assert book.author == "Someone"

    assert sql_store.update("missing", {"title": "x"}) == 0
    assert sql_store.find_one("missing") is None

    assert sql_store.delete("b1") == 1
    assert sql_store.delete("b1") == 0
    assert sql_store.is_empty()


def test_driver_errors_become_store_errors(sql_store, monkeypatch):
    def broken_session():
        raise OperationalError("SELECT 1", {}, Exception("database is locked"))

    monkeypatch.setattr(sql_store, "session_factory", broken_session)
    with pytest.raises(StoreError) as excinfo:
        sql_store.find_all()
    assert excinfo.value.operation == "find_all"
    assert isinstance(excinfo.value.__cause__, OperationalError)
