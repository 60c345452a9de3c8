from pathlib import Path

import pytest

from api.dependencies import build_store
from repositories import InMemoryBookStore
from settings import Settings


def test_settings_defaults(monkeypatch):
    for name in ("BOOKSTORE_BACKEND", "PORT", "MONGO_DATABASE", "MONGO_COLLECTION", "BOOKSTORE_SEED_DATA"):
        monkeypatch.delenv(name, raising=False)
    config = Settings()
    assert config.BOOKSTORE_BACKEND == "sql"
    assert config.PORT == 3030
    assert config.MONGO_DATABASE == "exercise-1"
    assert config.MONGO_COLLECTION == "information"
    assert config.SEED_DATA is False


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("BOOKSTORE_BACKEND", " Memory ")
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("BOOKSTORE_SEED_DATA", "yes")
    config = Settings()
    assert config.BOOKSTORE_BACKEND == "memory"
    assert config.PORT == 8080
    assert config.SEED_DATA is True


def test_build_memory_store(monkeypatch):
    monkeypatch.setenv("BOOKSTORE_BACKEND", "memory")
    assert isinstance(build_store(Settings()), InMemoryBookStore)


def test_unknown_backend_is_rejected(monkeypatch):
    monkeypatch.setenv("BOOKSTORE_BACKEND", "cassandra")
    with pytest.raises(ValueError):
        build_store(Settings())


def test_startup_seeds_configured_store(monkeypatch, memory_store):
    from fastapi.testclient import TestClient

    from api import main
    from api.dependencies import get_store

    monkeypatch.setattr(main.settings, "SEED_DATA", True)
    monkeypatch.setattr(main, "get_store", lambda: memory_store)
    main.app.dependency_overrides[get_store] = lambda: memory_store
    try:
        with TestClient(main.app) as client:
            assert len(client.get("/api/books").json()) == 5
    finally:
        main.app.dependency_overrides.clear()


def test_log_level_falls_back_on_unknown_names(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "verbose")
    assert Settings().LOG_LEVEL == "INFO"
    monkeypatch.setenv("LOG_LEVEL", "debug")
    assert Settings().LOG_LEVEL == "DEBUG"
    monkeypatch.setenv("LOG_LEVEL", "")
    assert Settings().LOG_LEVEL == "INFO"


def test_container_serves_the_app_on_default_port():
    dockerfile = (Path(__file__).resolve().parents[2] / "Dockerfile").read_text(encoding="utf-8")
    assert "EXPOSE 3030" in dockerfile
    assert '"api.main:app"' in dockerfile
