import logging
import os
from pathlib import Path

# Basic settings helper to read environment configuration.

BACKEND_ROOT = Path(__file__).resolve().parent


def _as_bool(val: str | None, default: bool = False) -> bool:
    if val is None:
        return default
    return val.lower() in ("1", "true", "yes", "on")


def _as_int(val: str | None, default: int) -> int:
    if val is None or not val.strip():
        return default
    return int(val)


def _as_log_level(val: str | None, default: str = "INFO") -> str:
    level = (val or default).strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        return default
    return level


class Settings:
    def __init__(self) -> None:
        self.BOOKSTORE_BACKEND: str = os.getenv("BOOKSTORE_BACKEND", "sql").strip().lower()
        self.DATABASE_URL: str = os.getenv("DATABASE_URL", f"sqlite:///{BACKEND_ROOT / 'app.db'}")
        self.MONGO_URI: str = os.getenv("MONGO_URI", "mongodb://localhost:27017")
        self.MONGO_DATABASE: str = os.getenv("MONGO_DATABASE", "exercise-1")
        self.MONGO_COLLECTION: str = os.getenv("MONGO_COLLECTION", "information")
        self.SEED_DATA: bool = _as_bool(os.getenv("BOOKSTORE_SEED_DATA"), False)
        self.SEED_FILE: Path = Path(
            os.getenv("BOOKSTORE_SEED_FILE", str(BACKEND_ROOT / "data" / "sample_books.json"))
        )
        self.HOST: str = os.getenv("HOST", "0.0.0.0")
        self.PORT: int = _as_int(os.getenv("PORT"), 3030)
        self.LOG_LEVEL: str = _as_log_level(os.getenv("LOG_LEVEL"))


settings = Settings()
