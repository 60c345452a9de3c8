from .base import BookStore
from .books import SqlBookStore
from .memory import InMemoryBookStore
from . import models

__all__ = ["BookStore", "SqlBookStore", "InMemoryBookStore", "models"]
