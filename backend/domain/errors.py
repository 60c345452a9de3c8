"""
Domain errors raised by the document stores.
"""


class StoreError(Exception):
    """The underlying document store failed (connectivity, query, write)."""

    def __init__(self, operation: str, message: str = ""):
        self.operation = operation
        super().__init__(f"{operation} failed: {message}" if message else f"{operation} failed")
