class StoreError(Exception):
    """Base exception for all document store errors."""


class CollectionNotFoundError(StoreError):
    """Raised when a store is asked about a collection it does not know."""


class DocumentNotFoundError(StoreError):
    """Raised when a referenced document no longer exists."""


class DocumentParseError(StoreError):
    """Raised when a stored document body cannot be read as a JSON object."""
