class SchemaError(Exception):
    """Raised when the content schema cannot be loaded or is inconsistent."""


class CollectionNotDeclaredError(SchemaError):
    """Raised when a collection name is not part of the schema."""
