from dataclasses import dataclass, field
from typing import Any

from contentaudit.schema.exceptions import CollectionNotDeclaredError

FIELD_TYPES = frozenset({"string", "number", "boolean", "datetime", "object"})


@dataclass(frozen=True)
class FieldDefinition:
    """A single declared field of a collection or template."""

    name: str
    type: str
    required: bool = False
    list: bool = False
    default: Any = None
    options: tuple[str, ...] = ()
    fields: tuple["FieldDefinition", ...] = ()

    @property
    def has_default(self) -> bool:
        return self.default is not None


@dataclass(frozen=True)
class Template:
    """Named field set used by templated collections."""

    name: str
    fields: tuple[FieldDefinition, ...] = ()


@dataclass(frozen=True)
class Collection:
    """A named group of documents stored under one directory."""

    name: str
    path: str
    format: str = "json"
    fields: tuple[FieldDefinition, ...] = ()
    templates: tuple[Template, ...] = ()

    @property
    def is_templated(self) -> bool:
        return bool(self.templates)

    def get_template(self, name: str) -> Template | None:
        for template in self.templates:
            if template.name == name:
                return template
        return None


@dataclass(frozen=True)
class Schema:
    """Ordered set of collections declared for a content root."""

    collections: tuple[Collection, ...] = field(default_factory=tuple)

    def get_collections(self) -> list[Collection]:
        return list(self.collections)

    def get_collection(self, name: str) -> Collection:
        """Look up a collection by name.

        Raises:
            CollectionNotDeclaredError: if the schema has no such collection.
        """
        for collection in self.collections:
            if collection.name == name:
                return collection
        raise CollectionNotDeclaredError(f"Collection '{name}' is not declared in the schema")
