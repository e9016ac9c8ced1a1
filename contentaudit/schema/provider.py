"""Loads the content schema from its JSON definition file."""

import json
from pathlib import Path
from typing import Any

from contentaudit.logging.logger import Log
from contentaudit.schema.exceptions import SchemaError
from contentaudit.schema.models import (
    FIELD_TYPES,
    Collection,
    FieldDefinition,
    Schema,
    Template,
)


class SchemaProvider:
    """Reads and builds the Schema for a content root."""

    def __init__(self, schema_path: Path) -> None:
        self._schema_path = schema_path
        self._schema: Schema | None = None

    def get_schema(self) -> Schema:
        """Load the schema file once and return the cached Schema afterwards.

        Raises:
            SchemaError: if the file is unreadable, not JSON or inconsistent.
        """
        if self._schema is not None:
            return self._schema
        try:
            raw = self._schema_path.read_text(encoding="utf-8")
        except OSError as exc:
            raise SchemaError(f"Failed to read schema {self._schema_path}: {exc}") from exc
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise SchemaError(f"Schema {self._schema_path} is not valid JSON: {exc}") from exc
        self._schema = build_schema(data)
        Log.debug(
            f"Loaded schema with {len(self._schema.collections)} collections "
            f"from {self._schema_path}"
        )
        return self._schema


def build_schema(data: Any) -> Schema:
    """Build a Schema from its parsed JSON form.

    Raises:
        SchemaError: on any structural problem.
    """
    if not isinstance(data, dict) or not isinstance(data.get("collections"), list):
        raise SchemaError("Schema must be an object with a 'collections' list")
    collections: list[Collection] = []
    seen: set[str] = set()
    for index, raw in enumerate(data["collections"]):
        collection = _build_collection(raw, index)
        if collection.name in seen:
            raise SchemaError(f"Duplicate collection name: {collection.name}")
        seen.add(collection.name)
        collections.append(collection)
    return Schema(collections=tuple(collections))


def _build_collection(raw: Any, index: int) -> Collection:
    if not isinstance(raw, dict):
        raise SchemaError(f"Collection at index {index} must be an object")
    name = raw.get("name")
    if not name or not isinstance(name, str):
        raise SchemaError(f"Collection at index {index}: 'name' must be a non-empty string")
    path = raw.get("path")
    if not isinstance(path, str):
        raise SchemaError(f"Collection '{name}': 'path' must be a string")
    fmt = raw.get("format", "json")
    if not isinstance(fmt, str) or not fmt:
        raise SchemaError(f"Collection '{name}': 'format' must be a non-empty string")

    has_fields = "fields" in raw
    has_templates = "templates" in raw
    if has_fields == has_templates:
        raise SchemaError(
            f"Collection '{name}' must declare exactly one of 'fields' or 'templates'"
        )
    fields: tuple[FieldDefinition, ...] = ()
    templates: tuple[Template, ...] = ()
    if has_fields:
        fields = _build_fields(raw["fields"], owner=name)
    else:
        templates = _build_templates(raw["templates"], owner=name)
    return Collection(
        name=name,
        path=path.strip("/"),
        format=fmt.lstrip("."),
        fields=fields,
        templates=templates,
    )


def _build_templates(raw: Any, owner: str) -> tuple[Template, ...]:
    if not isinstance(raw, list) or not raw:
        raise SchemaError(f"Collection '{owner}': 'templates' must be a non-empty list")
    templates: list[Template] = []
    for index, item in enumerate(raw):
        if not isinstance(item, dict) or not isinstance(item.get("name"), str):
            raise SchemaError(f"Collection '{owner}': template at index {index} needs a name")
        label = f"{owner}.{item['name']}"
        templates.append(
            Template(name=item["name"], fields=_build_fields(item.get("fields", []), owner=label))
        )
    return tuple(templates)


def _build_fields(raw: Any, owner: str) -> tuple[FieldDefinition, ...]:
    if not isinstance(raw, list):
        raise SchemaError(f"'{owner}': 'fields' must be a list")
    fields: list[FieldDefinition] = []
    names: set[str] = set()
    for index, item in enumerate(raw):
        definition = _build_field(item, index, owner)
        if definition.name in names:
            raise SchemaError(f"'{owner}': duplicate field '{definition.name}'")
        names.add(definition.name)
        fields.append(definition)
    return tuple(fields)


def _build_field(raw: Any, index: int, owner: str) -> FieldDefinition:
    if not isinstance(raw, dict):
        raise SchemaError(f"'{owner}': field at index {index} must be an object")
    name = raw.get("name")
    if not name or not isinstance(name, str):
        raise SchemaError(f"'{owner}': field at index {index} needs a non-empty 'name'")
    ftype = raw.get("type")
    if ftype not in FIELD_TYPES:
        raise SchemaError(
            f"'{owner}.{name}': 'type' must be one of {sorted(FIELD_TYPES)}, got {ftype!r}"
        )
    options = raw.get("options", [])
    if not isinstance(options, list) or not all(isinstance(o, str) for o in options):
        raise SchemaError(f"'{owner}.{name}': 'options' must be a list of strings")
    nested: tuple[FieldDefinition, ...] = ()
    if ftype == "object":
        nested = _build_fields(raw.get("fields", []), owner=f"{owner}.{name}")
    return FieldDefinition(
        name=name,
        type=ftype,
        required=bool(raw.get("required", False)),
        list=bool(raw.get("list", False)),
        default=raw.get("default"),
        options=tuple(options),
        fields=nested,
    )
