"""Schema conformance for a single document.

conform_document builds the payload that would be submitted through the
write path; validate_document reports what keeps that payload from being
accepted.
"""

import copy
from datetime import datetime
from typing import Any

from contentaudit.audit.models import DocumentIssue
from contentaudit.schema.models import Collection, FieldDefinition

TEMPLATE_KEY = "_template"


def conform_document(
    collection: Collection,
    data: dict[str, Any],
    use_default_values: bool = False,
) -> dict[str, Any]:
    """Return a copy of data restricted to declared fields, in schema order.

    Undeclared keys are dropped. With use_default_values, missing top-level
    non-list fields that declare a default are filled in.
    """
    result: dict[str, Any] = {}
    if collection.is_templated and TEMPLATE_KEY in data:
        result[TEMPLATE_KEY] = data[TEMPLATE_KEY]
    for definition in _fields_for(collection, data):
        if definition.name in data:
            result[definition.name] = _conform_value(definition, data[definition.name])
        elif use_default_values and definition.has_default and not definition.list:
            result[definition.name] = copy.deepcopy(definition.default)
    return result


def validate_document(collection: Collection, data: dict[str, Any]) -> list[DocumentIssue]:
    """Check a document against its collection's fields."""
    if collection.is_templated:
        name = data.get(TEMPLATE_KEY)
        if not isinstance(name, str) or not name:
            return [DocumentIssue(TEMPLATE_KEY, "template name is missing")]
        if collection.get_template(name) is None:
            declared = [t.name for t in collection.templates]
            return [
                DocumentIssue(TEMPLATE_KEY, f"unknown template '{name}', expected one of {declared}")
            ]
    issues: list[DocumentIssue] = []
    _validate_fields(_fields_for(collection, data), data, "", issues)
    return issues


def _fields_for(collection: Collection, data: dict[str, Any]) -> tuple[FieldDefinition, ...]:
    if not collection.is_templated:
        return collection.fields
    name = data.get(TEMPLATE_KEY)
    template = collection.get_template(name) if isinstance(name, str) else None
    return template.fields if template is not None else ()


def _conform_value(definition: FieldDefinition, value: Any) -> Any:
    if definition.type != "object":
        return value
    if definition.list and isinstance(value, list):
        return [_conform_object(definition, item) for item in value]
    return _conform_object(definition, value)


def _conform_object(definition: FieldDefinition, value: Any) -> Any:
    if not isinstance(value, dict):
        return value
    return {
        child.name: _conform_value(child, value[child.name])
        for child in definition.fields
        if child.name in value
    }


def _validate_fields(
    fields: tuple[FieldDefinition, ...],
    data: dict[str, Any],
    prefix: str,
    issues: list[DocumentIssue],
) -> None:
    for definition in fields:
        path = f"{prefix}{definition.name}"
        value = data.get(definition.name)
        if value is None:
            if definition.required:
                issues.append(DocumentIssue(path, "required field is missing"))
            continue
        if definition.list:
            if not isinstance(value, list):
                issues.append(DocumentIssue(path, "expected a list"))
                continue
            for index, item in enumerate(value):
                _validate_value(definition, item, f"{path}[{index}]", issues)
        else:
            _validate_value(definition, value, path, issues)


def _validate_value(
    definition: FieldDefinition,
    value: Any,
    path: str,
    issues: list[DocumentIssue],
) -> None:
    ftype = definition.type
    if ftype == "string":
        if not isinstance(value, str):
            issues.append(DocumentIssue(path, "expected a string"))
        elif definition.options and value not in definition.options:
            issues.append(
                DocumentIssue(path, f"'{value}' is not one of {list(definition.options)}")
            )
    elif ftype == "number":
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            issues.append(DocumentIssue(path, "expected a number"))
    elif ftype == "boolean":
        if not isinstance(value, bool):
            issues.append(DocumentIssue(path, "expected a boolean"))
    elif ftype == "datetime":
        if not isinstance(value, str) or not _is_iso_datetime(value):
            issues.append(DocumentIssue(path, "expected an ISO 8601 date or datetime"))
    elif ftype == "object":
        if not isinstance(value, dict):
            issues.append(DocumentIssue(path, "expected an object"))
        else:
            _validate_fields(definition.fields, value, f"{path}.", issues)


def _is_iso_datetime(value: str) -> bool:
    candidate = value[:-1] + "+00:00" if value.endswith("Z") else value
    try:
        datetime.fromisoformat(candidate)
    except ValueError:
        return False
    return True
