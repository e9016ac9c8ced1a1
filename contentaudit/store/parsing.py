import json
from typing import Any

from contentaudit.store.exceptions import DocumentParseError


def parse_document(path: str, raw: str) -> dict[str, Any]:
    """Parse a stored body into a document mapping.

    Raises:
        DocumentParseError: if the body is not JSON or not an object.
    """
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise DocumentParseError(f"Document {path} is not valid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise DocumentParseError(f"Document {path} must contain a JSON object")
    return data


def serialize_document(data: dict[str, Any]) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False) + "\n"
