import json
from pathlib import Path
from typing import Any


def write_document(root: Path, relative_path: str, content: dict[str, Any] | str) -> Path:
    """Write a document under root; dicts are JSON-encoded, strings written verbatim."""
    path = root / relative_path
    path.parent.mkdir(parents=True, exist_ok=True)
    body = content if isinstance(content, str) else json.dumps(content)
    path.write_text(body, encoding="utf-8")
    return path


PG_TEST_COLLECTION = "integration_posts"
