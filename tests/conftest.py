from pathlib import Path
from typing import Any

import pytest

from contentaudit.schema.models import Collection, FieldDefinition, Schema, Template
from tests.helpers import write_document


@pytest.fixture()
def posts_collection() -> Collection:
    return Collection(
        name="posts",
        path="content/posts",
        fields=(
            FieldDefinition(name="title", type="string", required=True),
            FieldDefinition(name="draft", type="boolean", default=False),
            FieldDefinition(name="rating", type="number"),
            FieldDefinition(name="published", type="datetime"),
            FieldDefinition(name="status", type="string", options=("open", "closed")),
            FieldDefinition(name="tags", type="string", list=True, default=["news"]),
            FieldDefinition(
                name="author",
                type="object",
                fields=(
                    FieldDefinition(name="name", type="string", required=True),
                    FieldDefinition(name="email", type="string"),
                ),
            ),
        ),
    )


@pytest.fixture()
def pages_collection() -> Collection:
    return Collection(
        name="pages",
        path="content/pages",
        templates=(
            Template(
                name="landing",
                fields=(FieldDefinition(name="headline", type="string", required=True),),
            ),
            Template(
                name="about",
                fields=(FieldDefinition(name="body", type="string"),),
            ),
        ),
    )


@pytest.fixture()
def schema(posts_collection: Collection, pages_collection: Collection) -> Schema:
    return Schema(collections=(posts_collection, pages_collection))


@pytest.fixture()
def schema_data() -> dict[str, Any]:
    """JSON form of the posts/pages schema."""
    return {
        "collections": [
            {
                "name": "posts",
                "path": "content/posts",
                "format": "json",
                "fields": [
                    {"name": "title", "type": "string", "required": True},
                    {"name": "draft", "type": "boolean", "default": False},
                    {"name": "status", "type": "string", "options": ["open", "closed"]},
                ],
            },
            {
                "name": "pages",
                "path": "content/pages",
                "templates": [
                    {
                        "name": "landing",
                        "fields": [{"name": "headline", "type": "string", "required": True}],
                    }
                ],
            },
        ]
    }


@pytest.fixture()
def content_root(tmp_path: Path, schema_data: dict[str, Any]) -> Path:
    """A content root holding .contentaudit/schema.json and no documents."""
    write_document(tmp_path, ".contentaudit/schema.json", schema_data)
    return tmp_path
