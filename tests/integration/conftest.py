import os
from collections.abc import Generator
from pathlib import Path
from typing import Any

import psycopg
import pytest

from contentaudit.config.settings import Settings
from contentaudit.database.connection import close_pool, get_connection, init_pool
from tests.helpers import PG_TEST_COLLECTION

SCHEMA_SQL = Path(__file__).resolve().parents[2] / "contentaudit" / "database" / "schema.sql"


def _test_settings() -> Settings:
    os.environ.setdefault("DB_DATABASE", "content_test")
    return Settings()


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    return _test_settings()


@pytest.fixture(scope="session")
def integration_pool(test_settings: Settings) -> Generator[None, None, None]:
    try:
        init_pool(test_settings)
        with get_connection() as conn:
            conn.execute(SCHEMA_SQL.read_text(encoding="utf-8"))
            conn.commit()
    except Exception as e:
        close_pool()
        pytest.skip(f"PostgreSQL test DB not available: {e}. Set DB_* env to run.")
    try:
        yield
    finally:
        close_pool()


@pytest.fixture
def db_conn(integration_pool: None) -> Generator[psycopg.Connection[Any], None, None]:
    with get_connection() as conn:
        yield conn


@pytest.fixture
def seed_documents(db_conn: psycopg.Connection[Any]) -> Generator[dict[str, str], None, None]:
    """Insert test rows keyed by path; removed after the test."""
    documents = {
        "content/posts/a.json": '{"title": "A", "legacy": true}',
        "content/posts/b.json": "{broken",
    }
    with db_conn.cursor() as cur:
        for path, body in documents.items():
            cur.execute(
                "INSERT INTO content_documents (collection, path, body) VALUES (%s, %s, %s)",
                (PG_TEST_COLLECTION, path, body),
            )
    db_conn.commit()
    try:
        yield documents
    finally:
        db_conn.execute(
            "DELETE FROM content_documents WHERE collection = %s", (PG_TEST_COLLECTION,)
        )
        db_conn.commit()
