"""
Test fixtures: in-memory SQLite relational store, in-memory fake Mongo
collection, and a TestClient around an app built with both.
"""
import asyncio

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient
from pymongo.results import InsertOneResult
from sqlalchemy import text
from sqlalchemy.pool import StaticPool

from app.core.config import Settings
from app.db.mongodb import DocumentStore
from app.db.relational import RelationalStore
from app.main import create_app

SCHEMA = [
    """
    CREATE TABLE notices (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        title TEXT NOT NULL,
        content TEXT NOT NULL,
        created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
    )
    """,
    """
    CREATE TABLE applicants (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        name TEXT NOT NULL,
        age INTEGER,
        gender TEXT,
        phone TEXT,
        address TEXT,
        resume_id TEXT NOT NULL,
        created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
    )
    """,
    """
    CREATE TABLE inquiries (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        name TEXT,
        email TEXT,
        title TEXT,
        message TEXT,
        created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
    )
    """,
]


class FakeCollection:
    """Just enough of pymongo's Collection for insert_one/find_one by _id."""

    def __init__(self):
        self.docs = {}

    def insert_one(self, doc):
        _id = ObjectId()
        self.docs[_id] = dict(doc, _id=_id)
        return InsertOneResult(_id, acknowledged=True)

    def find_one(self, query):
        doc = self.docs.get(query["_id"])
        return dict(doc) if doc is not None else None


def make_sqlite_store(**kwargs) -> RelationalStore:
    store = RelationalStore(
        "sqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
        **kwargs,
    )
    asyncio.run(store.supervisor.connect())
    with store.connection() as conn:
        for ddl in SCHEMA:
            conn.execute(text(ddl))
    return store


@pytest.fixture
def relational_store():
    store = make_sqlite_store()
    yield store
    store.supervisor.stop()


@pytest.fixture
def resume_collection():
    return FakeCollection()


@pytest.fixture
def document_store(resume_collection):
    return DocumentStore(uri=None, collection=resume_collection)


@pytest.fixture
def static_dir(tmp_path):
    path = tmp_path / "admin_public"
    path.mkdir()
    (path / "index.html").write_text("<html><body>관리자</body></html>", encoding="utf-8")
    return path


@pytest.fixture
def settings(static_dir):
    return Settings(_env_file=None, static_dir=static_dir, max_upload_mb=None)


@pytest.fixture
def client(settings, relational_store, document_store):
    app = create_app(settings, relational=relational_store, documents=document_store)
    with TestClient(app) as c:
        yield c
