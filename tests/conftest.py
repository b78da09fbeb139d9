"""
Kurator Backend — Test Configuration (conftest.py)
====================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixtures:
    ├── mock_collection: MagicMock standing in for a Motor collection
    ├── word_store: WordStore wired to mock_collection (no real MongoDB)
    ├── fake_store: In-memory store with the WordStore interface
    └── test_client: HTTPX AsyncClient against the app, fake_store injected

The app's lifespan (MongoDB connect + ping) is NOT run: ASGITransport does
not send lifespan events, and the store dependency is overridden instead.
"""

import os
from typing import List
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

# Required settings must exist before kurator.main builds the app at import
os.environ.setdefault("DB_URL", "mongodb://localhost:27017")
os.environ.setdefault("DB_NAME", "kurator_test")
os.environ.setdefault("DB_COLL_WORDS", "words")
os.environ.setdefault("API_HOST", "127.0.0.1:18081")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from kurator.database import WordStore, get_word_store  # noqa: E402
from kurator.exceptions import NotFoundError  # noqa: E402
from kurator.schemas.word import Word  # noqa: E402


class FakeWordStore:
    """
    In-memory replacement for WordStore in endpoint tests.

    Mirrors the store's semantics: duplicates are kept, deleting a missing
    word is a no-op, lookups of missing words raise NotFoundError.
    """

    def __init__(self):
        self.words: List[Word] = []

    async def list_all(self) -> List[Word]:
        return list(self.words)

    async def find_by_key(self, word: str) -> Word:
        for rec in self.words:
            if rec.word == word:
                return rec
        raise NotFoundError(word)

    async def insert(self, rec: Word) -> None:
        self.words.append(rec)

    async def delete_by_key(self, word: str) -> None:
        for i, rec in enumerate(self.words):
            if rec.word == word:
                del self.words[i]
                return


@pytest.fixture
def mock_collection():
    """
    A MagicMock simulating an AsyncIOMotorCollection.

    Usage:
        mock_collection.find_one.return_value = {"word": "foo"}
        result = await word_store.find_by_key("foo")
    """
    collection = MagicMock()
    collection.find.return_value.to_list = AsyncMock(return_value=[])
    collection.find_one = AsyncMock(return_value=None)
    collection.insert_one = AsyncMock()
    collection.delete_one = AsyncMock(return_value=MagicMock(deleted_count=0))
    return collection


@pytest.fixture
def mock_client(mock_collection):
    """Motor client mock where client[db][coll] yields mock_collection."""
    client = MagicMock()
    database = client.__getitem__.return_value
    database.__getitem__.return_value = mock_collection
    database.command = AsyncMock(return_value={"ok": 1.0})
    return client


@pytest.fixture
def word_store(mock_client):
    return WordStore(mock_client, "kurator_test", "words")


@pytest.fixture
def fake_store():
    return FakeWordStore()


@pytest.fixture
def app(fake_store):
    from kurator.main import app as kurator_app

    kurator_app.dependency_overrides[get_word_store] = lambda: fake_store
    yield kurator_app
    kurator_app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def test_client(app):
    """
    HTTPX AsyncClient routed directly to the FastAPI app.

    Usage:
        async def test_corpus(test_client):
            response = await test_client.get("/corpus")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
