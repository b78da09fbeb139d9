"""
Kurator Backend — MongoDB Persistence Adapter
===============================================

What:  WordStore wraps an async Motor client and exposes the four corpus
       operations over one collection, plus ping/close for the lifespan.
How:   One client (and therefore one connection pool) is created at startup,
       stored on `app.state`, and injected into route handlers through the
       `get_word_store` dependency. The store holds no per-request state,
       so concurrent requests share it without locking.

Error Policy:
    Every PyMongoError is wrapped into QueryError at this boundary, keeping
    the driver's message. Documents that do not parse as a Word raise
    DataAccessError. A delete that matches nothing is NOT an error.

    No retries and no timeouts beyond the driver's own; a slow query only
    delays the request awaiting it.
"""

import logging
from typing import Any, Dict, List, Mapping

from fastapi import Request
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection, AsyncIOMotorDatabase
from pydantic import ValidationError as PydanticValidationError
from pymongo.errors import PyMongoError

from kurator.config import Settings
from kurator.exceptions import DataAccessError, NotFoundError, QueryError
from kurator.schemas.word import Word

logger = logging.getLogger(__name__)

# Why exclude _id: it is a BSON ObjectId, which the JSON encoder cannot
# serialize, and it is not a Word field. Dropping it in the query keeps the
# driver from shipping it at all, instead of popping it from every document.
_WORD_PROJECTION: Dict[str, int] = {"_id": 0}


class WordStore:
    """
    Persistence adapter for the words collection.

    Attributes:
        client:           Shared Motor client (owns the connection pool)
        database_name:    Database holding the corpus
        collection_name:  Collection holding the words
    """

    def __init__(self, client: AsyncIOMotorClient, database_name: str, collection_name: str):
        self.client = client
        self.database_name = database_name
        self.collection_name = collection_name

    @classmethod
    def from_settings(cls, settings: Settings) -> "WordStore":
        """
        Create a store with a fresh Motor client.

        The client connects lazily; call `ping()` to find out whether the
        server is actually reachable.
        """
        logger.info("Creating Motor client (pool_size=%s)", settings.db_max_pool_size)
        client = AsyncIOMotorClient(
            settings.db_url,
            appname=settings.db_name,
            maxPoolSize=settings.db_max_pool_size,
            serverSelectionTimeoutMS=settings.db_server_selection_timeout_ms,
        )
        return cls(client, settings.db_name, settings.db_coll_words)

    @property
    def database(self) -> AsyncIOMotorDatabase:
        return self.client[self.database_name]

    @property
    def collection(self) -> AsyncIOMotorCollection:
        return self.database[self.collection_name]

    # ── Lifecycle ─────────────────────────────────────────────────────────

    async def ping(self) -> None:
        """
        Liveness probe against the target database.

        Raises:
            PyMongoError: the server is unreachable. Left unwrapped; startup
                treats any failure here as fatal.
        """
        await self.database.command({"ping": 1})

    def close(self) -> None:
        logger.info("Closing Motor client")
        self.client.close()

    # ── Corpus Operations ─────────────────────────────────────────────────

    async def list_all(self) -> List[Word]:
        """Return every word in the collection, in store order."""
        logger.info("list_all()")
        try:
            documents = await self.collection.find({}, _WORD_PROJECTION).to_list(length=None)
        except PyMongoError as e:
            logger.error("list_all() failed: %r", e)
            raise QueryError(e) from e
        return [self._to_word(document) for document in documents]

    async def find_by_key(self, word: str) -> Word:
        """
        Look up exactly one word.

        Raises:
            NotFoundError: no document has this `word`.
            QueryError:    the query itself failed.
        """
        logger.info("find_by_key(); word = %s", word)
        try:
            document = await self.collection.find_one({"word": word}, _WORD_PROJECTION)
        except PyMongoError as e:
            logger.error("find_by_key() failed: %r", e)
            raise QueryError(e, context={"word": word}) from e
        if document is None:
            raise NotFoundError(word)
        return self._to_word(document)

    async def insert(self, rec: Word) -> None:
        """
        Insert a word unconditionally.

        There is no existence check; inserting the same word twice yields
        two documents. Unset optional fields are left out of the document.

        Why exclude_none: a document without `tags` reads back the same as
        one that was never given tags, and queries such as
        `{"tags": {"$exists": false}}` keep working. Storing explicit nulls
        would make the two cases differ in the collection.
        """
        logger.info("insert(); word = »%s«", rec.word)
        try:
            await self.collection.insert_one(rec.model_dump(exclude_none=True))
        except PyMongoError as e:
            logger.error("insert() failed: %r", e)
            raise QueryError(e, context={"word": rec.word}) from e

    async def delete_by_key(self, word: str) -> None:
        """Delete at most one matching document; zero matches still succeeds."""
        logger.info("delete_by_key(); word = »%s«", word)
        try:
            result = await self.collection.delete_one({"word": word})
        except PyMongoError as e:
            logger.error("delete_by_key() failed: %r", e)
            raise QueryError(e, context={"word": word}) from e
        logger.info("deleted_count: %d", result.deleted_count)

    # ── Helpers ───────────────────────────────────────────────────────────

    @staticmethod
    def _to_word(document: Mapping[str, Any]) -> Word:
        try:
            return Word.model_validate(document)
        except PydanticValidationError as e:
            logger.error("Malformed word document: %s", e)
            raise DataAccessError(e) from e


# ── Dependency ────────────────────────────────────────────────────────────
def get_word_store(request: Request) -> WordStore:
    """
    FastAPI dependency returning the store created at startup.

    Example usage in a route:
        @router.get("/corpus")
        async def corpus(store: WordStore = Depends(get_word_store)):
            return await store.list_all()

    Tests replace it via `app.dependency_overrides[get_word_store]`.
    """
    return request.app.state.word_store
