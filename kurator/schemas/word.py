"""
Kurator Backend — Pydantic Request/Response Schemas
=====================================================

What:  Pydantic models defining the API contract and the stored document shape.
How:   FastAPI validates request bodies against these models and serializes
       responses through them. A body that does not fit the model is rejected
       before any handler runs.

Response envelope:
    Every JSON response carries `ok` and `message`. Successful responses may
    add a payload field (`words`, `word`); error responses add `code` and
    `status` (see ErrorResponse).
"""

from typing import List, Optional

from pydantic import BaseModel, Field


# ══════════════════════════════════════════════════════════════════════════
# Entity
# ══════════════════════════════════════════════════════════════════════════


class Word(BaseModel):
    """
    A corpus entry, both as stored in MongoDB and as returned to clients.

    `word` is the lookup key. Uniqueness is a convention only; the store
    accepts duplicates.
    """
    word: str = Field(description="The word itself; used as lookup key")
    description: Optional[str] = Field(default=None, description="Free-form explanation")
    tags: Optional[List[str]] = Field(default=None, description="Ordered list of tags")


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class AddWordRequest(BaseModel):
    """Body of POST /word/add."""
    word: str
    description: Optional[str] = None
    tags: Optional[List[str]] = None

    def to_word(self) -> Word:
        return Word(word=self.word, description=self.description, tags=self.tags)


class DeleteWordRequest(BaseModel):
    """Body of POST /word/delete."""
    word: str


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class StatusResponse(BaseModel):
    ok: bool = Field(default=True)
    message: Optional[str] = Field(default=None)


class CorpusResponse(StatusResponse):
    """Returned by GET /corpus: every stored word, in store order."""
    words: List[Word] = Field(description="All words in the corpus")


class WordResponse(StatusResponse):
    """Returned by GET /word/get/{word}."""
    word: Word


class ErrorResponse(BaseModel):
    """
    What:  Standardized error envelope for all API errors.

    Fields:
        ok:       Always false
        code:     HTTP status code, repeated in the body for clients that
                  only look at the payload
        status:   Reason phrase for `code` (e.g. "Not Found")
        message:  Human-readable description; generic for server errors

    Example:
        {"ok": false, "code": 404, "status": "Not Found", "message": "Not Found"}
    """
    ok: bool = Field(default=False)
    code: int = Field(description="HTTP status code")
    status: str = Field(description="HTTP reason phrase")
    message: str = Field(description="Human-readable error description")
