"""
Kurator Backend — Word Route Handlers
=======================================

What:  The corpus endpoints: list all words, add, delete, and look up one.
How:   The WordStore is injected with Depends(get_word_store). Request
       bodies are validated against the schemas before the handler runs;
       a body that does not fit is answered with 400 by main.py.

Input is taken as-is: empty strings, duplicate words and arbitrary tag
lists are all stored.
"""

from fastapi import APIRouter, Depends

from kurator.database import WordStore, get_word_store
from kurator.schemas.word import (
    AddWordRequest,
    CorpusResponse,
    DeleteWordRequest,
    ErrorResponse,
    StatusResponse,
    WordResponse,
)

router = APIRouter(tags=["Words"])

_ERROR_RESPONSES = {
    400: {"description": "Store or request error", "model": ErrorResponse},
    500: {"description": "Server error", "model": ErrorResponse},
}


@router.get(
    "/corpus",
    response_model=CorpusResponse,
    responses=_ERROR_RESPONSES,
    summary="List every word in the corpus",
)
async def corpus(store: WordStore = Depends(get_word_store)) -> CorpusResponse:
    words = await store.list_all()
    return CorpusResponse(words=words)


@router.post(
    "/word/add",
    response_model=StatusResponse,
    responses=_ERROR_RESPONSES,
    summary="Add a word",
)
async def add_word(
    body: AddWordRequest,
    store: WordStore = Depends(get_word_store),
) -> StatusResponse:
    """
    Insert a word. No existence check: adding the same word twice stores
    two entries.
    """
    await store.insert(body.to_word())
    return StatusResponse()


@router.post(
    "/word/delete",
    response_model=StatusResponse,
    responses=_ERROR_RESPONSES,
    summary="Delete a word",
)
async def delete_word(
    body: DeleteWordRequest,
    store: WordStore = Depends(get_word_store),
) -> StatusResponse:
    """
    Delete one entry with the given word.

    Answers ok even when nothing matched, so the response does not tell
    whether a document was removed.
    """
    await store.delete_by_key(body.word)
    return StatusResponse()


@router.get(
    "/word/get/{word}",
    response_model=WordResponse,
    responses=_ERROR_RESPONSES,
    summary="Get a single word",
)
async def get_word(
    word: str,
    store: WordStore = Depends(get_word_store),
) -> WordResponse:
    """
    A missing word answers 400 with "word not found error".

    Why /word/get/ and not /word/{word}: a bare path parameter would also
    match /word/add and /word/delete, turning a GET on those into a lookup
    of the words "add" and "delete" instead of a 405.
    """
    found = await store.find_by_key(word)
    return WordResponse(word=found)
