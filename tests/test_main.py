"""
Kurator Backend — Application Wiring Tests
============================================

What:  Exception-to-envelope mapping and the startup/shutdown lifespan.
How:   WordStore.from_settings is patched; no MongoDB is needed.

What we test:
    ✅ Every taxonomy error maps to its status and message
    ✅ Startup pings the database and publishes the store on app.state
    ✅ A failed ping aborts startup and closes the client
    ✅ Shutdown closes the client
"""

import json
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from pymongo.errors import ServerSelectionTimeoutError

from kurator.config import Settings
from kurator.exceptions import (
    DataAccessError,
    HashingError,
    InvalidIDError,
    KuratorError,
    NotFoundError,
    PasswordTooShortError,
    QueryError,
    UnsafePasswordError,
)
from kurator.main import create_app, lifespan
from kurator.responses import error_response, internal_error_response


@pytest.fixture
def settings():
    return Settings(
        db_url="mongodb://localhost:27017",
        db_name="kurator",
        db_coll_words="words",
        api_host="127.0.0.1:18081",
        _env_file=None,
    )


@pytest.fixture
def mock_store():
    store = MagicMock()
    store.ping = AsyncMock()
    return store


class TestErrorTaxonomy:

    @pytest.mark.parametrize(
        "error, status, message",
        [
            (QueryError(Exception("socket closed")), 400, "error during mongodb query: socket closed"),
            (DataAccessError(Exception("word missing")), 400, "could not access field in document: word missing"),
            (InvalidIDError("xyz"), 400, "invalid id used: xyz"),
            (NotFoundError("foo"), 400, "word not found error"),
            (HashingError(), 400, "hashing error"),
            (PasswordTooShortError(), 400, "password must be at least 8 characters long"),
            (UnsafePasswordError(), 409, "unsafe password"),
        ],
    )
    def test_status_and_message(self, error, status, message):
        assert isinstance(error, KuratorError)
        assert error.status_code == status
        assert error.message == message
        assert str(error) == message

    def test_error_response_envelope(self):
        response = error_response(409, UnsafePasswordError().message)

        assert response.status_code == 409
        assert json.loads(response.body) == {
            "ok": False,
            "code": 409,
            "status": "Conflict",
            "message": "unsafe password",
        }

    def test_internal_error_response_is_generic(self):
        response = internal_error_response()

        assert response.status_code == 500
        assert json.loads(response.body)["message"] == "Internal Server Error"


class TestLifespan:

    @pytest.mark.asyncio
    async def test_startup_publishes_store(self, settings, mock_store):
        app = create_app(settings)

        with patch("kurator.main.WordStore.from_settings", return_value=mock_store) as from_settings:
            async with lifespan(app):
                assert app.state.word_store is mock_store
                mock_store.ping.assert_awaited_once()
                mock_store.close.assert_not_called()

        from_settings.assert_called_once_with(settings)
        mock_store.close.assert_called_once()

    @pytest.mark.asyncio
    async def test_unreachable_database_aborts_startup(self, settings, mock_store):
        mock_store.ping.side_effect = ServerSelectionTimeoutError("no servers available")
        app = create_app(settings)

        with patch("kurator.main.WordStore.from_settings", return_value=mock_store):
            with pytest.raises(ServerSelectionTimeoutError):
                async with lifespan(app):
                    pass

        mock_store.close.assert_called_once()
        assert not hasattr(app.state, "word_store")

    def test_create_app_keeps_settings(self, settings):
        app = create_app(settings)

        assert app.state.settings is settings
