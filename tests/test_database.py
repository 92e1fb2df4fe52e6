"""SQL adapter: lost-connection policy and error translation."""

from unittest.mock import MagicMock, patch

from sqlalchemy.exc import OperationalError

from lawgan.core.database import SQLAlchemyDatabase, get_database
from lawgan.core.errors import StorageError

from conftest import make_app


def _context(is_disconnect):
    context = MagicMock()
    context.is_disconnect = is_disconnect
    context.original_exception = Exception("server closed the connection unexpectedly")
    return context


def test_disconnect_exits_when_enabled():
    app = make_app(DB_EXIT_ON_DISCONNECT=True)
    adapter = app.extensions["lawgan"].database

    with app.app_context(), patch("lawgan.core.database.os._exit") as exit_process:
        adapter._on_engine_error(_context(is_disconnect=True))

    exit_process.assert_called_once_with(1)


def test_disconnect_only_logged_when_disabled(app):
    adapter = app.extensions["lawgan"].database

    with app.app_context(), patch("lawgan.core.database.os._exit") as exit_process:
        adapter._on_engine_error(_context(is_disconnect=True))

    exit_process.assert_not_called()


def test_other_engine_errors_are_ignored():
    app = make_app(DB_EXIT_ON_DISCONNECT=True)
    adapter = app.extensions["lawgan"].database

    with app.app_context(), patch("lawgan.core.database.os._exit") as exit_process:
        adapter._on_engine_error(_context(is_disconnect=False))

    exit_process.assert_not_called()


def test_sqlalchemy_errors_become_storage_errors(app):
    with app.app_context():
        adapter = get_database()
        assert isinstance(adapter, SQLAlchemyDatabase)

        failure = OperationalError("SELECT 1", {}, Exception("database is locked"))
        with patch.object(SQLAlchemyDatabase, "_filtered", side_effect=failure):
            try:
                adapter.select("quotes")
            except StorageError as e:
                assert "database is locked" in e.error
            else:
                raise AssertionError("StorageError not raised")
