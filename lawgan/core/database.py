"""
Persistence adapters
====================

The content routes only ever talk to a ``Database``: ``select``, ``insert``,
``update``, ``delete`` and ``count`` against a table, with equality filters
and an ordering. Image columns go in through ``put_image`` and come back out
through ``get_image`` so the routes never care how a backend encodes binary.

- ``SQLAlchemyDatabase`` -- direct relational database through Flask-SQLAlchemy
- ``RestDatabase`` (rest_database.py) -- hosted PostgREST/Supabase API
"""

import logging
import os

from flask import current_app
from sqlalchemy import event
from sqlalchemy.exc import SQLAlchemyError

from .errors import StorageError, ConfigurationError
from .images import encode_for_storage, decode_from_storage
from .models import db, MODELS

logger = logging.getLogger(__name__)


class Database:
    """Logical storage contract shared by every backend"""

    backend = None

    def init_app(self, app):
        pass

    def close(self):
        pass

    def select(self, table, filters=None, order_by=None, limit=None):
        raise NotImplementedError

    def insert(self, table, values):
        raise NotImplementedError

    def update(self, table, values, filters):
        raise NotImplementedError

    def delete(self, table, filters):
        raise NotImplementedError

    def count(self, table, filters=None):
        raise NotImplementedError

    def select_one(self, table, filters):
        rows = self.select(table, filters=filters, limit=1)
        return rows[0] if rows else None

    def exists(self, table, filters):
        return self.select_one(table, filters) is not None

    def put_image(self, binary):
        return encode_for_storage(binary, self.backend)

    def get_image(self, value):
        return decode_from_storage(value)


class SQLAlchemyDatabase(Database):
    backend = 'sql'

    def init_app(self, app):
        options = app.config.setdefault('SQLALCHEMY_ENGINE_OPTIONS', {})
        options.setdefault('pool_pre_ping', True)
        uri = app.config.get('SQLALCHEMY_DATABASE_URI', '')
        if app.config.get('DB_SSL') and uri.startswith('postgresql'):
            options.setdefault('connect_args', {}).setdefault('sslmode', 'require')
        app.config.setdefault('SQLALCHEMY_TRACK_MODIFICATIONS', False)

        db.init_app(app)

        with app.app_context():
            event.listen(db.engine, 'handle_error', self._on_engine_error)
            logger.info("Database engine ready (%s)", db.engine.url.render_as_string(hide_password=True))

    def _on_engine_error(self, context):
        if not context.is_disconnect:
            return
        logger.critical("Lost connection to the database: %s", context.original_exception)
        try:
            exit_on_disconnect = current_app.config.get('DB_EXIT_ON_DISCONNECT', True)
        except RuntimeError:
            exit_on_disconnect = True
        if exit_on_disconnect:
            os._exit(1)

    def create_all(self):
        db.create_all()

    def close(self):
        try:
            db.engine.dispose()
        except RuntimeError:
            # No app context; the pool goes with the process
            pass

    @staticmethod
    def _model(table):
        try:
            return MODELS[table]
        except KeyError:
            raise ConfigurationError(f"Unknown table: {table}")

    @staticmethod
    def _to_dict(row):
        return {column.name: getattr(row, column.name) for column in row.__table__.columns}

    @staticmethod
    def _filtered(model, filters):
        query = db.session.query(model)
        for column, value in (filters or {}).items():
            query = query.filter(getattr(model, column) == value)
        return query

    def select(self, table, filters=None, order_by=None, limit=None):
        model = self._model(table)
        try:
            query = self._filtered(model, filters)
            for column, direction in (order_by or []):
                attr = getattr(model, column)
                query = query.order_by(attr.desc() if direction == 'desc' else attr.asc())
            if limit:
                query = query.limit(limit)
            return [self._to_dict(row) for row in query.all()]
        except SQLAlchemyError as e:
            db.session.rollback()
            raise StorageError(e)

    def insert(self, table, values):
        model = self._model(table)
        try:
            row = model(**values)
            db.session.add(row)
            db.session.commit()
            return self._to_dict(row)
        except SQLAlchemyError as e:
            db.session.rollback()
            raise StorageError(e)

    def update(self, table, values, filters):
        model = self._model(table)
        try:
            rows = self._filtered(model, filters).all()
            for row in rows:
                for column, value in values.items():
                    setattr(row, column, value)
            db.session.commit()
            return [self._to_dict(row) for row in rows]
        except SQLAlchemyError as e:
            db.session.rollback()
            raise StorageError(e)

    def delete(self, table, filters):
        model = self._model(table)
        try:
            rows = self._filtered(model, filters).all()
            deleted = [{'id': row.id} for row in rows]
            for row in rows:
                db.session.delete(row)
            db.session.commit()
            return deleted
        except SQLAlchemyError as e:
            db.session.rollback()
            raise StorageError(e)

    def count(self, table, filters=None):
        model = self._model(table)
        try:
            return self._filtered(model, filters).count()
        except SQLAlchemyError as e:
            db.session.rollback()
            raise StorageError(e)


def create_database(app):
    """Build the adapter named by DB_BACKEND"""
    backend = (app.config.get('DB_BACKEND') or 'sql').lower()
    if backend == 'sql':
        return SQLAlchemyDatabase()
    if backend == 'rest':
        from .rest_database import RestDatabase
        return RestDatabase()
    raise ConfigurationError(f"Unknown DB_BACKEND '{backend}' (expected 'sql' or 'rest')")


def get_database():
    """The adapter owned by the running app's LAWGAN extension"""
    return current_app.extensions['lawgan'].database
