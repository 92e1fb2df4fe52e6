"""
Hosted REST backend
===================

Talks to a PostgREST endpoint (the API a Supabase project exposes under
``/rest/v1``) with a service-role key. Binary columns are ``bytea`` on the
server and travel as ``\\x``-prefixed hex strings.
"""

import logging
from datetime import date, datetime

import requests

from .database import Database
from .errors import StorageError, ConfigurationError

logger = logging.getLogger(__name__)


def _filter_value(value):
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if value is None:
        return 'null'
    return str(value)


def _json_value(value):
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return value


class RestDatabase(Database):
    backend = 'rest'

    def __init__(self):
        self.base_url = None
        self.timeout = 15
        self.session = None

    def init_app(self, app):
        url = app.config.get('SUPABASE_URL')
        key = app.config.get('SUPABASE_SERVICE_ROLE_KEY')

        missing = []
        if not url:
            missing.append('SUPABASE_URL')
        if not key:
            missing.append('SUPABASE_SERVICE_ROLE_KEY')
        if missing:
            logger.error("Missing Supabase env vars: %s", ', '.join(missing))
            raise ConfigurationError(f"Missing Supabase env vars: {', '.join(missing)}")

        self.base_url = url.rstrip('/') + '/rest/v1'
        self.timeout = app.config.get('REST_TIMEOUT', 15)

        self.session = requests.Session()
        self.session.headers.update({
            "apikey": key,
            "Authorization": f"Bearer {key}",
            "Content-Type": "application/json",
            "Accept": "application/json",
        })
        logger.info("REST backend ready (%s)", self.base_url)

    def close(self):
        if self.session is not None:
            self.session.close()
            self.session = None

    # ===== Request helpers =====

    def _params(self, filters=None, order_by=None, limit=None, select='*'):
        params = {}
        if select:
            params['select'] = select
        for column, value in (filters or {}).items():
            op = 'is' if value is None else 'eq'
            params[column] = f"{op}.{_filter_value(value)}"
        if order_by:
            params['order'] = ','.join(f"{column}.{direction}" for column, direction in order_by)
        if limit:
            params['limit'] = limit
        return params

    def _request(self, method, table, params=None, json=None, headers=None):
        if self.session is None:
            raise StorageError('REST backend is not initialised')
        try:
            resp = self.session.request(
                method,
                f"{self.base_url}/{table}",
                params=params,
                json=json,
                headers=headers,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise StorageError(e)

        if resp.status_code >= 400:
            try:
                body = resp.json()
            except ValueError:
                body = None
            if isinstance(body, dict):
                detail = body.get('message') or body.get('error') or resp.text
            else:
                detail = resp.text
            raise StorageError(detail or f"HTTP {resp.status_code}")
        return resp

    # ===== Database contract =====

    def select(self, table, filters=None, order_by=None, limit=None):
        resp = self._request('GET', table, params=self._params(filters, order_by, limit))
        return resp.json()

    def insert(self, table, values):
        payload = {column: _json_value(value) for column, value in values.items()}
        resp = self._request(
            'POST', table,
            params={'select': '*'},
            json=payload,
            headers={'Prefer': 'return=representation'},
        )
        rows = resp.json()
        return rows[0] if rows else None

    def update(self, table, values, filters):
        payload = {column: _json_value(value) for column, value in values.items()}
        resp = self._request(
            'PATCH', table,
            params=self._params(filters),
            json=payload,
            headers={'Prefer': 'return=representation'},
        )
        return resp.json()

    def delete(self, table, filters):
        resp = self._request(
            'DELETE', table,
            params=self._params(filters, select='id'),
            headers={'Prefer': 'return=representation'},
        )
        return resp.json()

    def count(self, table, filters=None):
        resp = self._request(
            'GET', table,
            params=self._params(filters, limit=1, select='id'),
            headers={'Prefer': 'count=exact'},
        )
        # Content-Range looks like "0-0/7" or "*/0"
        content_range = resp.headers.get('Content-Range', '')
        total = content_range.rsplit('/', 1)[-1]
        if total.isdigit():
            return int(total)
        return len(resp.json())
