from flask import current_app, jsonify

from . import quotes_bp
from lawgan.core.config import Config
from lawgan.core.database import get_database
from lawgan.core.errors import ApiError, StorageError, NotFoundError, ConflictError
from lawgan.core.logging_service import logger
from lawgan.modules.auth.tokens import require_admin
from lawgan.modules.common import (
    get_json_body, require_fields, require_id, collect_updates, ensure_any_field,
    serialize_row, storage_failure, utc_now,
)

TABLE = Config.QUOTES_TABLE
NEWEST_FIRST = [('created_at', 'desc'), ('id', 'desc')]
EDITABLE_FIELDS = ('title', 'author')


def get_quotes_db():
    rows = get_database().select(TABLE, order_by=NEWEST_FIRST)
    return [serialize_row(row) for row in rows]


@quotes_bp.route('', methods=['GET'])
def list_quotes():
    try:
        return jsonify({'quotes': get_quotes_db()}), 200
    except StorageError as e:
        return storage_failure('quotes', 'Failed to fetch quotes.', e)


@quotes_bp.route('/publish', methods=['POST'])
@require_admin
def publish_quote():
    data = get_json_body()

    try:
        require_fields(data, ('title', 'author'), 'Title and author are required.')

        db = get_database()
        max_quotes = current_app.config.get('MAX_QUOTES', 6)
        if max_quotes and db.count(TABLE) >= max_quotes:
            raise ConflictError(f'Quote limit reached. A maximum of {max_quotes} quotes is allowed.')

        row = db.insert(TABLE, {
            'title': str(data['title']).strip(),
            'author': str(data['author']).strip(),
        })
        logger.log_user_action('quotes', 'publish', details={'id': row['id']})
        return jsonify({'quote': serialize_row(row)}), 201

    except StorageError as e:
        return storage_failure('quotes', 'Failed to create quote.', e)
    except ApiError as e:
        return e.to_response()


@quotes_bp.route('/edit', methods=['PATCH'])
@require_admin
def edit_quote():
    data = get_json_body()

    try:
        quote_id = require_id(data, 'Quote id is required.')
        ensure_any_field(data, EDITABLE_FIELDS)

        values = collect_updates(data, EDITABLE_FIELDS, required=EDITABLE_FIELDS, strip=EDITABLE_FIELDS)
        values['updated_at'] = utc_now()

        rows = get_database().update(TABLE, values, {'id': quote_id})
        if not rows:
            raise NotFoundError('Quote not found.')

        logger.log_user_action('quotes', 'edit', details={'id': quote_id})
        return jsonify({'quote': serialize_row(rows[0])}), 200

    except StorageError as e:
        return storage_failure('quotes', 'Failed to update quote.', e)
    except ApiError as e:
        return e.to_response()


@quotes_bp.route('/delete', methods=['DELETE'])
@require_admin
def delete_quote():
    data = get_json_body()

    try:
        quote_id = require_id(data, 'Quote id is required.')
        deleted = get_database().delete(TABLE, {'id': quote_id})
        if not deleted:
            raise NotFoundError('Quote not found.')

        logger.log_user_action('quotes', 'delete', details={'id': quote_id})
        return jsonify({'deleted': deleted[0]}), 200

    except StorageError as e:
        return storage_failure('quotes', 'Failed to delete quote.', e)
    except ApiError as e:
        return e.to_response()
