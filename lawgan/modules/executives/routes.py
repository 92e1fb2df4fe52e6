from flask import jsonify

from . import executives_bp
from lawgan.core.config import Config
from lawgan.core.database import get_database
from lawgan.core.errors import ApiError, StorageError, NotFoundError
from lawgan.core.logging_service import logger
from lawgan.modules.auth.tokens import require_admin
from lawgan.modules.common import (
    get_json_body, require_fields, require_id, clean_text, collect_updates,
    ensure_any_field, image_values, serialize_row, storage_failure,
)

TABLE = Config.EXECUTIVES_TABLE
IMAGE_COLUMN = 'image'
BY_NAME = [('name', 'asc'), ('id', 'asc')]

EDITABLE_FIELDS = ('name', 'position', 'about')
UPDATE_KEYS = EDITABLE_FIELDS + ('image_base64', 'image_mime')


def serialize_executive(row):
    return serialize_row(row, image_column=IMAGE_COLUMN)


def get_executives_db():
    rows = get_database().select(TABLE, order_by=BY_NAME)
    return [serialize_executive(row) for row in rows]


@executives_bp.route('', methods=['GET'])
def list_executives():
    try:
        return jsonify({'executives': get_executives_db()}), 200
    except StorageError as e:
        return storage_failure('executives', 'Failed to fetch executives.', e)


@executives_bp.route('', methods=['POST'])
@executives_bp.route('/publish', methods=['POST'])
@require_admin
def publish_executive():
    data = get_json_body()

    try:
        require_fields(data, ('name',), 'Name is required.')
        values = {
            'name': str(data['name']).strip(),
            'position': clean_text(data.get('position')),
            'about': clean_text(data.get('about')),
            IMAGE_COLUMN: None,
            'image_mime': None,
        }
        values.update(image_values(data, IMAGE_COLUMN))

        row = get_database().insert(TABLE, values)
        logger.log_user_action('executives', 'publish', details={'id': row['id']})
        return jsonify({'executive': serialize_executive(row)}), 201

    except StorageError as e:
        return storage_failure('executives', 'Failed to create executive.', e)
    except ApiError as e:
        return e.to_response()


@executives_bp.route('', methods=['PATCH'])
@executives_bp.route('/edit', methods=['PATCH'])
@require_admin
def edit_executive():
    data = get_json_body()

    try:
        executive_id = require_id(data, 'Executive id is required.')
        ensure_any_field(data, UPDATE_KEYS)

        values = collect_updates(data, EDITABLE_FIELDS, required=('name',), strip=('name', 'position'))
        if 'position' in values:
            values['position'] = clean_text(values['position'])
        values.update(image_values(data, IMAGE_COLUMN))

        db = get_database()
        if not values:
            row = db.select_one(TABLE, {'id': executive_id})
            if not row:
                raise NotFoundError('Executive not found.')
            return jsonify({'executive': serialize_executive(row)}), 200

        rows = db.update(TABLE, values, {'id': executive_id})
        if not rows:
            raise NotFoundError('Executive not found.')

        logger.log_user_action('executives', 'edit', details={'id': executive_id, 'fields': sorted(values)})
        return jsonify({'executive': serialize_executive(rows[0])}), 200

    except StorageError as e:
        return storage_failure('executives', 'Failed to update executive.', e)
    except ApiError as e:
        return e.to_response()


@executives_bp.route('', methods=['DELETE'])
@executives_bp.route('/delete', methods=['DELETE'])
@require_admin
def delete_executive():
    data = get_json_body()

    try:
        executive_id = require_id(data, 'Executive id is required.')
        deleted = get_database().delete(TABLE, {'id': executive_id})
        if not deleted:
            raise NotFoundError('Executive not found.')

        logger.log_user_action('executives', 'delete', details={'id': executive_id})
        return jsonify({'deleted': deleted[0]}), 200

    except StorageError as e:
        return storage_failure('executives', 'Failed to delete executive.', e)
    except ApiError as e:
        return e.to_response()
