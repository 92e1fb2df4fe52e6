from flask import jsonify

from . import advertisements_bp
from lawgan.core.config import Config
from lawgan.core.database import get_database
from lawgan.core.errors import ApiError, StorageError, NotFoundError, MissingField
from lawgan.core.logging_service import logger
from lawgan.modules.auth.tokens import require_admin
from lawgan.modules.common import (
    get_json_body, require_fields, require_id, collect_updates, ensure_any_field,
    image_values, serialize_row, storage_failure, utc_now,
)

TABLE = Config.ADVERTISEMENTS_TABLE
IMAGE_COLUMN = 'image'
NEWEST_FIRST = [('created_at', 'desc'), ('id', 'desc')]

EDITABLE_FIELDS = ('url', 'owner', 'page')
UPDATE_KEYS = EDITABLE_FIELDS + ('image_base64', 'image_mime')


def serialize_advertisement(row):
    return serialize_row(row, image_column=IMAGE_COLUMN)


def get_advertisements_db(page=None):
    filters = {'page': page} if page else None
    rows = get_database().select(TABLE, filters=filters, order_by=NEWEST_FIRST)
    return [serialize_advertisement(row) for row in rows]


@advertisements_bp.route('', methods=['GET'])
def list_advertisements():
    try:
        return jsonify({'advertisements': get_advertisements_db()}), 200
    except StorageError as e:
        return storage_failure('advertisements', 'Failed to fetch advertisements.', e)


@advertisements_bp.route('/page/<page>', methods=['GET'])
def list_advertisements_for_page(page):
    page = page.strip()
    if not page:
        return jsonify({'message': 'Page is required.'}), 400

    try:
        return jsonify({'advertisements': get_advertisements_db(page)}), 200
    except StorageError as e:
        return storage_failure('advertisements', 'Failed to fetch advertisements.', e)


@advertisements_bp.route('/publish', methods=['POST'])
@require_admin
def publish_advertisement():
    data = get_json_body()

    try:
        require_fields(data, ('url', 'owner', 'page'), 'Url, owner, and page are required.')
        images = image_values(data, IMAGE_COLUMN)
        if not images:
            raise MissingField('Image is required.')

        values = {
            'url': str(data['url']).strip(),
            'owner': str(data['owner']).strip(),
            'page': str(data['page']).strip(),
        }
        values.update(images)

        row = get_database().insert(TABLE, values)
        logger.log_user_action('advertisements', 'publish', details={'id': row['id'], 'page': values['page']})
        return jsonify({'advertisement': serialize_advertisement(row)}), 201

    except StorageError as e:
        return storage_failure('advertisements', 'Failed to create advertisement.', e)
    except ApiError as e:
        return e.to_response()


@advertisements_bp.route('/edit', methods=['PATCH'])
@require_admin
def edit_advertisement():
    data = get_json_body()

    try:
        advertisement_id = require_id(data, 'Advertisement id is required.')
        ensure_any_field(data, UPDATE_KEYS)

        values = collect_updates(data, EDITABLE_FIELDS, required=EDITABLE_FIELDS, strip=EDITABLE_FIELDS)
        values.update(image_values(data, IMAGE_COLUMN))
        values['updated_at'] = utc_now()

        rows = get_database().update(TABLE, values, {'id': advertisement_id})
        if not rows:
            raise NotFoundError('Advertisement not found.')

        logger.log_user_action('advertisements', 'edit', details={'id': advertisement_id, 'fields': sorted(values)})
        return jsonify({'advertisement': serialize_advertisement(rows[0])}), 200

    except StorageError as e:
        return storage_failure('advertisements', 'Failed to update advertisement.', e)
    except ApiError as e:
        return e.to_response()


@advertisements_bp.route('/delete', methods=['DELETE'])
@require_admin
def delete_advertisement():
    data = get_json_body()

    try:
        advertisement_id = require_id(data, 'Advertisement id is required.')
        deleted = get_database().delete(TABLE, {'id': advertisement_id})
        if not deleted:
            raise NotFoundError('Advertisement not found.')

        logger.log_user_action('advertisements', 'delete', details={'id': advertisement_id})
        return jsonify({'deleted': deleted[0]}), 200

    except StorageError as e:
        return storage_failure('advertisements', 'Failed to delete advertisement.', e)
    except ApiError as e:
        return e.to_response()
