from flask import jsonify

from . import editorial_boards_bp
from lawgan.core.config import Config
from lawgan.core.database import get_database
from lawgan.core.errors import ApiError, StorageError, NotFoundError
from lawgan.core.logging_service import logger
from lawgan.modules.auth.tokens import require_admin
from lawgan.modules.common import (
    get_json_body, require_fields, require_id, clean_text, collect_updates,
    ensure_any_field, image_values, serialize_row, storage_failure,
)

TABLE = Config.EDITORIAL_BOARDS_TABLE
IMAGE_COLUMN = 'image'
BY_NAME = [('name', 'asc'), ('id', 'asc')]

EDITABLE_FIELDS = ('name', 'position', 'bio')
UPDATE_KEYS = EDITABLE_FIELDS + ('about', 'image_base64', 'image_mime')


def split_about(about):
    """Old payloads put the position on the first line of ``about``"""
    lines = [line.strip() for line in (about or '').splitlines()]
    position = lines[0] if lines and lines[0] else None
    bio = ' '.join(line for line in lines[1:] if line) or None
    return position, bio


def _profile_fields(data):
    """position/bio from the body, falling back to a legacy about string"""
    if 'about' in data and 'position' not in data and 'bio' not in data:
        position, bio = split_about(data.get('about'))
        return dict(data, position=position, bio=bio)
    return data


def serialize_member(row):
    return serialize_row(row, image_column=IMAGE_COLUMN)


def get_members_db():
    rows = get_database().select(TABLE, order_by=BY_NAME)
    return [serialize_member(row) for row in rows]


@editorial_boards_bp.route('', methods=['GET'])
def list_members():
    try:
        return jsonify({'editorialBoards': get_members_db()}), 200
    except StorageError as e:
        return storage_failure('editorial_boards', 'Failed to fetch editorial boards.', e)


@editorial_boards_bp.route('', methods=['POST'])
@editorial_boards_bp.route('/publish', methods=['POST'])
@require_admin
def publish_member():
    data = _profile_fields(get_json_body())

    try:
        require_fields(data, ('name',), 'Name is required.')
        values = {
            'name': str(data['name']).strip(),
            'position': clean_text(data.get('position')),
            'bio': clean_text(data.get('bio')),
            IMAGE_COLUMN: None,
            'image_mime': None,
        }
        values.update(image_values(data, IMAGE_COLUMN))

        row = get_database().insert(TABLE, values)
        logger.log_user_action('editorial_boards', 'publish', details={'id': row['id']})
        return jsonify({'editorialBoard': serialize_member(row)}), 201

    except StorageError as e:
        return storage_failure('editorial_boards', 'Failed to create editorial board.', e)
    except ApiError as e:
        return e.to_response()


@editorial_boards_bp.route('', methods=['PATCH'])
@editorial_boards_bp.route('/edit', methods=['PATCH'])
@require_admin
def edit_member():
    data = get_json_body()

    try:
        member_id = require_id(data, 'Editorial board id is required.')
        ensure_any_field(data, UPDATE_KEYS)

        data = _profile_fields(data)
        values = collect_updates(data, EDITABLE_FIELDS, required=('name',), strip=EDITABLE_FIELDS)
        for optional in ('position', 'bio'):
            if optional in values:
                values[optional] = clean_text(values[optional])
        values.update(image_values(data, IMAGE_COLUMN))

        if not values:
            row = get_database().select_one(TABLE, {'id': member_id})
            if not row:
                raise NotFoundError('Editorial board not found.')
            return jsonify({'editorialBoard': serialize_member(row)}), 200

        rows = get_database().update(TABLE, values, {'id': member_id})
        if not rows:
            raise NotFoundError('Editorial board not found.')

        logger.log_user_action('editorial_boards', 'edit', details={'id': member_id, 'fields': sorted(values)})
        return jsonify({'editorialBoard': serialize_member(rows[0])}), 200

    except StorageError as e:
        return storage_failure('editorial_boards', 'Failed to update editorial board.', e)
    except ApiError as e:
        return e.to_response()


@editorial_boards_bp.route('', methods=['DELETE'])
@editorial_boards_bp.route('/delete', methods=['DELETE'])
@require_admin
def delete_member():
    data = get_json_body()

    try:
        member_id = require_id(data, 'Editorial board id is required.')
        deleted = get_database().delete(TABLE, {'id': member_id})
        if not deleted:
            raise NotFoundError('Editorial board not found.')

        logger.log_user_action('editorial_boards', 'delete', details={'id': member_id})
        return jsonify({'deleted': deleted[0]}), 200

    except StorageError as e:
        return storage_failure('editorial_boards', 'Failed to delete editorial board.', e)
    except ApiError as e:
        return e.to_response()
