"""
Helpers shared by the content modules: request parsing, validation,
partial updates and row serialization.
"""

from datetime import date, datetime, timezone

from flask import jsonify, request

from lawgan.core.database import get_database
from lawgan.core.errors import MissingField, MissingIdentifier, NoFieldsProvided, ValidationError
from lawgan.core.images import decode_image, encode_for_display
from lawgan.core.logging_service import logger


def get_json_body():
    """Request JSON as a dict ({} when absent or not an object)"""
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def utc_now():
    return datetime.now(timezone.utc)


def _present(value):
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    return True


def require_fields(data, fields, message):
    """Raise MissingField unless every field holds a non-blank value"""
    if not all(_present(data.get(field)) for field in fields):
        raise MissingField(message)


def require_id(data, message):
    record_id = data.get('id')
    if not _present(record_id):
        raise MissingIdentifier(message)
    return coerce_id(record_id)


def coerce_id(record_id):
    """Primary keys are integers; accept "12" as well as 12"""
    if isinstance(record_id, bool):
        raise ValidationError('Invalid id.')
    if isinstance(record_id, int):
        return record_id
    if isinstance(record_id, str) and record_id.strip().isdigit():
        return int(record_id.strip())
    raise ValidationError('Invalid id.')


def to_bool(value):
    if isinstance(value, str):
        return value.strip().lower() in ('1', 'true', 'yes', 'on')
    return bool(value)


def clean_text(value):
    """Strip strings; blank becomes None"""
    if isinstance(value, str):
        value = value.strip()
        return value or None
    return value


def collect_updates(data, fields, required=(), strip=()):
    """Values for the fields present in the body (merge-on-undefined).

    An explicit null clears a nullable column; on a required column it is
    rejected.
    """
    values = {}
    for field in fields:
        if field not in data:
            continue
        value = data[field]
        if field in strip and isinstance(value, str):
            value = value.strip()
        if field in required and not _present(value):
            raise ValidationError(f"{field.replace('_', ' ').capitalize()} cannot be empty.")
        values[field] = value
    return values


def ensure_any_field(data, fields):
    if not any(field in data for field in fields):
        raise NoFieldsProvided()


def image_values(data, image_column):
    """Storage-ready image columns when the body carries a non-empty image"""
    payload = decode_image(data.get('image_base64'), data.get('image_mime'))
    if payload.binary is None:
        return {}
    return {
        image_column: get_database().put_image(payload.binary),
        'image_mime': payload.mime,
    }


def serialize_row(row, image_column=None, hidden=()):
    """JSON-safe copy of a stored row; binary images become data URLs"""
    if row is None:
        return None
    db = get_database()
    result = {}
    for key, value in row.items():
        if key in hidden:
            continue
        if key == image_column:
            result[key] = encode_for_display(db.get_image(value), row.get('image_mime'))
        elif isinstance(value, (datetime, date)):
            result[key] = value.isoformat()
        elif isinstance(value, (bytes, bytearray, memoryview)):
            result[key] = encode_for_display(bytes(value), row.get('image_mime'))
        else:
            result[key] = value
    return result


def storage_failure(source, message, error):
    """500 response for a data-store failure, underlying message included"""
    logger.log_error_with_traceback(source, error, {'message': message})
    return jsonify({'message': message, 'error': getattr(error, 'error', None) or str(error)}), 500
