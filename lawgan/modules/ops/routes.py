from datetime import datetime, timezone

from flask import current_app, jsonify

from . import ops_health_bp
from lawgan.core.database import get_database
from lawgan.core.errors import StorageError
from lawgan.core.logging_service import logger


def _check_database():
    db = get_database()
    try:
        db.count(current_app.config.get('ADMINS_TABLE', 'admins'))
        return {'status': 'ok', 'backend': db.backend}
    except StorageError as e:
        logger.error('ops_health', 'Database check failed', details={'error': e.error})
        return {'status': 'critical', 'backend': db.backend, 'error': e.error}


def _build_health_response():
    database = _check_database()
    return {
        'status': database['status'],
        'timestamp': datetime.now(timezone.utc).isoformat(),
        'checks': {'database': database},
    }


@ops_health_bp.route('/')
@ops_health_bp.route('')
def health_check():
    """Public health endpoint for uptime monitors."""
    data = _build_health_response()
    code = 503 if data['status'] == 'critical' else 200
    return jsonify(data), code
