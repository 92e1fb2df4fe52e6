from flask import current_app, jsonify

from . import auth_bp
from .tokens import issue_token
from .utils import hash_password, verify_password, placeholder_hash
from lawgan.core.config import Config
from lawgan.core.database import get_database
from lawgan.core.errors import ApiError, StorageError, ConflictError, ForbiddenError
from lawgan.core.identifiers import normalize_email
from lawgan.core.logging_service import logger
from lawgan.modules.common import get_json_body, require_fields, serialize_row, storage_failure, utc_now

TABLE = Config.ADMINS_TABLE
INVALID_CREDENTIALS = 'Invalid credentials.'


def _public_admin(row, with_created=True):
    admin = serialize_row(row, hidden=('password_hash', 'last_login'))
    if not with_created:
        admin.pop('created_at', None)
    return admin


@auth_bp.route('/signup', methods=['POST'])
def signup():
    """Create an admin account"""
    data = get_json_body()

    try:
        if not current_app.config.get('ADMIN_SIGNUP_ENABLED', True):
            raise ForbiddenError('Admin signup is disabled.')

        require_fields(data, ('name', 'email', 'password'), 'Name, email, and password are required.')
        email = normalize_email(data['email'])

        db = get_database()
        if db.exists(TABLE, {'email': email}):
            raise ConflictError('Email already in use.')

        try:
            password_hash = hash_password(str(data['password']))
        except ValueError:
            return jsonify({'message': 'Password is too long.'}), 400

        row = db.insert(TABLE, {
            'name': str(data['name']).strip(),
            'email': email,
            'password_hash': password_hash,
        })
        logger.log_user_action('auth', 'signup', user_id=row['id'], details={'email': email})
        return jsonify({'admin': _public_admin(row)}), 201

    except StorageError as e:
        return storage_failure('auth', 'Failed to create admin.', e)
    except ApiError as e:
        return e.to_response()


@auth_bp.route('/signin', methods=['POST'])
def signin():
    """Verify credentials and issue a bearer token"""
    data = get_json_body()

    try:
        require_fields(data, ('email', 'password'), 'Email and password are required.')
        email = normalize_email(data['email'])

        db = get_database()
        admin = db.select_one(TABLE, {'email': email})

        # Same answer, and the same bcrypt cost, for an unknown email and a wrong password
        stored_hash = admin.get('password_hash') if admin else placeholder_hash()
        password_ok = verify_password(str(data['password']), stored_hash)
        if not admin or not password_ok:
            logger.log_security_event('Failed admin sign-in', {'email': email})
            return jsonify({'message': INVALID_CREDENTIALS}), 401

        db.update(TABLE, {'last_login': utc_now()}, {'id': admin['id']})
        token = issue_token(admin['id'])

        logger.log_user_action('auth', 'signin', user_id=admin['id'])
        return jsonify({
            'token': token,
            'admin': {
                'id': admin['id'],
                'name': admin['name'],
                'email': admin['email'],
            },
        }), 200

    except StorageError as e:
        return storage_failure('auth', 'Failed to sign in.', e)
    except ApiError as e:
        return e.to_response()
