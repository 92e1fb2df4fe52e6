"""Bearer token issuing and verification for admin sessions."""

from datetime import datetime, timedelta, timezone
from functools import wraps

import jwt
from flask import current_app, g, jsonify, request

from lawgan.core.errors import AuthError
from lawgan.core.logging_service import logger

ALGORITHM = "HS256"


def _secret():
    return current_app.config.get('JWT_SECRET') or 'dev-secret'


def issue_token(admin_id):
    """Signed token with the admin id as subject and a fixed expiry"""
    now = datetime.now(timezone.utc)
    ttl = current_app.config.get('JWT_EXPIRES_SECONDS', 3600)
    payload = {
        "sub": str(admin_id),
        "iat": int(now.timestamp()),
        "exp": int((now + timedelta(seconds=ttl)).timestamp()),
    }
    return jwt.encode(payload, _secret(), algorithm=ALGORITHM)


def decode_token(token):
    """Verify signature and expiry; raises AuthError otherwise"""
    try:
        return jwt.decode(token, _secret(), algorithms=[ALGORITHM])
    except jwt.ExpiredSignatureError as e:
        raise AuthError('Token has expired.') from e
    except jwt.InvalidTokenError as e:
        raise AuthError('Invalid token.') from e


def _bearer_token():
    header = request.headers.get('Authorization', '')
    scheme, _, token = header.partition(' ')
    if scheme.lower() != 'bearer' or not token.strip():
        return None
    return token.strip()


def require_admin(f):
    """Decorator to require a valid admin bearer token"""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        token = _bearer_token()
        if not token:
            logger.log_security_event('Missing bearer token', {'path': request.path})
            return jsonify({'message': 'Authentication required.'}), 401

        try:
            payload = decode_token(token)
        except AuthError as e:
            logger.log_security_event('Rejected bearer token', {'path': request.path, 'reason': e.message})
            return jsonify({'message': 'Authentication required.', 'error': e.message}), 401

        subject = payload.get('sub')
        g.admin_id = int(subject) if str(subject).isdigit() else subject
        return f(*args, **kwargs)

    return decorated_function
