from functools import lru_cache

import bcrypt
from flask import current_app


def hash_password(password):
    """Salted bcrypt hash; work factor from BCRYPT_ROUNDS"""
    rounds = current_app.config.get('BCRYPT_ROUNDS', 12)
    return bcrypt.hashpw(password.encode('utf-8'), bcrypt.gensalt(rounds=rounds)).decode('utf-8')


@lru_cache(maxsize=None)
def _placeholder_hash(rounds):
    return bcrypt.hashpw(b'lawgan-no-such-admin', bcrypt.gensalt(rounds=rounds)).decode('utf-8')


def placeholder_hash():
    """Hash checked for unknown emails so both sign-in failures cost one bcrypt round trip"""
    return _placeholder_hash(current_app.config.get('BCRYPT_ROUNDS', 12))


def verify_password(password, password_hash):
    """Check a password against a stored bcrypt hash"""
    if not password_hash:
        return False
    try:
        return bcrypt.checkpw(password.encode('utf-8'), password_hash.encode('utf-8'))
    except ValueError:
        # Malformed stored hash or over-long password
        return False
