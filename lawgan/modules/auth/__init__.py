"""
LAWGAN Auth Module

Provides admin authentication:
- Admin signup (bcrypt-hashed passwords)
- Admin sign-in issuing a signed, 1-hour bearer token
- ``require_admin`` decorator guarding every mutating content route
"""

from flask import Blueprint

auth_bp = Blueprint('auth', __name__, url_prefix='/admin')

from . import routes
from .tokens import issue_token, decode_token, require_admin

__all__ = ['auth_bp', 'issue_token', 'decode_token', 'require_admin']
