"""
Executives Module
=================

Content API for the executives shown on the About page.
"""

from flask import Blueprint

executives_bp = Blueprint('executives', __name__, url_prefix='/executives')

from . import routes

__all__ = ['executives_bp']
