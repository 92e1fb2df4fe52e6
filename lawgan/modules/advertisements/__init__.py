"""
Advertisements Module
=====================

Content API for advertisement slots. Each advert carries an image, a target
url, an owner and a free-form page tag used for placement.
"""

from flask import Blueprint

advertisements_bp = Blueprint('advertisements', __name__, url_prefix='/advertisements')

from . import routes

__all__ = ['advertisements_bp']
