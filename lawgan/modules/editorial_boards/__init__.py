"""
Editorial Board Module
======================

Content API for editorial board members (name, position, bio, portrait).
"""

from flask import Blueprint

editorial_boards_bp = Blueprint('editorial_boards', __name__, url_prefix='/editorial-boards')

from . import routes

__all__ = ['editorial_boards_bp']
