"""
Quotes Module
=============

Content API for the quotes shown on the home page, capped at MAX_QUOTES.
"""

from flask import Blueprint

quotes_bp = Blueprint('quotes', __name__, url_prefix='/quotes')

from . import routes

__all__ = ['quotes_bp']
