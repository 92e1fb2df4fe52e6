"""
Public Pages Module
===================

Server-rendered public site: home page, one page per category, article
pages, the editorial board and the About page with executives.
Only published articles are shown.
"""

from flask import Blueprint

pages_bp = Blueprint('pages', __name__, template_folder='templates')

from . import routes

__all__ = ['pages_bp']
