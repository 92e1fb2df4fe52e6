"""
Articles Module
===============

Content API for news articles.

Provides:
- Article listing (all, or by category)
- Publishing with slug uniqueness
- Partial edits addressed by id or slug
- Deletion
"""

from flask import Blueprint

articles_bp = Blueprint('articles', __name__, url_prefix='/articles')

from . import routes

__all__ = ['articles_bp']
