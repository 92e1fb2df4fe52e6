"""
Dashboard Module
================

Single-page admin dashboard for LAWGAN.

The page signs in against /admin/signin, keeps the bearer token in the
browser and drives the content API for articles, editorial boards,
executives, advertisements and quotes.
"""

from flask import Blueprint

dashboard_bp = Blueprint(
    'dashboard',
    __name__,
    url_prefix='/admin',
    template_folder='templates',
    static_folder='static',
    static_url_path='/static'  # Will be /admin/static due to url_prefix
)

# Import routes after blueprint is created
from . import routes

__all__ = ['dashboard_bp']
