"""
Ops Module
==========

Public /health endpoint for uptime monitors (no auth). Reports whether the
configured storage backend answers.
"""

from flask import Blueprint

ops_health_bp = Blueprint(
    'ops_health',
    __name__,
    url_prefix='/health'
)

from . import routes

__all__ = ['ops_health_bp']
