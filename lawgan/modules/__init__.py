"""
LAWGAN Modules
==============

One Flask blueprint per content area, plus the public pages and the admin
dashboard that consume them.
"""

__all__ = [
    'auth', 'articles', 'editorial_boards', 'executives', 'advertisements',
    'quotes', 'pages', 'dashboard', 'ops',
]
