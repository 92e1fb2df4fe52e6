"""
WSGI middleware
===============

The front end calls the API both as ``/articles`` and ``/api/articles``.
Stripping the prefix before routing lets one set of blueprints serve both.
"""

API_PREFIX = '/api'


class ApiPrefixMiddleware:
    def __init__(self, wsgi_app, prefix=API_PREFIX):
        self.wsgi_app = wsgi_app
        self.prefix = prefix

    def __call__(self, environ, start_response):
        path = environ.get('PATH_INFO', '')
        if path == self.prefix or path.startswith(self.prefix + '/'):
            environ['PATH_INFO'] = path[len(self.prefix):] or '/'
            environ['SCRIPT_NAME'] = environ.get('SCRIPT_NAME', '') + self.prefix
            environ['lawgan.api_prefixed'] = True
        return self.wsgi_app(environ, start_response)
