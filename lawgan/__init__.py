"""
LAWGAN - News Publishing Backend
================================

Flask extension wiring the LAWGAN content API, public pages and admin
dashboard onto an app:

- Admin signup/signin with bearer tokens
- Articles, editorial board, executives, advertisements and quotes
- Public front-end pages and the /admin dashboard
- SQL (Flask-SQLAlchemy) or hosted REST (Supabase) storage

Usage:
    from flask import Flask
    from lawgan import Lawgan

    app = Flask(__name__)
    lawgan = Lawgan(app)
"""

import atexit
import logging

import click
from flask import Flask, jsonify, render_template, request
from flask_cors import CORS

from .core.config import Config
from .core.database import create_database
from .core.logging_service import LoggingService
from .core.middleware import ApiPrefixMiddleware

__version__ = '0.1.0'

logger = logging.getLogger(__name__)

API_PATH_PREFIXES = (
    '/admin/signup', '/admin/signin', '/articles', '/editorial-boards',
    '/executives', '/advertisements', '/quotes', '/health',
)


def _is_flask_default(app, key):
    return key in app.default_config and app.config[key] == app.default_config[key]


class Lawgan:
    """Flask extension that registers every LAWGAN module on an app"""

    def __init__(self, app=None):
        self.app = None
        self.database = None
        self._registered = []
        if app is not None:
            self.init_app(app)

    def init_app(self, app):
        self.app = app

        # App-provided values win over environment defaults. Keys still at
        # Flask's own default (MAX_CONTENT_LENGTH is None there) count as unset
        for key, value in Config.as_dict().items():
            if key not in app.config or _is_flask_default(app, key):
                app.config[key] = value

        logging.getLogger('lawgan').setLevel(app.config.get('LOG_LEVEL') or 'INFO')

        CORS(app, origins=app.config['CORS_ORIGINS'], supports_credentials=True)
        app.wsgi_app = ApiPrefixMiddleware(app.wsgi_app)

        self.database = create_database(app)
        app.extensions['lawgan'] = self
        self.database.init_app(app)

        self._register_blueprints(app)
        self._register_request_hooks(app)
        self._register_cli(app)

        @app.context_processor
        def inject_lawgan_config():
            return {
                'brand_name': 'LAWGAN',
                'lawgan_config': {
                    'max_quotes': app.config.get('MAX_QUOTES'),
                    'db_backend': self.database.backend,
                },
            }

        atexit.register(self.close)
        logger.info("LAWGAN initialised with %s backend, modules: %s",
                    self.database.backend, ', '.join(self._registered))

    def _register_blueprints(self, app):
        from .modules.auth import auth_bp
        from .modules.articles import articles_bp
        from .modules.editorial_boards import editorial_boards_bp
        from .modules.executives import executives_bp
        from .modules.advertisements import advertisements_bp
        from .modules.quotes import quotes_bp
        from .modules.pages import pages_bp
        from .modules.dashboard import dashboard_bp
        from .modules.ops import ops_health_bp

        modules = [
            ('auth', auth_bp),
            ('articles', articles_bp),
            ('editorial_boards', editorial_boards_bp),
            ('executives', executives_bp),
            ('advertisements', advertisements_bp),
            ('quotes', quotes_bp),
            ('pages', pages_bp),
            ('dashboard', dashboard_bp),
            ('ops', ops_health_bp),
        ]
        for name, blueprint in modules:
            app.register_blueprint(blueprint)
            self._registered.append(name)

    def _register_request_hooks(self, app):
        def wants_json():
            if request.environ.get('lawgan.api_prefixed'):
                return True
            return request.path.startswith(API_PATH_PREFIXES)

        @app.after_request
        def log_mutating_api_calls(response):
            if request.method in ('POST', 'PATCH', 'DELETE') and wants_json():
                LoggingService.log_api_call('api', request.path, request.method, response.status_code)
            return response

        @app.errorhandler(404)
        @app.errorhandler(405)
        @app.errorhandler(413)
        def handle_http_error(error):
            if wants_json():
                return jsonify({'message': error.description}), error.code
            if error.code == 404:
                return render_template('pages/error.html', message='Page not found.'), 404
            return error

    def _register_cli(self, app):
        @app.cli.command('init-db')
        def init_db():
            """Create all tables (SQL backend)."""
            if self.database.backend != 'sql':
                raise click.ClickException('init-db only applies to the sql backend.')
            self.database.create_all()
            click.echo('Tables created.')

        @app.cli.command('cleanup-logs')
        @click.option('--days', default=30, show_default=True, help='Keep entries newer than this.')
        def cleanup_logs(days):
            """Prune persisted log entries."""
            deleted = LoggingService.cleanup_old_logs(days)
            click.echo(f'Removed {deleted} log entries older than {days} days.')

    def get_registered_modules(self):
        return list(self._registered)

    def close(self):
        if self.database is None or self.app is None:
            return
        with self.app.app_context():
            self.database.close()


def create_app(config=None):
    """App factory used by the starter template and the tests"""
    app = Flask(__name__)
    if config:
        app.config.update(config)
    Lawgan(app)
    return app


__all__ = ['Lawgan', 'create_app']
