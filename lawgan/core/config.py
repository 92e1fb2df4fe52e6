import os
from dotenv import load_dotenv

load_dotenv()


def _as_bool(value, default=False):
    if value is None or value == '':
        return default
    return str(value).strip().lower() in ('1', 'true', 'yes', 'on')


def _as_list(value):
    return [item.strip() for item in (value or '').split(',') if item.strip()]


class Config:
    """
    Base configuration for LAWGAN.
    Everything is read from environment variables (or a .env file).
    """
    # Server
    PORT = int(os.getenv('PORT', '5000'))
    CORS_ORIGINS = _as_list(os.getenv('CORS_ORIGIN', 'http://localhost:5173'))
    MAX_CONTENT_LENGTH = 200 * 1024

    # Persistence backend: "sql" (direct database) or "rest" (hosted REST API)
    DB_BACKEND = os.getenv('DB_BACKEND', 'sql').strip().lower()

    DATABASE_URL = os.getenv('DATABASE_URL') or os.getenv('SUPABASE_DB_URL')
    DB_USER = os.getenv('DB_USER', 'postgres')
    DB_PASSWORD = os.getenv('DB_PASSWORD', 'postgres')
    DB_HOST = os.getenv('DB_HOST', 'localhost')
    DB_PORT = int(os.getenv('DB_PORT', '5432'))
    DB_NAME = os.getenv('DB_NAME', 'lawgan')
    # TLS is on by default when a connection URL is given, unless DB_SSL=false
    DB_SSL = _as_bool(os.getenv('DB_SSL'), default=bool(DATABASE_URL))
    DB_EXIT_ON_DISCONNECT = _as_bool(os.getenv('DB_EXIT_ON_DISCONNECT'), default=True)

    # Hosted REST backend
    SUPABASE_URL = os.getenv('SUPABASE_URL')
    SUPABASE_SERVICE_ROLE_KEY = os.getenv('SUPABASE_SERVICE_ROLE_KEY')
    REST_TIMEOUT = int(os.getenv('REST_TIMEOUT', '15'))

    # Admin auth
    JWT_SECRET = os.getenv('JWT_SECRET', 'dev-secret')
    JWT_EXPIRES_SECONDS = 3600
    BCRYPT_ROUNDS = int(os.getenv('BCRYPT_ROUNDS', '12'))
    ADMIN_SIGNUP_ENABLED = _as_bool(os.getenv('ADMIN_SIGNUP_ENABLED'), default=True)

    # Content rules
    MAX_QUOTES = int(os.getenv('MAX_QUOTES', '6'))

    # Logging
    LOG_DB = os.getenv('LOG_DB')
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')

    # Table names
    ADMINS_TABLE = 'admins'
    ARTICLES_TABLE = 'articles'
    EDITORIAL_BOARDS_TABLE = 'editorial_boards'
    EXECUTIVES_TABLE = 'executives'
    ADVERTISEMENTS_TABLE = 'advertisements'
    QUOTES_TABLE = 'quotes'

    @classmethod
    def sqlalchemy_url(cls):
        """Connection URL for the direct database backend"""
        url = cls.DATABASE_URL
        if not url:
            url = (f"postgresql://{cls.DB_USER}:{cls.DB_PASSWORD}"
                   f"@{cls.DB_HOST}:{cls.DB_PORT}/{cls.DB_NAME}")
        # SQLAlchemy no longer accepts the legacy "postgres://" scheme
        if url.startswith('postgres://'):
            url = 'postgresql://' + url[len('postgres://'):]
        return url

    @classmethod
    def as_dict(cls):
        """Upper-case settings, in the shape Flask's app.config expects"""
        values = {
            key: getattr(cls, key)
            for key in dir(cls)
            if key.isupper()
        }
        values['SQLALCHEMY_DATABASE_URI'] = cls.sqlalchemy_url()
        return values
