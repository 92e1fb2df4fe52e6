import os

from lawgan.core.config import Config as LawganConfig

IS_PRODUCTION = (
    os.getenv('ENVIRONMENT') == 'production' or
    os.getenv('FLASK_ENV') == 'production' or
    os.getenv('PRODUCTION') == '1'
)


class Config(LawganConfig):
    DEBUG = not IS_PRODUCTION

    # Signup stays open locally; production deployments opt in explicitly
    if IS_PRODUCTION and os.getenv('ADMIN_SIGNUP_ENABLED') is None:
        ADMIN_SIGNUP_ENABLED = False
