"""
Shared fixtures: a LAWGAN app on an in-memory SQLite database, a test
client, and a signed-in admin.
"""

import base64

import pytest

from lawgan import create_app

PNG_BYTES = b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR"
PNG_DATA_URL = "data:image/png;base64," + base64.b64encode(PNG_BYTES).decode("ascii")

TEST_CONFIG = {
    "TESTING": True,
    "SQLALCHEMY_DATABASE_URI": "sqlite://",
    "DB_BACKEND": "sql",
    "DB_SSL": False,
    "DB_EXIT_ON_DISCONNECT": False,
    "BCRYPT_ROUNDS": 4,
    "JWT_SECRET": "test-secret",
    "ADMIN_SIGNUP_ENABLED": True,
    "MAX_QUOTES": 6,
    "LOG_DB": None,
}


def make_app(**overrides):
    app = create_app(dict(TEST_CONFIG, **overrides))
    with app.app_context():
        app.extensions["lawgan"].database.create_all()
    return app


@pytest.fixture
def app():
    """Fully initialised app with every LAWGAN module registered."""
    app = make_app()
    yield app
    with app.app_context():
        from lawgan.core.models import db
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def admin_credentials():
    return {"name": "Ada Editor", "email": "ada@lawgan.test", "password": "correct horse"}


@pytest.fixture
def admin_token(client, admin_credentials):
    client.post("/admin/signup", json=admin_credentials)
    response = client.post("/admin/signin", json={
        "email": admin_credentials["email"],
        "password": admin_credentials["password"],
    })
    return response.get_json()["token"]


@pytest.fixture
def auth_headers(admin_token):
    return {"Authorization": f"Bearer {admin_token}"}


@pytest.fixture
def publish_article(client, auth_headers):
    """Publish an article through the API and return its JSON"""
    def _publish(**fields):
        payload = {
            "title": "Court rules on tenancy reform",
            "slug": "tenancy-reform",
            "content": "First paragraph.\nSecond paragraph.",
            "category": "law",
        }
        payload.update(fields)
        response = client.post("/articles/publish", json=payload, headers=auth_headers)
        assert response.status_code == 201, response.get_json()
        return response.get_json()["article"]
    return _publish
