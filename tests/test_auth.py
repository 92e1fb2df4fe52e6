"""Admin signup, signin and bearer tokens."""

import jwt

from conftest import make_app
from lawgan.modules.auth.tokens import issue_token, decode_token
from lawgan.core.errors import AuthError


def test_signup_creates_admin_without_secrets(client, admin_credentials):
    response = client.post("/admin/signup", json=admin_credentials)

    assert response.status_code == 201
    admin = response.get_json()["admin"]
    assert admin["email"] == "ada@lawgan.test"
    assert admin["name"] == "Ada Editor"
    assert "password_hash" not in admin
    assert "last_login" not in admin


def test_signup_requires_all_fields(client):
    response = client.post("/admin/signup", json={"email": "a@b.c"})
    assert response.status_code == 400
    assert response.get_json()["message"] == "Name, email, and password are required."


def test_signup_duplicate_email_is_case_insensitive(client, admin_credentials):
    client.post("/admin/signup", json=admin_credentials)
    response = client.post("/admin/signup", json=dict(admin_credentials, email="ADA@Lawgan.test "))

    assert response.status_code == 409
    assert response.get_json()["message"] == "Email already in use."


def test_signup_can_be_disabled():
    app = make_app(ADMIN_SIGNUP_ENABLED=False)
    response = app.test_client().post("/admin/signup", json={
        "name": "X", "email": "x@lawgan.test", "password": "pw",
    })
    assert response.status_code == 403


def test_signin_returns_token_and_admin(client, admin_credentials):
    client.post("/admin/signup", json=admin_credentials)
    response = client.post("/admin/signin", json={
        "email": "Ada@Lawgan.test", "password": admin_credentials["password"],
    })

    assert response.status_code == 200
    data = response.get_json()
    assert set(data["admin"]) == {"id", "name", "email"}
    payload = jwt.decode(data["token"], "test-secret", algorithms=["HS256"])
    assert payload["sub"] == str(data["admin"]["id"])
    assert payload["exp"] - payload["iat"] == 3600


def test_signin_failures_share_one_message(client, admin_credentials):
    client.post("/admin/signup", json=admin_credentials)

    wrong_password = client.post("/admin/signin", json={
        "email": admin_credentials["email"], "password": "nope",
    })
    unknown_email = client.post("/admin/signin", json={
        "email": "ghost@lawgan.test", "password": "nope",
    })

    assert wrong_password.status_code == 401
    assert unknown_email.status_code == 401
    assert wrong_password.get_json() == unknown_email.get_json() == {"message": "Invalid credentials."}


def test_signin_requires_email_and_password(client):
    response = client.post("/admin/signin", json={"email": "a@b.c"})
    assert response.status_code == 400
    assert response.get_json()["message"] == "Email and password are required."


def test_expired_token_is_rejected(app, client):
    with app.app_context():
        app.config["JWT_EXPIRES_SECONDS"] = -10
        token = issue_token(1)
        app.config["JWT_EXPIRES_SECONDS"] = 3600

        try:
            decode_token(token)
        except AuthError as e:
            assert e.message == "Token has expired."
        else:
            raise AssertionError("expired token decoded")

    response = client.post("/quotes/publish", json={"title": "t", "author": "a"},
                           headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 401


def test_token_signed_with_other_secret_is_rejected(client):
    token = jwt.encode({"sub": "1"}, "someone-else", algorithm="HS256")
    response = client.post("/quotes/publish", json={"title": "t", "author": "a"},
                           headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 401
    assert response.get_json()["error"] == "Invalid token."


def test_unknown_email_still_checks_a_password_hash(client, admin_credentials):
    from unittest.mock import patch
    from lawgan.modules.auth import routes

    client.post("/admin/signup", json=admin_credentials)

    with patch.object(routes, "verify_password", wraps=routes.verify_password) as verify:
        response = client.post("/admin/signin", json={"email": "ghost@lawgan.test", "password": "nope"})

    assert response.status_code == 401
    verify.assert_called_once()
    password, stored_hash = verify.call_args[0]
    assert password == "nope"
    assert stored_hash.startswith("$2")
