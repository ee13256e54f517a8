from sqlmodel import Session, select

from app.models.user import User
from app.routes import auth
from tests.conftest import auth_headers, user_payload


def test_health(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "OK"
    assert body["message"] == "VidyaShare API is running!"
    assert "timestamp" in body


def test_register_returns_token_and_public_user(client):
    response = client.post("/api/auth/register", json=user_payload(college="IISc", interests=["fiction"]))

    assert response.status_code == 201
    body = response.json()
    assert body["message"] == "Registration successful"
    assert body["token"]
    assert set(body["user"]) == {"id", "firstName", "lastName", "email", "isPremium"}
    assert body["user"]["email"] == "asha@example.com"
    assert body["user"]["isPremium"] is False
    assert "password" not in response.text


def test_register_stores_a_digest_not_the_password(client, engine):
    client.post("/api/auth/register", json=user_payload())

    with Session(engine) as session:
        user = session.exec(select(User)).one()
    assert user.password != "s3cret-pass"
    assert user.password.startswith("$2")


def test_duplicate_email_is_rejected_and_first_user_untouched(client, engine):
    client.post("/api/auth/register", json=user_payload())

    response = client.post(
        "/api/auth/register",
        json=user_payload(firstName="Mallory", password="other-pass"),
    )

    assert response.status_code == 400
    assert response.json() == {"error": "User already exists with this email"}

    with Session(engine) as session:
        users = session.exec(select(User)).all()
    assert len(users) == 1
    assert users[0].first_name == "Asha"

    login = client.post("/api/auth/login", json={"email": "asha@example.com", "password": "s3cret-pass"})
    assert login.status_code == 200


def test_duplicate_email_that_slips_past_the_lookup(client, engine, monkeypatch):
    client.post("/api/auth/register", json=user_payload())
    # two registrations racing: both see no existing user
    monkeypatch.setattr(auth, "find_user_by_email", lambda session, email: None)

    response = client.post("/api/auth/register", json=user_payload(firstName="Mallory"))

    assert response.status_code == 400
    assert response.json() == {"error": "User already exists with this email"}
    with Session(engine) as session:
        users = session.exec(select(User)).all()
    assert [u.first_name for u in users] == ["Asha"]


def test_email_match_is_case_sensitive(client):
    client.post("/api/auth/register", json=user_payload())
    response = client.post("/api/auth/register", json=user_payload(email="Asha@example.com"))
    assert response.status_code == 201


def test_register_missing_required_field(client):
    payload = user_payload()
    del payload["pincode"]

    response = client.post("/api/auth/register", json=payload)

    assert response.status_code == 400
    assert "pincode" in response.json()["error"]


def test_login_returns_wallet_balance(client, register):
    register()

    response = client.post("/api/auth/login", json={"email": "asha@example.com", "password": "s3cret-pass"})

    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Login successful"
    assert body["user"]["walletBalance"] == 0
    assert body["user"]["isPremium"] is False

    profile = client.get("/api/users/profile", headers=auth_headers(body["token"]))
    assert profile.status_code == 200


def test_login_failures_are_indistinguishable(client, register):
    register()

    wrong_password = client.post("/api/auth/login", json={"email": "asha@example.com", "password": "nope"})
    unknown_email = client.post("/api/auth/login", json={"email": "ghost@example.com", "password": "nope"})

    assert wrong_password.status_code == unknown_email.status_code == 401
    assert wrong_password.content == unknown_email.content
    assert wrong_password.json() == {"error": "Invalid credentials"}


def test_unknown_email_still_pays_for_a_bcrypt_check(client, app, register, monkeypatch):
    register()
    hasher = app.state.password_hasher
    calls = []
    monkeypatch.setattr(hasher, "dummy_verify", lambda: calls.append("dummy") or False)
    real_verify = hasher.verify
    monkeypatch.setattr(hasher, "verify", lambda *args: calls.append("verify") or real_verify(*args))

    client.post("/api/auth/login", json={"email": "ghost@example.com", "password": "nope"})
    client.post("/api/auth/login", json={"email": "asha@example.com", "password": "nope"})

    assert calls == ["dummy", "verify"]
