from app.models.transaction import TransactionStatus, TransactionType
from tests.conftest import auth_headers


def test_profile_requires_token(client):
    assert client.get("/api/users/profile").status_code == 401
    assert client.put("/api/users/profile", json={"city": "Pune"}).status_code == 401


def test_profile_hides_password(client, register):
    token, _ = register()

    response = client.get("/api/users/profile", headers=auth_headers(token))

    assert response.status_code == 200
    assert "password" not in response.json()["user"]
    assert response.json()["user"]["email"] == "asha@example.com"


def test_profile_stats(client, register, create_book, add_transaction):
    token, user = register()
    _, buyer = register(email="buyer@example.com")
    book = create_book(token)
    create_book(token, title="Second")

    add_transaction(book["id"], user["id"], buyer["id"], status=TransactionStatus.completed, amount=450)
    add_transaction(book["id"], user["id"], buyer["id"], status=TransactionStatus.completed,
                    transaction_type=TransactionType.purchase, amount=300)
    add_transaction(book["id"], user["id"], buyer["id"], status=TransactionStatus.pending, amount=1000)
    # the owner renting someone else's copy counts towards booksRented
    add_transaction(book["id"], buyer["id"], user["id"], status=TransactionStatus.pending)

    stats = client.get("/api/users/profile", headers=auth_headers(token)).json()["stats"]

    assert stats == {"booksListed": 2, "booksRented": 1, "totalEarned": 750, "rating": 0}


def test_profile_stats_for_new_user(client, register):
    token, _ = register()

    stats = client.get("/api/users/profile", headers=auth_headers(token)).json()["stats"]

    assert stats == {"booksListed": 0, "booksRented": 0, "totalEarned": 0, "rating": 0}


def test_update_profile_strips_email_and_password(client, register):
    token, _ = register()

    response = client.put(
        "/api/users/profile",
        json={
            "city": "Mysuru",
            "interests": ["poetry"],
            "email": "hijack@example.com",
            "password": "changed",
            "isPremium": True,
        },
        headers=auth_headers(token),
    )

    assert response.status_code == 200
    user = response.json()["user"]
    assert response.json()["message"] == "Profile updated successfully"
    assert user["city"] == "Mysuru"
    assert user["interests"] == ["poetry"]
    assert user["email"] == "asha@example.com"
    assert user["isPremium"] is False

    old_login = client.post("/api/auth/login", json={"email": "asha@example.com", "password": "s3cret-pass"})
    assert old_login.status_code == 200
