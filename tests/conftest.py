from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session

from app.config import Settings
from app.main import create_app
from app.models.transaction import Transaction, TransactionStatus, TransactionType


@pytest.fixture
def settings():
    return Settings(
        env="local",
        database_override_url="sqlite://",
        jwt_secret="test-secret",
        bcrypt_rounds=4,
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def engine(app):
    return app.state.engine


def user_payload(**overrides):
    data = {
        "firstName": "Asha",
        "lastName": "Rao",
        "email": "asha@example.com",
        "password": "s3cret-pass",
        "phone": "9876543210",
        "address": "12 MG Road",
        "city": "Bengaluru",
        "pincode": "560001",
    }
    data.update(overrides)
    return data


def book_payload(**overrides):
    data = {
        "title": "The Guide",
        "author": "R. K. Narayan",
        "isbn": "9780143039648",
        "category": "Fiction",
        "language": "English",
        "publisher": "Penguin",
        "publishYear": 2006,
        "mrp": 1000,
        "sellingPrice": 300,
        "listingType": "rent",
        "condition": "good",
        "description": "Well kept paperback",
    }
    data.update(overrides)
    return data


def auth_headers(token):
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def register(client):
    def _register(**overrides):
        response = client.post("/api/auth/register", json=user_payload(**overrides))
        assert response.status_code == 201, response.text
        body = response.json()
        return body["token"], body["user"]

    return _register


@pytest.fixture
def create_book(client):
    def _create_book(token, **overrides):
        response = client.post(
            "/api/books", json=book_payload(**overrides), headers=auth_headers(token)
        )
        assert response.status_code == 201, response.text
        return response.json()["book"]

    return _create_book


@pytest.fixture
def add_transaction(engine):
    """Insert a transaction straight into the store, bypassing the API."""

    def _add_transaction(book_id, seller_id, buyer_id, status=TransactionStatus.completed,
                         transaction_type=TransactionType.rent, amount=450):
        with Session(engine) as session:
            transaction = Transaction(
                book_id=book_id,
                seller_id=seller_id,
                buyer_id=buyer_id,
                transaction_type=transaction_type,
                amount=amount,
                status=status,
                rental={"start_date": datetime.now(timezone.utc).isoformat(), "end_date": datetime.now(timezone.utc).isoformat()},
            )
            session.add(transaction)
            session.commit()
            session.refresh(transaction)
            return transaction.id

    return _add_transaction


def parse_timestamp(value):
    # fromisoformat only accepts a trailing "Z" from Python 3.11
    return datetime.fromisoformat(value.replace("Z", "+00:00"))
