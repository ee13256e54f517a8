from tests.conftest import auth_headers, book_payload


def test_create_book_requires_token(client):
    response = client.post("/api/books", json=book_payload())
    assert response.status_code == 401
    assert response.json() == {"error": "Access denied. No token provided."}


def test_create_book_rejects_bad_token(client):
    response = client.post("/api/books", json=book_payload(), headers=auth_headers("garbage"))
    assert response.status_code == 403
    assert response.json() == {"error": "Invalid token."}


def test_create_book_forces_caller_as_owner(client, register):
    token, user = register()
    _, other = register(email="other@example.com")

    response = client.post(
        "/api/books",
        json=book_payload(owner=other["id"], ownerId=other["id"]),
        headers=auth_headers(token),
    )

    assert response.status_code == 201
    body = response.json()
    assert body["message"] == "Book listed successfully"
    assert body["book"]["owner"]["id"] == user["id"]
    assert body["book"]["views"] == 0
    assert body["book"]["availability"]["isAvailable"] is True


def test_create_book_rejects_unknown_condition(client, register):
    token, _ = register()
    response = client.post("/api/books", json=book_payload(condition="mint"), headers=auth_headers(token))
    assert response.status_code == 400


def test_filter_by_category_sorted_by_price(client, register, create_book):
    token, _ = register()
    create_book(token, title="A", category="Fiction", sellingPrice=250)
    create_book(token, title="B", category="Science", sellingPrice=50)
    create_book(token, title="C", category="Fiction", sellingPrice=100)
    create_book(token, title="D", category="Fiction", sellingPrice=175)

    response = client.get("/api/books", params={"category": "Fiction", "sort": "price_low"})

    assert response.status_code == 200
    books = response.json()["books"]
    assert [b["category"] for b in books] == ["Fiction"] * 3
    prices = [b["sellingPrice"] for b in books]
    assert prices == sorted(prices) == [100, 175, 250]


def test_price_high_and_range(client, register, create_book):
    token, _ = register()
    for price in (50, 150, 250, 350):
        create_book(token, sellingPrice=price)

    response = client.get("/api/books", params={"minPrice": 100, "maxPrice": 300, "sort": "price_high"})

    assert [b["sellingPrice"] for b in response.json()["books"]] == [250, 150]


def test_unknown_sort_falls_back_to_newest(client, register, create_book):
    token, _ = register()
    created = [create_book(token, title=f"Book {i}", sellingPrice=price) for i, price in enumerate((300, 100, 200))]

    response = client.get("/api/books", params={"sort": "cheapest"})

    assert response.status_code == 200
    assert [b["id"] for b in response.json()["books"]] == [b["id"] for b in reversed(created)]


def test_pagination(client, register, create_book):
    token, _ = register()
    created = [create_book(token, title=f"Book {i}") for i in range(12)]
    newest_first = [b["id"] for b in reversed(created)]

    response = client.get("/api/books", params={"page": 2, "limit": 5})

    body = response.json()
    assert [b["id"] for b in body["books"]] == newest_first[5:10]
    assert body["pagination"] == {"total": 12, "page": 2, "pages": 3}


def test_default_limit_is_twelve(client, register, create_book):
    token, _ = register()
    for i in range(13):
        create_book(token, title=f"Book {i}")

    body = client.get("/api/books").json()

    assert len(body["books"]) == 12
    assert body["pagination"] == {"total": 13, "page": 1, "pages": 2}


def test_search_is_case_insensitive_over_title_author_isbn(client, register, create_book):
    token, _ = register()
    create_book(token, title="Malgudi Days", author="R. K. Narayan", isbn="111")
    create_book(token, title="Gitanjali", author="Tagore", isbn="222")
    create_book(token, title="Godan", author="Premchand", isbn="978-222")

    assert {b["title"] for b in client.get("/api/books", params={"search": "malgudi"}).json()["books"]} == {"Malgudi Days"}
    assert {b["title"] for b in client.get("/api/books", params={"search": "TAGORE"}).json()["books"]} == {"Gitanjali"}
    assert {b["title"] for b in client.get("/api/books", params={"search": "222"}).json()["books"]} == {"Gitanjali", "Godan"}


def test_search_treats_wildcards_literally(client, register, create_book):
    token, _ = register()
    create_book(token, title="Plain")

    assert client.get("/api/books", params={"search": "%"}).json()["books"] == []


def test_list_resolves_owner_summary(client, register, create_book):
    token, user = register()
    create_book(token)

    book = client.get("/api/books").json()["books"][0]

    assert book["owner"] == {
        "id": user["id"],
        "firstName": "Asha",
        "lastName": "Rao",
        "rating": 0,
    }


def test_filter_by_listing_type_and_condition(client, register, create_book):
    token, _ = register()
    create_book(token, title="Rent good", listingType="rent", condition="good")
    create_book(token, title="Sell good", listingType="sell", condition="good")
    create_book(token, title="Sell new", listingType="sell", condition="new")

    response = client.get("/api/books", params={"listingType": "sell", "condition": "good"})

    assert [b["title"] for b in response.json()["books"]] == ["Sell good"]


def test_get_book_increments_views(client, register, create_book):
    token, _ = register()
    book = create_book(token)

    first = client.get(f"/api/books/{book['id']}").json()
    second = client.get(f"/api/books/{book['id']}").json()

    assert second["views"] == first["views"] + 1
    assert first["views"] == 1


def test_get_book_resolves_owner_contact(client, register, create_book):
    token, user = register()
    book = create_book(token)

    body = client.get(f"/api/books/{book['id']}").json()

    assert body["owner"] == {
        "id": user["id"],
        "firstName": "Asha",
        "lastName": "Rao",
        "email": "asha@example.com",
        "phone": "9876543210",
        "rating": 0,
    }


def test_get_missing_book(client):
    response = client.get("/api/books/999")
    assert response.status_code == 404
    assert response.json() == {"error": "Book not found"}


def test_store_failure_becomes_generic_500(client, monkeypatch):
    def broken_paginate(**kwargs):
        raise RuntimeError("connection reset by peer")

    monkeypatch.setattr("app.routes.books.paginate", broken_paginate)

    response = client.get("/api/books")

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to fetch books"}
    assert "connection reset" not in response.text
