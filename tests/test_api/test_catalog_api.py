# tests/test_api/test_catalog_api.py

def test_profile(client, auth_headers, borrower):
    response = client.get("/auth/profile", headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["email"] == "ana@example.com"
    assert response.json()["id"] == borrower.id

def test_reads_are_public(client, sample_book):
    assert client.get("/books").status_code == 200
    assert client.get("/authors").status_code == 200
    assert client.get("/categories").status_code == 200

def test_writes_require_token(client):
    assert client.post("/categories", json={"name": "Essay"}).status_code == 401
    assert client.post("/authors", json={"first_name": "A", "last_name": "B"}).status_code == 401

def test_create_category_and_author(client, auth_headers):
    category = client.post("/categories", headers=auth_headers, json={"name": "Essay", "description": "Non-fiction"})
    assert category.status_code == 201
    assert category.json()["book_count"] == 0

    author = client.post("/authors", headers=auth_headers, json={
        "first_name": "Octavio", "last_name": "Paz", "birth_date": "1914-03-31", "nationality": "Mexican"
    })
    assert author.status_code == 201
    assert author.json()["full_name"] == "Octavio Paz"

def test_create_book(client, auth_headers, sample_category, sample_author):
    response = client.post("/books", headers=auth_headers, json={
        "title": "Crónica de una muerte anunciada",
        "isbn": "9781400034710",
        "publication_year": 1981,
        "pages": 120,
        "category_id": sample_category.id,
        "author_ids": [sample_author.id]
    })
    assert response.status_code == 201
    data = response.json()
    assert data["available"] is True
    assert data["category"]["id"] == sample_category.id
    assert [a["id"] for a in data["authors"]] == [sample_author.id]

def test_create_book_with_unknown_category(client, auth_headers, sample_author):
    response = client.post("/books", headers=auth_headers, json={
        "title": "x", "isbn": "123", "category_id": 999, "author_ids": [sample_author.id]
    })
    assert response.status_code == 400

def test_create_book_validates_ranges(client, auth_headers, sample_category):
    response = client.post("/books", headers=auth_headers, json={
        "title": "x", "isbn": "123", "category_id": sample_category.id, "pages": 0
    })
    assert response.status_code == 422

def test_filter_books(client, auth_headers, sample_book, other_book):
    client.post("/loans", headers=auth_headers, json={
        "book_id": sample_book.id, "expected_return_date": "2999-01-01T00:00:00Z"
    })

    available = client.get("/books", params={"available": True}).json()
    assert [b["id"] for b in available] == [other_book.id]

    by_title = client.get("/books", params={"title": "cólera"}).json()
    assert [b["id"] for b in by_title] == [other_book.id]

def test_update_and_delete_book(client, auth_headers, sample_book, sample_category, sample_author):
    response = client.put(f"/books/{sample_book.id}", headers=auth_headers, json={
        "title": "One Hundred Years of Solitude",
        "isbn": sample_book.isbn,
        "category_id": sample_category.id,
        "author_ids": [sample_author.id]
    })
    assert response.status_code == 204
    assert client.get(f"/books/{sample_book.id}").json()["title"] == "One Hundred Years of Solitude"

    assert client.delete(f"/books/{sample_book.id}", headers=auth_headers).status_code == 204
    assert client.get(f"/books/{sample_book.id}").status_code == 404

def test_delete_category_in_use(client, auth_headers, sample_book, sample_category):
    response = client.delete(f"/categories/{sample_category.id}", headers=auth_headers)
    assert response.status_code == 400

def test_missing_resources(client, auth_headers):
    assert client.get("/books/999").status_code == 404
    assert client.get("/authors/999").status_code == 404
    assert client.get("/categories/999").status_code == 404
    assert client.delete("/authors/999", headers=auth_headers).status_code == 404

def test_logout_revokes_token(client, auth_headers):
    assert client.post("/auth/logout", headers=auth_headers).status_code == 204
    assert client.get("/auth/profile", headers=auth_headers).status_code == 401
