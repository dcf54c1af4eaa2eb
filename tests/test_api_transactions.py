from __future__ import annotations

import pytest

from tagledger.errors import StorageError


@pytest.fixture
def post_transaction(client, auth_headers):
    def _post(date: str, amount: str, tags: str = "", headers=None):
        response = client.post(
            "/api/transactions",
            json={"date": date, "amount": amount, "tags": tags},
            headers=headers or auth_headers,
        )
        assert response.status_code == 201, response.get_json()
        return response.get_json()

    return _post


def test_add_then_list_round_trips(client, auth_headers, post_transaction):
    created = post_transaction("15-01-2025", "+500.25", "#salary #january")

    assert created == {
        "transactionId": 1,
        "date": "15-01-2025",
        "amount": "+500.25",
        "tags": "#salary #january",
    }
    listed = client.get("/api/transactions", headers=auth_headers)
    assert listed.status_code == 200
    assert listed.get_json() == [created]


def test_list_is_sorted_by_date_then_id(client, auth_headers, post_transaction):
    post_transaction("10-01-2025", "-1")
    post_transaction("02-02-2025", "-2")
    post_transaction("10-01-2025", "-3")
    post_transaction("31-12-2024", "-4")

    body = client.get("/api/transactions", headers=auth_headers).get_json()

    assert [row["transactionId"] for row in body] == [4, 1, 3, 2]


def test_add_rejects_invalid_format(client, auth_headers):
    for payload in (
        {"date": "2025-01-01", "amount": "-1", "tags": ""},
        {"date": "01-01-2025", "amount": "1", "tags": ""},
        {"date": "01-01-2025", "amount": "-1", "tags": "food"},
        {"date": "01-01-2025", "amount": -1, "tags": ""},
    ):
        response = client.post("/api/transactions", json=payload, headers=auth_headers)
        assert response.status_code == 400
        assert response.get_json()["message"] == "Invalid transaction format!"


def test_add_without_tags_field_means_no_tags(client, auth_headers):
    response = client.post(
        "/api/transactions", json={"date": "01-01-2025", "amount": "-1"}, headers=auth_headers
    )

    assert response.status_code == 201
    assert response.get_json()["tags"] == ""


def test_update_repositions_and_replaces_tags(client, auth_headers, post_transaction):
    post_transaction("01-01-2025", "-100", "#food")
    post_transaction("05-01-2025", "-5")

    response = client.put(
        "/api/transactions",
        json={"transactionId": 1, "date": "09-01-2025", "amount": "+100", "tags": "#refund"},
        headers=auth_headers,
    )

    assert response.status_code == 201
    body = client.get("/api/transactions", headers=auth_headers).get_json()
    assert [row["transactionId"] for row in body] == [2, 1]
    assert body[1] == {"transactionId": 1, "date": "09-01-2025", "amount": "+100", "tags": "#refund"}


def test_update_missing_or_foreign_transaction_is_client_error(
    client, register, post_transaction
):
    owner = register("owner")
    intruder = register("intruder")
    post_transaction("01-01-2025", "-100", headers=owner)

    payload = {"transactionId": 1, "date": "01-01-2025", "amount": "-1", "tags": ""}
    assert client.put("/api/transactions", json=payload, headers=intruder).status_code == 400
    payload["transactionId"] = 42
    assert client.put("/api/transactions", json=payload, headers=owner).status_code == 400
    payload["transactionId"] = "abc"
    assert client.put("/api/transactions", json=payload, headers=owner).status_code == 400

    body = client.get("/api/transactions", headers=owner).get_json()
    assert body[0]["amount"] == "-100"


def test_delete_transaction(client, auth_headers, post_transaction):
    post_transaction("01-01-2025", "-100", "#food")

    first = client.delete("/api/transactions", json={"transactionId": 1}, headers=auth_headers)
    second = client.delete("/api/transactions", json={"transactionId": 1}, headers=auth_headers)

    assert first.status_code == 201
    assert second.status_code == 400
    assert second.get_json()["message"] == "Nothing was deleted."
    assert client.get("/api/transactions", headers=auth_headers).get_json() == []


def test_delete_nonexistent_is_not_a_storage_error(client, auth_headers):
    response = client.delete("/api/transactions", json={"transactionId": 7}, headers=auth_headers)
    assert response.status_code == 400

    response = client.delete("/api/transactions", json={}, headers=auth_headers)
    assert response.status_code == 400


@pytest.mark.parametrize("raw_id", ["²", "¹²", "1.0", " ", "-1", "0", True, 1.5, None])
def test_unparseable_transaction_id_is_client_error(
    client, auth_headers, post_transaction, raw_id
):
    post_transaction("01-01-2025", "-100")

    deleted = client.delete(
        "/api/transactions", json={"transactionId": raw_id}, headers=auth_headers
    )
    updated = client.put(
        "/api/transactions",
        json={"transactionId": raw_id, "date": "02-01-2025", "amount": "-5", "tags": ""},
        headers=auth_headers,
    )

    assert deleted.status_code == 400
    assert deleted.get_json()["message"] == "Nothing was deleted."
    assert updated.status_code == 400
    assert client.get("/api/transactions", headers=auth_headers).get_json()[0]["amount"] == "-100"


def test_users_cannot_see_each_other(client, register, post_transaction):
    carol = register("carol")
    bob = register("bobby")
    post_transaction("01-01-2025", "-100", headers=carol)

    assert client.get("/api/transactions", headers=bob).get_json() == []
    assert (
        client.delete("/api/transactions", json={"transactionId": 1}, headers=bob).status_code
        == 400
    )


def test_analytics_scenario(client, auth_headers, post_transaction):
    post_transaction("01-01-2025", "-100")
    post_transaction("15-01-2025", "+500", "#food")

    response = client.get(
        "/api/transactions/analytics",
        query_string={"startDate": "01-01-2025", "endDate": "31-01-2025", "tags": ""},
        headers=auth_headers,
    )
    assert response.status_code == 200
    assert response.get_json() == {"spendings": -100.0, "income": 500.0}

    filtered = client.get(
        "/api/transactions/analytics",
        query_string={"startDate": "01-01-2025", "endDate": "31-01-2025", "tags": "#food"},
        headers=auth_headers,
    )
    assert filtered.get_json() == {"spendings": 0.0, "income": 500.0}


def test_oversized_amount_is_rejected_and_analytics_stays_usable(
    client, auth_headers, post_transaction
):
    oversized = client.post(
        "/api/transactions",
        json={"date": "01-01-2025", "amount": "-" + "9" * 400, "tags": ""},
        headers=auth_headers,
    )
    assert oversized.status_code == 400
    assert oversized.get_json()["message"] == "Invalid transaction format!"

    post_transaction("01-01-2025", "-" + "9" * 63)
    post_transaction("02-01-2025", "-" + "9" * 63)

    response = client.get(
        "/api/transactions/analytics",
        query_string={"startDate": "01-01-2025", "endDate": "31-01-2025", "tags": ""},
        headers=auth_headers,
    )
    assert response.status_code == 200
    assert response.get_json() == {"spendings": -2e63, "income": 0.0}


def test_analytics_rejects_bad_query(client, auth_headers):
    bad_date = client.get(
        "/api/transactions/analytics",
        query_string={"startDate": "2025-01-01", "endDate": "31-01-2025", "tags": ""},
        headers=auth_headers,
    )
    bad_tags = client.get(
        "/api/transactions/analytics",
        query_string={"startDate": "01-01-2025", "endDate": "31-01-2025", "tags": "food"},
        headers=auth_headers,
    )

    assert bad_date.status_code == 400
    assert bad_date.get_json()["message"] == "Invalid date format!"
    assert bad_tags.status_code == 400
    assert bad_tags.get_json()["message"] == "Invalid tags format!"


def test_analytics_requires_auth(client):
    response = client.get(
        "/api/transactions/analytics",
        query_string={"startDate": "01-01-2025", "endDate": "31-01-2025"},
    )
    assert response.status_code == 401


def test_storage_failure_is_opaque_500(app, client, auth_headers, monkeypatch):
    def _fail(**_kwargs):
        raise StorageError("disk on fire")

    monkeypatch.setattr(app.extensions["tagledger"].transactions, "add", _fail)

    response = client.post(
        "/api/transactions",
        json={"date": "01-01-2025", "amount": "-1", "tags": ""},
        headers=auth_headers,
    )

    assert response.status_code == 500
    assert response.get_json() == {"message": "Probably database error."}
