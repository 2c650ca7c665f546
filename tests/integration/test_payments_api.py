# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Integration tests for admin payment endpoints."""

from decimal import Decimal

PAYMENTS_URL = "/api/v1/admin/payments"


def make_payment(client, **overrides) -> dict:
    body = {
        "payment_recorder_id": "REC-1",
        "amount": "20.00",
        "date": "2025-04-10",
        "description": "Monthly support",
    }
    body.update(overrides)
    response = client.post(PAYMENTS_URL, json=body)
    assert response.status_code == 201
    return response.json()["payment"]


class TestAccessControl:
    def test_requires_authentication(self, client):
        assert client.get(PAYMENTS_URL).status_code == 401

    def test_requires_admin(self, authenticated_client):
        assert authenticated_client.get(PAYMENTS_URL).status_code == 403


class TestPayments:
    def test_create(self, admin_client):
        payment = make_payment(admin_client)
        assert payment["status"] == "pending"
        assert Decimal(payment["amount"]) == Decimal("20.00")

    def test_create_rejects_non_positive_amount(self, admin_client):
        response = admin_client.post(
            PAYMENTS_URL,
            json={
                "payment_recorder_id": "REC",
                "amount": "-1",
                "date": "2025-01-01",
                "description": "x",
            },
        )
        assert response.status_code == 422

    def test_list_with_filters(self, admin_client):
        make_payment(admin_client, date="2025-01-10", payment_recorder_id="A")
        make_payment(admin_client, date="2025-02-10", status="completed")

        response = admin_client.get(PAYMENTS_URL)
        assert len(response.json()["payments"]) == 2

        response = admin_client.get(PAYMENTS_URL, params={"status": "completed"})
        assert [p["date"] for p in response.json()["payments"]] == ["2025-02-10"]

        response = admin_client.get(
            PAYMENTS_URL, params={"start_date": "2025-02-01", "end_date": "2025-02-28"}
        )
        assert len(response.json()["payments"]) == 1

        response = admin_client.get(PAYMENTS_URL, params={"recorder_id": "A"})
        assert response.json()["payments"][0]["payment_recorder_id"] == "A"

    def test_summary(self, admin_client):
        make_payment(admin_client, amount="10.00", status="completed")
        make_payment(admin_client, amount="5.00")

        response = admin_client.get(PAYMENTS_URL, params={"summary": "true"})
        assert response.status_code == 200
        data = response.json()
        assert Decimal(data["summary"]["total_completed"]) == Decimal("10.00")
        assert Decimal(data["summary"]["total_pending"]) == Decimal("5.00")
        assert data["summary"]["count_pending"] == 1
        assert data["monthly"][0]["month"] == "2025-04"

    def test_update(self, admin_client):
        payment = make_payment(admin_client)
        response = admin_client.patch(
            PAYMENTS_URL, json={"id": payment["id"], "status": "cancelled"}
        )
        assert response.status_code == 200
        assert response.json()["payment"]["status"] == "cancelled"

    def test_update_not_found(self, admin_client):
        response = admin_client.patch(
            PAYMENTS_URL, json={"id": 999, "status": "completed"}
        )
        assert response.status_code == 404

    def test_delete(self, admin_client):
        payment = make_payment(admin_client)
        response = admin_client.delete(PAYMENTS_URL, params={"id": payment["id"]})
        assert response.status_code == 200
        assert response.json()["success"] is True
        again = admin_client.delete(PAYMENTS_URL, params={"id": payment["id"]})
        assert again.status_code == 404
