"""HTTP tests for the payments API.

Tests cover:
- Status codes for every endpoint, including 404 vs 400 mapping
- Error bodies carrying the service message in "detail"
- Query parameters cashDesk, dateFrom and deleteItems
"""

from datetime import datetime
from decimal import Decimal
from typing import Any

import pytest
from fastapi.testclient import TestClient

from pos_payments.infrastructure.time_provider import FixedTimeProvider

pytestmark = pytest.mark.integration

PAYMENTS = "/api/payments"


def create_payment(
    client: TestClient,
    payment_type: str = "Cash",
    employee_registration_number: int = 2,
    cash_desk_number: int = 1,
) -> dict[str, Any]:
    response = client.post(
        PAYMENTS,
        json={
            "cash_desk_number": cash_desk_number,
            "payment_type": payment_type,
            "employee_registration_number": employee_registration_number,
        },
    )
    assert response.status_code == 201, response.text
    return response.json()


def add_item(client: TestClient, payment_id: int, unit_price: str = "1.50") -> dict[str, Any]:
    response = client.post(
        f"{PAYMENTS}/{payment_id}/items",
        json={"description": "Water", "quantity": 2, "unit_price": unit_price},
    )
    assert response.status_code == 201, response.text
    return response.json()


# =============================================================================
# Monitoring
# =============================================================================


class TestHealth:
    def test_health(self, client: TestClient) -> None:
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok"}


# =============================================================================
# POST /api/payments
# =============================================================================


class TestCreatePayment:
    def test_create_returns_201_and_open_payment(self, client: TestClient) -> None:
        body = create_payment(client)

        assert body["id"] > 0
        assert body["status"] == "Open"
        assert body["payment_type"] == "Cash"
        assert body["confirmed_at"] is None
        assert datetime.fromisoformat(body["created_at"]) == datetime.fromisoformat(
            "2024-05-13T12:00:00+00:00"
        )

    def test_manager_can_create_credit_card_payment(self, client: TestClient) -> None:
        body = create_payment(client, payment_type="CreditCard", employee_registration_number=2)

        assert body["payment_type"] == "CreditCard"

    @pytest.mark.parametrize(
        ("payload", "detail"),
        [
            (
                {"cash_desk_number": 9, "payment_type": "Cash", "employee_registration_number": 1},
                "Invalid cash desk",
            ),
            (
                {"cash_desk_number": 1, "payment_type": "Cash", "employee_registration_number": 9},
                "Invalid employee",
            ),
            (
                {"cash_desk_number": 1, "payment_type": "cash", "employee_registration_number": 1},
                "Invalid payment type",
            ),
            (
                {
                    "cash_desk_number": 1,
                    "payment_type": "CreditCard",
                    "employee_registration_number": 1,
                },
                "Insufficient rights to create a credit card payment.",
            ),
        ],
    )
    def test_rejected_payment_returns_400(
        self, client: TestClient, payload: dict[str, Any], detail: str
    ) -> None:
        response = client.post(PAYMENTS, json=payload)

        assert response.status_code == 400
        assert response.json() == {"detail": detail}
        assert client.get(PAYMENTS).json() == []

    def test_missing_field_is_a_validation_error(self, client: TestClient) -> None:
        response = client.post(PAYMENTS, json={"cash_desk_number": 1})

        assert response.status_code == 422


# =============================================================================
# GET /api/payments
# =============================================================================


class TestListPayments:
    def test_list_all(self, client: TestClient) -> None:
        first = create_payment(client)
        second = create_payment(client)

        response = client.get(PAYMENTS)

        assert response.status_code == 200
        assert [p["id"] for p in response.json()] == [first["id"], second["id"]]

    def test_filter_by_cash_desk(self, client: TestClient) -> None:
        create_payment(client)

        assert len(client.get(PAYMENTS, params={"cashDesk": 1}).json()) == 1
        assert client.get(PAYMENTS, params={"cashDesk": 2}).json() == []

    def test_filter_by_date_from(self, client: TestClient, now: datetime) -> None:
        time_provider: FixedTimeProvider = client.app.state.time_provider
        create_payment(client)
        time_provider.set_time(now.replace(day=20))
        later = create_payment(client)

        response = client.get(PAYMENTS, params={"dateFrom": "2024-05-14"})

        assert [p["id"] for p in response.json()] == [later["id"]]
        assert len(client.get(PAYMENTS, params={"dateFrom": "2024-05-13"}).json()) == 2

    def test_invalid_date_is_a_validation_error(self, client: TestClient) -> None:
        response = client.get(PAYMENTS, params={"dateFrom": "yesterday"})

        assert response.status_code == 422


# =============================================================================
# GET /api/payments/{id}
# =============================================================================


class TestGetPayment:
    def test_get_returns_items_and_total(self, client: TestClient) -> None:
        payment = create_payment(client)
        add_item(client, payment["id"], unit_price="1.50")
        add_item(client, payment["id"], unit_price="0.25")

        response = client.get(f"{PAYMENTS}/{payment['id']}")

        assert response.status_code == 200
        body = response.json()
        assert body["id"] == payment["id"]
        assert len(body["items"]) == 2
        assert Decimal(str(body["items"][0]["line_total"])) == Decimal("3.00")
        assert Decimal(str(body["total"])) == Decimal("3.50")

    def test_unknown_payment_returns_404(self, client: TestClient) -> None:
        response = client.get(f"{PAYMENTS}/999")

        assert response.status_code == 404
        assert response.json() == {"detail": "Payment not found"}


# =============================================================================
# POST /api/payments/{id}/items
# =============================================================================


class TestAddPaymentItem:
    def test_add_item_returns_201(self, client: TestClient) -> None:
        payment = create_payment(client)

        item = add_item(client, payment["id"])

        assert item["payment_id"] == payment["id"]
        assert item["description"] == "Water"
        assert Decimal(str(item["unit_price"])) == Decimal("1.50")

    def test_add_item_to_unknown_payment_returns_404(self, client: TestClient) -> None:
        response = client.post(
            f"{PAYMENTS}/999/items",
            json={"description": "Water", "quantity": 1, "unit_price": "1.00"},
        )

        assert response.status_code == 404

    def test_add_item_to_confirmed_payment_returns_400(self, client: TestClient) -> None:
        payment = create_payment(client)
        client.patch(f"{PAYMENTS}/{payment['id']}")

        response = client.post(
            f"{PAYMENTS}/{payment['id']}/items",
            json={"description": "Water", "quantity": 1, "unit_price": "1.00"},
        )

        assert response.status_code == 400
        assert response.json() == {"detail": "Payment already confirmed."}

    @pytest.mark.parametrize(
        "payload",
        [
            {"description": "", "quantity": 1, "unit_price": "1.00"},
            {"description": "Water", "quantity": 0, "unit_price": "1.00"},
            {"description": "Water", "quantity": 1, "unit_price": "-1.00"},
        ],
    )
    def test_invalid_item_is_a_validation_error(
        self, client: TestClient, payload: dict[str, Any]
    ) -> None:
        payment = create_payment(client)

        response = client.post(f"{PAYMENTS}/{payment['id']}/items", json=payload)

        assert response.status_code == 422


# =============================================================================
# PATCH /api/payments/{id}
# =============================================================================


class TestConfirmPayment:
    def test_confirm_returns_204(self, client: TestClient) -> None:
        payment = create_payment(client)

        response = client.patch(f"{PAYMENTS}/{payment['id']}")

        assert response.status_code == 204
        body = client.get(f"{PAYMENTS}/{payment['id']}").json()
        assert body["status"] == "Confirmed"
        assert body["confirmed_at"] is not None

    def test_confirm_unknown_payment_returns_404(self, client: TestClient) -> None:
        response = client.patch(f"{PAYMENTS}/999")

        assert response.status_code == 404
        assert response.json() == {"detail": "Payment not found"}

    def test_confirm_twice_returns_400(self, client: TestClient) -> None:
        payment = create_payment(client)
        client.patch(f"{PAYMENTS}/{payment['id']}")

        response = client.patch(f"{PAYMENTS}/{payment['id']}")

        assert response.status_code == 400
        assert response.json() == {"detail": "Payment already confirmed."}


# =============================================================================
# DELETE /api/payments/{id}
# =============================================================================


class TestDeletePayment:
    def test_delete_with_items_and_delete_items_returns_204(self, client: TestClient) -> None:
        payment = create_payment(client)
        add_item(client, payment["id"])

        response = client.delete(f"{PAYMENTS}/{payment['id']}", params={"deleteItems": "true"})

        assert response.status_code == 204
        assert client.get(f"{PAYMENTS}/{payment['id']}").status_code == 404

    def test_delete_with_items_without_delete_items_returns_400(self, client: TestClient) -> None:
        payment = create_payment(client)
        add_item(client, payment["id"])

        response = client.delete(f"{PAYMENTS}/{payment['id']}")

        assert response.status_code == 400
        assert response.json() == {"detail": "Payment has payment items."}
        assert len(client.get(f"{PAYMENTS}/{payment['id']}").json()["items"]) == 1

    def test_delete_without_items_returns_204(self, client: TestClient) -> None:
        payment = create_payment(client)

        response = client.delete(f"{PAYMENTS}/{payment['id']}")

        assert response.status_code == 204

    def test_delete_unknown_payment_returns_404(self, client: TestClient) -> None:
        response = client.delete(f"{PAYMENTS}/999", params={"deleteItems": "true"})

        assert response.status_code == 404
