import pytest

from app.modules.purchase_orders.router import get_purchase_order_service
from app.modules.purchase_orders.schemas import PurchaseOrderCreate, BuyerPurchaseOrdersReport
from app.modules.purchase_orders.exceptions import (
    PurchaseOrderAlreadyExists, BuyerNotExists, ProductRecordNotExists
)
from tests.fakes import FakeService

BASE = "/api/v1/purchaseOrders"
REPORT_URL = "/api/v1/buyers/reportPurchaseOrders"

ORDER = {
    "order_number": "PO-001",
    "order_date": "2023-11-10",
    "tracking_code": "TRK-1",
    "buyer_id": 1,
    "product_record_id": 1,
    "order_status_id": 1,
}


def test_create(client, override):
    service = override(get_purchase_order_service, FakeService(save=12))

    response = client.post(BASE, json={"user_id": 4, **ORDER})

    assert response.status_code == 201
    assert response.json() == {"data": {"id": 12, **ORDER}}
    assert service.calls_to("save") == [(PurchaseOrderCreate(**ORDER), 4)]


def test_create_bad_request(client, override):
    override(get_purchase_order_service, FakeService(save=12))

    response = client.post(BASE, json={**ORDER, "buyer_id": "1"})

    assert response.status_code == 400
    assert response.json() == {"error": "Bad request"}


@pytest.mark.parametrize("field, value", [
    ("order_number", ""),
    ("tracking_code", ""),
    ("buyer_id", 0),
    ("order_status_id", -1),
])
def test_create_missing_fields(client, override, field, value):
    service = override(get_purchase_order_service, FakeService(save=12))

    response = client.post(BASE, json={**ORDER, field: value})

    assert response.status_code == 422
    assert response.json() == {"error": "Missing fields"}
    assert service.calls == []


def test_create_invalid_date(client, override):
    override(get_purchase_order_service, FakeService(save=12))

    response = client.post(BASE, json={**ORDER, "order_date": "2023/11/10"})

    assert response.status_code == 422
    assert response.json() == {"error": "Invalid date format"}


@pytest.mark.parametrize("error, message", [
    (PurchaseOrderAlreadyExists(), "Purchase order already exists"),
    (BuyerNotExists(), "Buyer id not found"),
    (ProductRecordNotExists(), "Product record id not found"),
])
def test_create_conflicts(client, override, error, message):
    override(get_purchase_order_service, FakeService(save=error))

    response = client.post(BASE, json=ORDER)

    assert response.status_code == 409
    assert response.json() == {"error": message}


def test_report_all_buyers(client, override):
    report = [BuyerPurchaseOrdersReport(
        id=1, card_number_id="402323", first_name="Jhon", last_name="Doe", purchase_orders_count=2
    )]
    service = override(get_purchase_order_service, FakeService(report_by_buyer=report))

    response = client.get(REPORT_URL)

    assert response.status_code == 200
    assert response.json() == {"data": [report[0].model_dump()]}
    assert service.calls_to("report_by_buyer") == [(0,)]


def test_report_empty_is_no_content(client, override):
    override(get_purchase_order_service, FakeService(report_by_buyer=[]))

    response = client.get(REPORT_URL)

    assert response.status_code == 204
    assert response.content == b""


@pytest.mark.parametrize("buyer_id", ["-1", "abc"])
def test_report_invalid_id(client, override, buyer_id):
    service = override(get_purchase_order_service, FakeService())

    response = client.get(f"{REPORT_URL}?id={buyer_id}")

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid id"}
    assert service.calls == []


def test_report_unknown_buyer(client, override):
    override(get_purchase_order_service, FakeService(report_by_buyer=BuyerNotExists()))

    response = client.get(f"{REPORT_URL}?id=7")

    assert response.status_code == 404
    assert response.json() == {"error": "Buyer id not found"}


def test_report_is_repeatable(client, override):
    report = [
        BuyerPurchaseOrdersReport(
            id=1, card_number_id="402323", first_name="Jhon", last_name="Doe", purchase_orders_count=2
        ),
        BuyerPurchaseOrdersReport(
            id=2, card_number_id="402324", first_name="Ana", last_name="Ruiz", purchase_orders_count=0
        ),
    ]
    override(get_purchase_order_service, FakeService(report_by_buyer=report))

    first = client.get(REPORT_URL)
    second = client.get(REPORT_URL)

    assert first.status_code == 200
    assert first.content == second.content
