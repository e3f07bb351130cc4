from app.modules.product_records.router import get_product_record_service
from app.modules.product_records.schemas import ProductRecordReport
from app.modules.product_records.exceptions import ProductNotFound
from tests.fakes import FakeService

RECORD = {
    "last_update_date": "2023-11-10",
    "purchase_price": 10.5,
    "sale_price": 15.0,
    "product_id": 1,
}


def test_create_record(client, override):
    override(get_product_record_service, FakeService(save=3))

    response = client.post("/api/v1/productRecords", json=RECORD)

    assert response.status_code == 201
    assert response.json() == {"data": {"id": 3, **RECORD}}


def test_create_record_invalid_json(client, override):
    override(get_product_record_service, FakeService(save=3))

    response = client.post("/api/v1/productRecords", content=b"[1, 2")

    assert response.status_code == 422
    assert response.json() == {"message": "invalid json"}


def test_create_record_non_positive_price(client, override):
    service = override(get_product_record_service, FakeService(save=3))

    response = client.post("/api/v1/productRecords", json={**RECORD, "sale_price": 0})

    assert response.status_code == 422
    assert response.json() == {"message": "invalid json"}
    assert service.calls == []


def test_create_record_bad_date(client, override):
    override(get_product_record_service, FakeService(save=3))

    response = client.post("/api/v1/productRecords", json={**RECORD, "last_update_date": "2023/11/10"})

    assert response.status_code == 422
    assert response.json() == {"message": "invalid date format"}


def test_create_record_unknown_product(client, override):
    override(get_product_record_service, FakeService(save=ProductNotFound()))

    response = client.post("/api/v1/productRecords", json=RECORD)

    assert response.status_code == 409
    assert response.json() == {"message": "product not found"}


def test_report_all_products(client, override):
    report = [ProductRecordReport(product_id=1, description="Yogurt", record_count=2)]
    service = override(get_product_record_service, FakeService(report=report))

    response = client.get("/api/v1/products/reportRecords")

    assert response.status_code == 200
    assert response.json() == {"data": [{"product_id": 1, "description": "Yogurt", "record_count": 2}]}
    assert service.calls_to("report") == [(0,)]


def test_report_invalid_id(client, override):
    service = override(get_product_record_service, FakeService(report=[]))

    response = client.get("/api/v1/products/reportRecords?id=x")

    assert response.status_code == 400
    assert response.json() == {"message": "invalid id"}
    assert service.calls == []


def test_report_unknown_product(client, override):
    override(get_product_record_service, FakeService(report=ProductNotFound()))

    response = client.get("/api/v1/products/reportRecords?id=4")

    assert response.status_code == 404
    assert response.json() == {"message": "product not found"}
