import pytest

from app.modules.products.router import get_product_service
from app.modules.products.schemas import ProductCreate, ProductResponse
from app.modules.products.exceptions import ProductNotFound, ProductCodeExists
from tests.fakes import FakeService

BASE = "/api/v1/products/"

PRODUCT = {
    "description": "Yogurt natural",
    "expiration_rate": 1.5,
    "freezing_rate": 2,
    "height": 10.5,
    "length": 4,
    "netweight": 0.5,
    "product_code": "YOG-001",
    "recommended_freezing_temperature": 3,
    "width": 4,
    "product_type_id": 2,
    "seller_id": 1,
}


@pytest.fixture()
def stored_product() -> ProductResponse:
    return ProductResponse(id=1, **PRODUCT)


def test_ping(client):
    response = client.get("/api/v1/ping")
    assert response.status_code == 200
    assert response.json() == {"message": "pong"}


def test_get_all_returns_service_list(client, override, stored_product):
    override(get_product_service, FakeService(get_all=[stored_product]))

    response = client.get(BASE)

    assert response.status_code == 200
    assert response.json() == {"data": [{"id": 1, **PRODUCT}]}


def test_get_all_internal_error(client, override):
    override(get_product_service, FakeService(get_all=RuntimeError("db down")))

    response = client.get(BASE)

    assert response.status_code == 500
    assert response.json() == {"message": "internal server error"}


def test_get_invalid_id_does_not_call_service(client, override):
    service = override(get_product_service, FakeService())

    response = client.get(BASE + "abc")

    assert response.status_code == 400
    assert response.json() == {"message": "invalid id"}
    assert service.calls == []


def test_get_not_found(client, override):
    override(get_product_service, FakeService(get=ProductNotFound()))

    response = client.get(BASE + "9")

    assert response.status_code == 404
    assert response.json() == {"message": "product not found"}


def test_get_returns_product(client, override, stored_product):
    service = override(get_product_service, FakeService(get=stored_product))

    response = client.get(BASE + "1")

    assert response.status_code == 200
    assert response.json()["data"]["product_code"] == "YOG-001"
    assert service.calls_to("get") == [(1,)]


def test_create_returns_assigned_id(client, override):
    service = override(get_product_service, FakeService(save=7))

    response = client.post(BASE, json=PRODUCT)

    assert response.status_code == 201
    assert response.json() == {"data": {"id": 7, **PRODUCT}}
    assert service.calls_to("save") == [(ProductCreate(**PRODUCT),)]


def test_create_invalid_json(client, override):
    service = override(get_product_service, FakeService(save=1))

    response = client.post(BASE, content=b'{"description": ')

    assert response.status_code == 422
    assert response.json() == {"message": "invalid json"}
    assert service.calls == []


def test_create_wrong_type(client, override):
    service = override(get_product_service, FakeService(save=1))

    response = client.post(BASE, json={**PRODUCT, "description": 10})

    assert response.status_code == 422
    assert response.json() == {"message": "invalid json"}
    assert service.calls == []


@pytest.mark.parametrize("field, value", [
    ("expiration_rate", 0),
    ("freezing_rate", 101),
    ("description", ""),
    ("width", 0),
    ("product_code", "X" * 101),
    ("product_type_id", 0),
])
def test_create_incomplete_product(client, override, field, value):
    service = override(get_product_service, FakeService(save=1))

    response = client.post(BASE, json={**PRODUCT, field: value})

    assert response.status_code == 422
    assert response.json() == {"message": "invalid json"}
    assert service.calls_to("save") == []


def test_create_duplicate_code(client, override):
    override(get_product_service, FakeService(save=ProductCodeExists()))

    response = client.post(BASE, json=PRODUCT)

    assert response.status_code == 409
    assert response.json() == {"message": "product_code already exists"}


def test_update_merges_partial_body(client, override, stored_product):
    updated = stored_product.model_copy(update={"description": "Yogurt griego"})
    service = override(get_product_service, FakeService(get=stored_product, update=updated))

    response = client.patch(BASE + "1", json={"description": "Yogurt griego"})

    assert response.status_code == 200
    assert response.json()["data"]["description"] == "Yogurt griego"
    product_id, merged = service.calls_to("update")[0]
    assert product_id == 1
    assert merged == ProductCreate(**{**PRODUCT, "description": "Yogurt griego"})


def test_update_non_positive_id(client, override):
    service = override(get_product_service, FakeService())

    response = client.patch(BASE + "0", json={})

    assert response.status_code == 400
    assert service.calls == []


def test_update_not_found(client, override):
    override(get_product_service, FakeService(get=ProductNotFound()))

    response = client.patch(BASE + "3", json={"width": 2})

    assert response.status_code == 404
    assert response.json() == {"message": "product not found"}


def test_delete(client, override):
    service = override(get_product_service, FakeService())

    response = client.delete(BASE + "1")

    assert response.status_code == 204
    assert response.content == b""
    assert service.calls_to("delete") == [(1,)]


def test_delete_not_found(client, override):
    override(get_product_service, FakeService(delete=ProductNotFound()))

    response = client.delete(BASE + "1")

    assert response.status_code == 404
    assert response.json() == {"message": "product not found"}


def test_delete_unexpected_error_exposes_message(client, override):
    override(get_product_service, FakeService(delete=RuntimeError("foreign key constraint")))

    response = client.delete(BASE + "1")

    assert response.status_code == 500
    assert response.json() == {"message": "foreign key constraint"}
