import json

import pytest

from app.modules.product_batches.router import get_product_batch_service
from app.modules.product_batches.exceptions import (
    DuplicateBatchNumber, ProductNotFound, SectionNotFound
)
from tests.fakes import FakeService

BASE = "/api/v1/productBatches/"

BATCH = {
    "batch_number": 1,
    "current_quantity": 1,
    "current_temperature": 1,
    "due_date": "2023-11-10",
    "initial_quantity": 1,
    "manufacturing_date": "2023-11-10",
    "manufacturing_hour": 1,
    "minimum_temperature": 1,
    "product_id": 1,
    "section_id": 1,
}


def test_create_batch(client, override):
    override(get_product_batch_service, FakeService(save=1))

    response = client.post(BASE, json=BATCH)

    assert response.status_code == 201
    assert response.json() == {"data": {"id": 1, **BATCH}}


def test_create_batch_invalid_syntax_reports_offset(client, override):
    override(get_product_batch_service, FakeService(save=1))

    response = client.post(BASE, content=b'{"batch_number": x}')

    assert response.status_code == 400
    assert response.json() == {"message": "bad request: invalid syntax at position 18"}


def test_create_batch_missing_field(client, override):
    service = override(get_product_batch_service, FakeService(save=1))
    body = {k: v for k, v in BATCH.items() if k != "due_date"}

    response = client.post(BASE, json=body)

    assert response.status_code == 400
    assert response.json() == {"message": "bad request: field due_date is missing"}
    assert service.calls == []


def test_create_batch_type_mismatch(client, override):
    override(get_product_batch_service, FakeService(save=1))

    response = client.post(BASE, json={**BATCH, "current_quantity": 1.5})

    assert response.status_code == 400
    assert response.json() == {
        "message": "bad request: type number 1.5 was provided at current_quantity field, int was expected."
    }


@pytest.mark.parametrize("field, value, message", [
    ("manufacturing_hour", 25, "manufacturing_hour value must be within range [0 - 23]"),
    ("current_quantity", -5, "current_quantity must be equal or greater than 0"),
    ("due_date", "2023/11/10", "due_date should match format YYYY-MM-DD"),
    ("manufacturing_date", "2023-02-30", "manufacturing_date should match format YYYY-MM-DD"),
])
def test_create_batch_validation(client, override, field, value, message):
    service = override(get_product_batch_service, FakeService(save=1))

    response = client.post(BASE, json={**BATCH, field: value})

    assert response.status_code == 400
    assert response.json() == {"message": f"bad request: {message}"}
    assert service.calls == []


@pytest.mark.parametrize("error", [DuplicateBatchNumber(), ProductNotFound(), SectionNotFound()])
def test_create_batch_conflicts(client, override, error):
    override(get_product_batch_service, FakeService(save=error))

    response = client.post(BASE, json=BATCH)

    assert response.status_code == 409
    assert response.json() == {"message": str(error)}


def test_create_batch_non_object_body(client, override):
    override(get_product_batch_service, FakeService(save=1))

    response = client.post(BASE, json=[BATCH])

    assert response.status_code == 500
    assert response.json() == {"message": "internal server error"}


def test_create_batch_serializes_id_first(client, override):
    override(get_product_batch_service, FakeService(save=1))

    response = client.post(BASE, json=BATCH)

    assert response.content.startswith(b'{"data":{"id":1,"batch_number":1,')


def test_create_batch_number_in_text_field(client, override):
    service = override(get_product_batch_service, FakeService(save=1))

    response = client.post(BASE, json={**BATCH, "due_date": 5})

    assert response.status_code == 400
    assert response.json() == {
        "message": "bad request: type number was provided at due_date field, string was expected."
    }
    assert service.calls == []


def _raw_batch(field, literal):
    """Cuerpo completo con el valor de un campo escrito tal cual"""
    return json.dumps(BATCH).replace(f'"{field}": {json.dumps(BATCH[field])}', f'"{field}": {literal}')


def test_create_batch_keeps_number_literal(client, override):
    override(get_product_batch_service, FakeService(save=1))

    response = client.post(BASE, content=_raw_batch("current_quantity", "1e3"))

    assert response.status_code == 400
    assert response.json() == {
        "message": "bad request: type number 1e3 was provided at current_quantity field, int was expected."
    }


def test_create_batch_number_out_of_int64_range(client, override):
    service = override(get_product_batch_service, FakeService(save=1))

    response = client.post(BASE, content=_raw_batch("batch_number", "99999999999999999999"))

    assert response.status_code == 400
    assert response.json() == {
        "message": "bad request: type number 99999999999999999999 was provided "
                   "at batch_number field, int was expected."
    }
    assert service.calls == []


def test_create_batch_syntax_offset_counts_bytes(client, override):
    override(get_product_batch_service, FakeService(save=1))

    response = client.post(BASE, content='{"due_date": "ñ", x}'.encode("utf-8"))

    assert response.status_code == 400
    assert response.json() == {"message": "bad request: invalid syntax at position 20"}
