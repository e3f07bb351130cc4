"""
Flujos completos contra SQLite en memoria: routers, servicios y repositorios reales.
"""

import json

API = "/api/v1"

PRODUCT = {
    "description": "Yogur",
    "expiration_rate": 1,
    "freezing_rate": 2,
    "height": 6.4,
    "length": 4.5,
    "netweight": 3.4,
    "product_code": "YOG-01",
    "recommended_freezing_temperature": 1.3,
    "width": 1.2,
    "product_type_id": 1,
    "seller_id": 1,
}

SECTION = {
    "section_number": 10,
    "current_temperature": 5,
    "minimum_temperature": 1,
    "current_capacity": 20,
    "minimum_capacity": 5,
    "maximum_capacity": 50,
    "warehouse_id": 1,
    "product_type_id": 1,
}

BATCH = {
    "batch_number": 1,
    "current_quantity": 30,
    "current_temperature": 4,
    "due_date": "2024-05-01",
    "initial_quantity": 40,
    "manufacturing_date": "2024-01-10",
    "manufacturing_hour": 8,
    "minimum_temperature": 1,
    "product_id": 1,
    "section_id": 1,
}

WAREHOUSE = {
    "address": "Calle 1 # 2-3",
    "telephone": "3001234567",
    "warehouse_code": "BOG-01",
    "minimum_capacity": 10,
    "minimum_temperature": 2,
}


def _create(client, path, body):
    response = client.post(f"{API}{path}", json=body)
    assert response.status_code == 201, response.text
    return response.json()["data"]


def _create_locality(client, postal_code=1000, name="Palermo"):
    return _create(client, "/localities/", {
        "postal_code": postal_code,
        "locality_name": name,
        "province_name": "Buenos Aires",
        "country_name": "Argentina",
    })

# ===== LOCALIDADES Y VENDEDORES =====

def test_sellers_report_by_locality(db_client):
    locality = _create_locality(db_client)
    _create_locality(db_client, postal_code=2000, name="Recoleta")
    _create(db_client, "/seller", {
        "cid": 1,
        "company_name": "Lácteos SA",
        "address": "Av. Siempre Viva 742",
        "telephone": "5555",
        "locality_id": locality["id"],
    })

    response = db_client.get(f"{API}/localities/reportSellers?id={locality['id']}")

    assert response.status_code == 200
    assert response.json() == {"data": [{
        "locality_id": locality["id"],
        "locality_name": "Palermo",
        "postal_code": 1000,
        "sellers_count": 1,
    }]}

    counts = db_client.get(f"{API}/localities/reportSellers").json()["data"]
    assert [row["sellers_count"] for row in counts] == [1, 0]


def test_seller_requires_existing_locality(db_client):
    response = db_client.post(f"{API}/seller", json={
        "cid": 1,
        "company_name": "Lácteos SA",
        "address": "Av. Siempre Viva 742",
        "telephone": "5555",
        "locality_id": 99,
    })

    assert response.status_code == 422
    assert response.json() == {"code": "unprocessable_entity", "message": "id locality not exists"}


def test_duplicate_locality(db_client):
    _create_locality(db_client)

    response = db_client.post(f"{API}/localities/", json={
        "postal_code": 1000,
        "locality_name": "Otra",
        "province_name": "Otra",
        "country_name": "Otra",
    })

    assert response.status_code == 409
    assert response.json() == {"code": "conflict", "message": "locality already exists"}

# ===== TRANSPORTISTAS =====

def test_carries_report(db_client):
    _create_locality(db_client)
    _create_locality(db_client, postal_code=2000, name="Recoleta")
    _create(db_client, "/carries", {
        "cid": "CAR-1",
        "company_name": "Transportes",
        "address": "Calle 5",
        "telephone": "123",
        "locality_id": "1000",
    })

    all_localities = db_client.get(f"{API}/localities/reportCarries")
    assert all_localities.json() == {"data": [
        {"locality_id": "1000", "locality_name": "Palermo", "carries_count": 1}
    ]}

    without_carries = db_client.get(f"{API}/localities/reportCarries?id=2000")
    assert without_carries.json() == {"data": {
        "locality_id": "2000", "locality_name": "Recoleta", "carries_count": 0
    }}

    unknown = db_client.get(f"{API}/localities/reportCarries?id=3000")
    assert unknown.status_code == 404
    assert unknown.json() == {"message": "Locality not found"}


def test_carry_for_unknown_postal_code(db_client):
    response = db_client.post(f"{API}/carries", json={
        "cid": "CAR-1",
        "company_name": "Transportes",
        "address": "Calle 5",
        "telephone": "123",
        "locality_id": "1000",
    })

    assert response.status_code == 404
    assert response.json() == {"message": "Locality not found"}

# ===== PRODUCTOS =====

def test_product_records_report(db_client):
    product = _create(db_client, "/products/", PRODUCT)
    _create(db_client, "/productRecords", {
        "last_update_date": "2024-01-01",
        "purchase_price": 10.5,
        "sale_price": 15,
        "product_id": product["id"],
    })

    response = db_client.get(f"{API}/products/reportRecords?id={product['id']}")

    assert response.status_code == 200
    assert response.json() == {"data": [
        {"product_id": product["id"], "description": "Yogur", "record_count": 1}
    ]}


def test_duplicate_product_code(db_client):
    _create(db_client, "/products/", PRODUCT)

    response = db_client.post(f"{API}/products/", json=PRODUCT)

    assert response.status_code == 409


def test_product_update_and_delete(db_client):
    product = _create(db_client, "/products/", PRODUCT)

    updated = db_client.patch(f"{API}/products/{product['id']}", json={"description": "Kumis"})
    assert updated.status_code == 200
    assert updated.json()["data"]["description"] == "Kumis"
    assert updated.json()["data"]["product_code"] == "YOG-01"

    assert db_client.delete(f"{API}/products/{product['id']}").status_code == 204
    assert db_client.get(f"{API}/products/{product['id']}").status_code == 404

# ===== SECCIONES Y LOTES =====

def test_section_product_count_and_cascade(db_client):
    _create(db_client, "/products/", PRODUCT)
    section = _create(db_client, "/sections/", SECTION)
    _create(db_client, "/productBatches/", BATCH)
    _create(db_client, "/productBatches/", {**BATCH, "batch_number": 2, "current_quantity": 12})

    report = db_client.get(f"{API}/sections/reportProducts?id={section['id']}")
    assert report.json() == {"data": [
        {"id": section["id"], "section_number": 10, "product_count": 42}
    ]}

    assert db_client.delete(f"{API}/sections/{section['id']}").status_code == 204
    assert db_client.get(f"{API}/productBatches/").json() == {"data": []}


def test_batch_for_unknown_section(db_client):
    _create(db_client, "/products/", PRODUCT)

    response = db_client.post(f"{API}/productBatches/", json=BATCH)

    assert response.status_code == 409
    assert response.json() == {"message": "can't create batch, provided section id was not found"}

# ===== EMPLEADOS Y ÓRDENES DE ENTRADA =====

def test_inbound_orders_report(db_client):
    warehouse = _create(db_client, "/warehouses/", WAREHOUSE)
    employee = _create(db_client, "/employees", {
        "card_number_id": "E-100",
        "first_name": "Ana",
        "last_name": "Gómez",
        "warehouse_id": warehouse["id"],
    })
    order = {
        "order_number": "IN-001",
        "employee_id": employee["id"],
        "product_batch_id": 1,
        "warehouse_id": warehouse["id"],
    }
    _create(db_client, "/inboundOrders", order)

    duplicate = db_client.post(f"{API}/inboundOrders", json=order)
    assert duplicate.status_code == 409
    assert duplicate.json() == {"message": "duplicate inbound order number"}

    response = db_client.get(f"{API}/employees/reportInboundOrders?id={employee['id']}")
    assert response.status_code == 200
    assert response.json()["data"]["inboud_orders_count"] == 1

    unknown = db_client.get(f"{API}/employees/reportInboundOrders?id=99")
    assert unknown.status_code == 404


def test_inbound_order_for_unknown_warehouse(db_client):
    employee = _create(db_client, "/employees", {
        "card_number_id": "E-100",
        "first_name": "Ana",
        "last_name": "Gómez",
        "warehouse_id": 1,
    })

    response = db_client.post(f"{API}/inboundOrders", json={
        "order_number": "IN-001",
        "employee_id": employee["id"],
        "product_batch_id": 1,
        "warehouse_id": 7,
    })

    assert response.status_code == 409
    assert response.json() == {"message": "Warehouse does not exists"}

# ===== COMPRADORES Y ÓRDENES DE COMPRA =====

def test_purchase_orders_report(db_client):
    assert db_client.get(f"{API}/buyers/reportPurchaseOrders").status_code == 204

    product = _create(db_client, "/products/", PRODUCT)
    record = _create(db_client, "/productRecords", {
        "last_update_date": "2024-01-01",
        "purchase_price": 10.5,
        "sale_price": 15,
        "product_id": product["id"],
    })
    buyer = _create(db_client, "/buyers", {
        "card_number_id": "402323",
        "first_name": "Jhon",
        "last_name": "Doe",
    })
    _create(db_client, "/purchaseOrders", {
        "order_number": "PO-001",
        "order_date": "2024-02-01",
        "tracking_code": "TRK-1",
        "buyer_id": buyer["id"],
        "product_record_id": record["id"],
        "order_status_id": 1,
    })

    response = db_client.get(f"{API}/buyers/reportPurchaseOrders?id={buyer['id']}")

    assert response.status_code == 200
    assert response.json() == {"data": [{
        "id": buyer["id"],
        "card_number_id": "402323",
        "first_name": "Jhon",
        "last_name": "Doe",
        "purchase_orders_count": 1,
    }]}


def test_purchase_order_for_unknown_buyer(db_client):
    response = db_client.post(f"{API}/purchaseOrders", json={
        "order_number": "PO-001",
        "order_date": "2024-02-01",
        "tracking_code": "TRK-1",
        "buyer_id": 5,
        "product_record_id": 1,
        "order_status_id": 1,
    })

    assert response.status_code == 409
    assert response.json() == {"error": "Buyer id not found"}


def test_section_number_out_of_range_is_rejected_before_storage(db_client):
    body = json.dumps(SECTION).replace('"section_number": 10', '"section_number": 99999999999999999999')

    response = db_client.post(f"{API}/sections/", content=body)

    assert response.status_code == 400
    assert db_client.get(f"{API}/sections/").json() == {"data": []}
