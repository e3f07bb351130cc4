import pytest

from app.modules.employees.router import get_employee_service
from app.modules.employees.schemas import EmployeeCreate, EmployeeResponse
from app.modules.employees.exceptions import EmployeeNotFound, EmployeeAlreadyExists
from tests.fakes import FakeService

BASE = "/api/v1/employees"

EMPLOYEE = {
    "card_number_id": "E-100",
    "first_name": "Ana",
    "last_name": "Gómez",
    "warehouse_id": 1,
}


@pytest.fixture()
def stored_employee() -> EmployeeResponse:
    return EmployeeResponse(id=1, **EMPLOYEE)


def test_get_all(client, override, stored_employee):
    override(get_employee_service, FakeService(get_all=[stored_employee]))

    response = client.get(BASE)

    assert response.status_code == 200
    assert response.json() == {"data": [{"id": 1, **EMPLOYEE}]}


def test_get_all_error(client, override):
    override(get_employee_service, FakeService(get_all=RuntimeError("db down")))

    response = client.get(BASE)

    assert response.status_code == 500
    assert response.json() == {"message": "internal error"}


def test_get_invalid_id_stops_before_service(client, override):
    service = override(get_employee_service, FakeService())

    response = client.get(BASE + "/uno")

    assert response.status_code == 400
    assert response.json() == {"error": "invalid id"}
    assert service.calls == []


def test_get_not_found(client, override):
    override(get_employee_service, FakeService(get=EmployeeNotFound()))

    response = client.get(BASE + "/4")

    assert response.status_code == 404
    assert response.json() == {"message": "employee not found"}


def test_create(client, override):
    service = override(get_employee_service, FakeService(save=8))

    response = client.post(BASE, json=EMPLOYEE)

    assert response.status_code == 201
    assert response.json() == {"data": {"id": 8, **EMPLOYEE}}
    assert service.calls_to("save") == [(EmployeeCreate(**EMPLOYEE),)]


def test_create_bad_json(client, override):
    override(get_employee_service, FakeService(save=8))

    response = client.post(BASE, content=b"not json")

    assert response.status_code == 400
    assert response.json() == {"message": "bad request"}


def test_create_missing_field(client, override):
    service = override(get_employee_service, FakeService(save=8))
    body = {k: v for k, v in EMPLOYEE.items() if k not in ("first_name", "warehouse_id")}

    response = client.post(BASE, json=body)

    assert response.status_code == 422
    assert response.json() == {"message": "field first_name is empty"}
    assert service.calls == []


def test_create_wrong_type(client, override):
    override(get_employee_service, FakeService(save=8))

    response = client.post(BASE, json={**EMPLOYEE, "warehouse_id": "1"})

    assert response.status_code == 400
    assert response.json() == {"message": "bad request"}


def test_create_negative_warehouse(client, override):
    service = override(get_employee_service, FakeService(save=8))

    response = client.post(BASE, json={**EMPLOYEE, "warehouse_id": -1})

    assert response.status_code == 400
    assert response.json() == {"message": "negative warehouse_id"}
    assert service.calls == []


def test_create_duplicate(client, override):
    override(get_employee_service, FakeService(save=EmployeeAlreadyExists()))

    response = client.post(BASE, json=EMPLOYEE)

    assert response.status_code == 409
    assert response.json() == {"message": "duplicate employee number"}


def test_create_unexpected_error(client, override):
    override(get_employee_service, FakeService(save=RuntimeError("boom")))

    response = client.post(BASE, json=EMPLOYEE)

    assert response.status_code == 500
    assert response.json() == {"message": "internal error"}


def test_update(client, override, stored_employee):
    updated = stored_employee.model_copy(update={"warehouse_id": 2})
    service = override(get_employee_service, FakeService(get=stored_employee, update=updated))

    response = client.patch(BASE + "/1", json={"warehouse_id": 2})

    assert response.status_code == 200
    assert response.json()["data"]["warehouse_id"] == 2
    assert service.calls_to("update") == [(1, EmployeeCreate(**{**EMPLOYEE, "warehouse_id": 2}))]


@pytest.mark.parametrize("employee_id", ["0", "x"])
def test_update_bad_id(client, override, employee_id):
    override(get_employee_service, FakeService())

    response = client.patch(f"{BASE}/{employee_id}", json={})

    assert response.status_code == 400
    assert response.json() == {"message": "bad id"}


def test_update_unknown_employee(client, override):
    override(get_employee_service, FakeService(get=EmployeeNotFound()))

    response = client.patch(BASE + "/1", json={"first_name": "Eva"})

    assert response.status_code == 404
    assert response.json() == {"message": "employee not found"}


def test_update_duplicate_card(client, override, stored_employee):
    override(get_employee_service, FakeService(get=stored_employee, update=EmployeeAlreadyExists()))

    response = client.patch(BASE + "/1", json={"card_number_id": "E-200"})

    assert response.status_code == 409
    assert response.json() == {"message": "duplicate section number"}


def test_delete(client, override):
    override(get_employee_service, FakeService())

    response = client.delete(BASE + "/1")

    assert response.status_code == 204


def test_delete_not_found(client, override):
    override(get_employee_service, FakeService(delete=EmployeeNotFound()))

    response = client.delete(BASE + "/1")

    assert response.status_code == 404
    assert response.json() == {"message": "employee not found"}
