# app/modules/employees/router.py
import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, Request, Response, status
from sqlalchemy.orm import Session

from app.config.database import get_db
from app.core.exceptions import error_body, message_error
from app.core.payload import (
    JSONSyntaxError, first_missing, first_type_mismatch, parse_int, read_json, strip_nulls
)
from .service import EmployeeService
from .schemas import EMPLOYEE_FIELDS, EMPLOYEE_FIELD_TYPES, EmployeeCreate, EmployeeResponse
from .exceptions import EmployeeNotFound, EmployeeAlreadyExists

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/employees", tags=["Employees"])

BAD_REQUEST = "bad request"
BAD_ID = "bad id"
NOT_FOUND = "employee not found"
INTERNAL_ERROR = "internal error"


def get_employee_service(db: Session = Depends(get_db)) -> EmployeeService:
    return EmployeeService(db)


async def _read_employee_body(request: Request, require_all: bool) -> Dict[str, Any]:
    try:
        body = await read_json(request)
    except JSONSyntaxError:
        raise message_error(status.HTTP_400_BAD_REQUEST, BAD_REQUEST)
    if body is None:
        body = {}
    if not isinstance(body, dict):
        raise message_error(status.HTTP_400_BAD_REQUEST, BAD_REQUEST)

    if require_all:
        missing = first_missing(body, EMPLOYEE_FIELDS)
        if missing:
            raise message_error(status.HTTP_422_UNPROCESSABLE_ENTITY, f"field {missing} is empty")

    if first_type_mismatch(body, EMPLOYEE_FIELD_TYPES):
        raise message_error(status.HTTP_400_BAD_REQUEST, BAD_REQUEST)

    body = strip_nulls(body)
    body.pop("id", None)
    return body


def _check_negative(employee: EmployeeCreate):
    error = employee.negative_field_error()
    if error:
        raise message_error(status.HTTP_400_BAD_REQUEST, error)


@router.get("")
async def get_all_employees(service: EmployeeService = Depends(get_employee_service)):
    try:
        employees = service.get_all()
    except Exception as e:
        logger.error(f"❌ Error listando empleados: {e}")
        raise message_error(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR)
    return {"data": employees}


@router.get("/{employee_id}")
async def get_employee(employee_id: str, service: EmployeeService = Depends(get_employee_service)):
    id_ = parse_int(employee_id)
    if id_ is None:
        raise error_body(status.HTTP_400_BAD_REQUEST, "invalid id")
    try:
        employee = service.get(id_)
    except EmployeeNotFound:
        raise message_error(status.HTTP_404_NOT_FOUND, NOT_FOUND)
    except Exception as e:
        logger.error(f"❌ Error consultando empleado {id_}: {e}")
        raise message_error(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR)
    return {"data": employee}


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_employee(request: Request, service: EmployeeService = Depends(get_employee_service)):
    """
    Crear un empleado

    **Validaciones:**
    - card_number_id, first_name, last_name y warehouse_id presentes (422)
    - Tipos correctos y warehouse_id mayor que cero (400)
    - card_number_id único (409)
    """
    employee = EmployeeCreate(**await _read_employee_body(request, require_all=True))
    _check_negative(employee)

    try:
        employee_id = service.save(employee)
    except EmployeeAlreadyExists:
        raise message_error(status.HTTP_409_CONFLICT, "duplicate employee number")
    except Exception as e:
        logger.error(f"❌ Error creando empleado: {e}")
        raise message_error(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR)

    return {"data": EmployeeResponse(id=employee_id, **employee.model_dump())}


@router.patch("/{employee_id}")
async def update_employee(
    employee_id: str,
    request: Request,
    service: EmployeeService = Depends(get_employee_service)
):
    id_ = parse_int(employee_id)
    if id_ is None or id_ <= 0:
        raise message_error(status.HTTP_400_BAD_REQUEST, BAD_ID)
    try:
        current = service.get(id_)
    except Exception:
        raise message_error(status.HTTP_404_NOT_FOUND, NOT_FOUND)

    changes = await _read_employee_body(request, require_all=False)
    employee = EmployeeCreate(**{**current.model_dump(exclude={"id"}), **changes})
    _check_negative(employee)

    try:
        updated = service.update(id_, employee)
    except EmployeeAlreadyExists:
        # Mensaje heredado del endpoint de secciones
        raise message_error(status.HTTP_409_CONFLICT, "duplicate section number")
    except Exception as e:
        logger.error(f"❌ Error actualizando empleado {id_}: {e}")
        raise message_error(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR)
    return {"data": updated}


@router.delete("/{employee_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_employee(employee_id: str, service: EmployeeService = Depends(get_employee_service)):
    id_ = parse_int(employee_id)
    if id_ is None or id_ <= 0:
        raise message_error(status.HTTP_400_BAD_REQUEST, BAD_ID)
    try:
        service.delete(id_)
    except EmployeeNotFound:
        raise message_error(status.HTTP_404_NOT_FOUND, NOT_FOUND)
    except Exception as e:
        logger.error(f"❌ Error eliminando empleado {id_}: {e}")
        raise message_error(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
