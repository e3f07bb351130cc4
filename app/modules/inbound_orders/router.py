# app/modules/inbound_orders/router.py
import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request, status
from sqlalchemy.orm import Session

from app.config.database import get_db
from app.core.exceptions import error_body, message_error
from app.core.payload import (
    JSONSyntaxError, first_missing, first_type_mismatch, parse_int, read_json, strip_nulls
)
from .service import InboundOrderService, today
from .schemas import (
    INBOUND_ORDER_FIELDS, INBOUND_ORDER_FIELD_TYPES, InboundOrderCreate, InboundOrderResponse
)
from .exceptions import (
    EmployeeNotFound, EmployeeDoesNotExist, WarehouseDoesNotExist, InboundOrderAlreadyExists
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Inbound Orders"])

BAD_REQUEST = "bad request"


def get_inbound_order_service(db: Session = Depends(get_db)) -> InboundOrderService:
    return InboundOrderService(db)

# ===== REPORTES POR EMPLEADO =====

@router.get("/employees/reportInboundOrder")
async def report_all_inbound_orders(service: InboundOrderService = Depends(get_inbound_order_service)):
    """Todos los empleados con su cantidad de órdenes de entrada"""
    try:
        reports = service.report_all()
    except Exception as e:
        logger.error(f"❌ Error generando reporte de órdenes de entrada: {e}")
        raise message_error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal Server Error")
    return {"data": reports}


@router.get("/employees/reportInboundOrders")
async def report_inbound_orders(
    id: Optional[str] = Query(None, description="ID del empleado (obligatorio)"),
    service: InboundOrderService = Depends(get_inbound_order_service)
):
    if not id:
        raise error_body(status.HTTP_400_BAD_REQUEST, "Employee ID is required")
    employee_id = parse_int(id)
    if employee_id is None:
        raise error_body(status.HTTP_400_BAD_REQUEST, "Invalid employee ID")

    try:
        report = service.report(employee_id)
    except EmployeeNotFound:
        raise message_error(status.HTTP_404_NOT_FOUND, "employee not found")
    except Exception as e:
        logger.error(f"❌ Error generando reporte del empleado {employee_id}: {e}")
        raise message_error(status.HTTP_500_INTERNAL_SERVER_ERROR, "internal error")
    return {"data": report}

# ===== ÓRDENES DE ENTRADA =====

@router.post("/inboundOrders", status_code=status.HTTP_201_CREATED)
async def create_inbound_order(
    request: Request,
    service: InboundOrderService = Depends(get_inbound_order_service)
):
    """
    Crear una orden de entrada

    **Validaciones:**
    - order_number, employee_id, product_batch_id y warehouse_id presentes (422)
    - Tipos correctos y warehouse_id mayor que cero (400)
    - Empleado y bodega existentes, número de orden único (409)

    order_date se asigna con la fecha del día; el valor enviado se ignora.
    """
    try:
        body = await read_json(request)
    except JSONSyntaxError:
        raise message_error(status.HTTP_400_BAD_REQUEST, BAD_REQUEST)
    if body is None:
        body = {}
    if not isinstance(body, dict):
        raise message_error(status.HTTP_400_BAD_REQUEST, BAD_REQUEST)

    missing = first_missing(body, INBOUND_ORDER_FIELDS)
    if missing:
        raise message_error(status.HTTP_422_UNPROCESSABLE_ENTITY, f"field {missing} is empty")

    if first_type_mismatch(body, INBOUND_ORDER_FIELD_TYPES):
        raise message_error(status.HTTP_400_BAD_REQUEST, BAD_REQUEST)

    body = strip_nulls(body)
    body.pop("id", None)
    body["order_date"] = today()
    order = InboundOrderCreate(**body)

    error = order.negative_field_error()
    if error:
        raise message_error(status.HTTP_400_BAD_REQUEST, error)

    try:
        order_id = service.save(order)
    except (EmployeeDoesNotExist, WarehouseDoesNotExist, InboundOrderAlreadyExists) as e:
        raise message_error(status.HTTP_409_CONFLICT, str(e))
    except Exception as e:
        logger.error(f"❌ Error creando orden de entrada: {e}")
        raise message_error(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "internal error, impossible to creat a new inbound order"
        )

    return {"data": InboundOrderResponse(id=order_id, **order.model_dump())}
