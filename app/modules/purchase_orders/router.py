# app/modules/purchase_orders/router.py
import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request, Response, status
from sqlalchemy.orm import Session

from app.config.database import get_db
from app.core.exceptions import error_body
from app.core.payload import JSONSyntaxError, first_type_mismatch, is_date, parse_int, read_json, strip_nulls
from .service import PurchaseOrderService
from .schemas import PURCHASE_ORDER_FIELD_TYPES, PurchaseOrderCreate, PurchaseOrderResponse
from .exceptions import PurchaseOrderAlreadyExists, BuyerNotExists, ProductRecordNotExists

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Purchase Orders"])

BAD_REQUEST = "Bad request"
INTERNAL_ERROR = "Internal server error"


def get_purchase_order_service(db: Session = Depends(get_db)) -> PurchaseOrderService:
    return PurchaseOrderService(db)

# ===== REPORTES =====

@router.get("/buyers/reportPurchaseOrders")
async def report_purchase_orders(
    id: Optional[str] = Query(None, description="ID del comprador; vacío para todos"),
    service: PurchaseOrderService = Depends(get_purchase_order_service)
):
    """
    Cantidad de órdenes de compra por comprador

    Devuelve 204 sin cuerpo cuando el reporte no tiene filas.
    """
    buyer_id = parse_int(id or "0")
    if buyer_id is None or buyer_id < 0:
        raise error_body(status.HTTP_400_BAD_REQUEST, "Invalid id")

    try:
        reports = service.report_by_buyer(buyer_id)
    except BuyerNotExists:
        raise error_body(status.HTTP_404_NOT_FOUND, "Buyer id not found")
    except Exception as e:
        logger.error(f"❌ Error generando reporte de órdenes de compra: {e}")
        raise error_body(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR)

    if not reports:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return {"data": reports}

# ===== ÓRDENES DE COMPRA =====

@router.post("/purchaseOrders", status_code=status.HTTP_201_CREATED)
async def create_purchase_order(
    request: Request,
    service: PurchaseOrderService = Depends(get_purchase_order_service)
):
    """
    Crear una orden de compra

    **Validaciones:**
    - JSON válido con tipos correctos (400)
    - Textos no vacíos e IDs mayores que cero (422 "Missing fields")
    - order_date con formato YYYY-MM-DD (422)

    **Conflictos (409):** orden repetida, comprador o registro de producto inexistente
    """
    try:
        body = await read_json(request)
    except JSONSyntaxError:
        raise error_body(status.HTTP_400_BAD_REQUEST, BAD_REQUEST)
    if body is None:
        body = {}
    if not isinstance(body, dict) or first_type_mismatch(body, PURCHASE_ORDER_FIELD_TYPES):
        raise error_body(status.HTTP_400_BAD_REQUEST, BAD_REQUEST)

    body = strip_nulls(body)
    user_id = body.pop("user_id", 0)
    order = PurchaseOrderCreate(**{k: v for k, v in body.items() if k in PURCHASE_ORDER_FIELD_TYPES})

    if order.has_missing_fields():
        raise error_body(status.HTTP_422_UNPROCESSABLE_ENTITY, "Missing fields")
    if not is_date(order.order_date):
        raise error_body(status.HTTP_422_UNPROCESSABLE_ENTITY, "Invalid date format")

    try:
        order_id = service.save(order, user_id)
    except (PurchaseOrderAlreadyExists, BuyerNotExists, ProductRecordNotExists) as e:
        raise error_body(status.HTTP_409_CONFLICT, str(e))
    except Exception as e:
        logger.error(f"❌ Error creando orden de compra: {e}")
        raise error_body(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR)

    return {"data": PurchaseOrderResponse(id=order_id, **order.model_dump())}
