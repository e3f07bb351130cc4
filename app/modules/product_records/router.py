# app/modules/product_records/router.py
import logging

from fastapi import APIRouter, Depends, Query, Request, status
from sqlalchemy.orm import Session
from typing import Optional

from app.config.database import get_db
from app.core.exceptions import message_error
from app.core.payload import (
    JSONSyntaxError, first_type_mismatch, is_date, parse_int, read_json, strip_nulls
)
from .service import ProductRecordService
from .schemas import RECORD_FIELD_TYPES, ProductRecordCreate, ProductRecordResponse
from .exceptions import ProductNotFound

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Product Records"])

INVALID_JSON = "invalid json"
INTERNAL_ERROR = "internal server error"


def get_product_record_service(db: Session = Depends(get_db)) -> ProductRecordService:
    return ProductRecordService(db)


@router.post("/productRecords", status_code=status.HTTP_201_CREATED)
async def create_product_record(
    request: Request,
    service: ProductRecordService = Depends(get_product_record_service)
):
    """
    Registrar precios de un producto

    Todos los campos son obligatorios y mayores que cero;
    last_update_date con formato YYYY-MM-DD.
    """
    try:
        body = await read_json(request)
    except JSONSyntaxError:
        raise message_error(status.HTTP_422_UNPROCESSABLE_ENTITY, INVALID_JSON)
    if not isinstance(body, dict) or first_type_mismatch(body, RECORD_FIELD_TYPES):
        raise message_error(status.HTTP_422_UNPROCESSABLE_ENTITY, INVALID_JSON)

    record = ProductRecordCreate(**strip_nulls(body))
    if (not record.last_update_date or record.purchase_price <= 0
            or record.sale_price <= 0 or record.product_id <= 0):
        raise message_error(status.HTTP_422_UNPROCESSABLE_ENTITY, INVALID_JSON)
    if not is_date(record.last_update_date):
        raise message_error(status.HTTP_422_UNPROCESSABLE_ENTITY, "invalid date format")

    try:
        record_id = service.save(record)
    except ProductNotFound as e:
        raise message_error(status.HTTP_409_CONFLICT, str(e))
    except Exception as e:
        logger.error(f"❌ Error creando registro de producto: {e}")
        raise message_error(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR)

    return {"data": ProductRecordResponse(id=record_id, **record.model_dump())}


@router.get("/products/reportRecords")
async def report_product_records(
    id: Optional[str] = Query(None, description="ID de producto; vacío para todos"),
    service: ProductRecordService = Depends(get_product_record_service)
):
    """Cantidad de registros de precio por producto"""
    product_id = 0
    if id:
        product_id = parse_int(id)
        if product_id is None:
            raise message_error(status.HTTP_400_BAD_REQUEST, "invalid id")

    try:
        report = service.report(product_id)
    except ProductNotFound as e:
        raise message_error(status.HTTP_404_NOT_FOUND, str(e))
    except Exception as e:
        logger.error(f"❌ Error generando reporte de registros: {e}")
        raise message_error(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR)
    return {"data": report}
