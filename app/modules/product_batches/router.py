# app/modules/product_batches/router.py
import logging

from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.orm import Session

from app.config.database import get_db
from app.core.exceptions import message_error
from app.core.payload import (
    JSONSyntaxError, first_missing, first_type_mismatch, read_json, strip_nulls
)
from .service import ProductBatchService
from .schemas import BATCH_FIELDS, BATCH_FIELD_TYPES, ProductBatchCreate, ProductBatchResponse
from .exceptions import DuplicateBatchNumber, ProductNotFound, SectionNotFound

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/productBatches", tags=["Product Batches"])

INTERNAL_ERROR = "internal server error"


def get_product_batch_service(db: Session = Depends(get_db)) -> ProductBatchService:
    return ProductBatchService(db)


@router.get("/")
async def get_all_batches(service: ProductBatchService = Depends(get_product_batch_service)):
    try:
        batches = service.get_all()
    except Exception as e:
        logger.error(f"❌ Error listando lotes: {e}")
        raise message_error(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR)
    return {"data": batches}


@router.post("/", status_code=status.HTTP_201_CREATED)
async def create_batch(request: Request, service: ProductBatchService = Depends(get_product_batch_service)):
    """
    Crear un lote de producto

    **Validaciones (400 "bad request: ..."):**
    - JSON bien formado y todos los campos presentes
    - Tipos correctos por campo
    - Cantidades e IDs >= 0, manufacturing_hour en [0 - 23]
    - due_date y manufacturing_date con formato YYYY-MM-DD

    **Conflictos (409):** batch_number repetido, producto o sección inexistente
    """
    try:
        body = await read_json(request)
    except JSONSyntaxError as e:
        raise message_error(
            status.HTTP_400_BAD_REQUEST,
            f"bad request: invalid syntax at position {e.offset}"
        )
    if body is None:
        body = {}
    if not isinstance(body, dict):
        raise message_error(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR)

    missing = first_missing(body, BATCH_FIELDS)
    if missing:
        raise message_error(status.HTTP_400_BAD_REQUEST, f"bad request: field {missing} is missing")

    mismatch = first_type_mismatch(body, BATCH_FIELD_TYPES)
    if mismatch:
        field, provided, expected = mismatch
        raise message_error(
            status.HTTP_400_BAD_REQUEST,
            f"bad request: type {provided} was provided at {field} field, {expected} was expected."
        )

    batch = ProductBatchCreate(**strip_nulls(body))
    error = batch.validation_error()
    if error:
        raise message_error(status.HTTP_400_BAD_REQUEST, f"bad request: {error}")

    try:
        batch_id = service.save(batch)
    except (DuplicateBatchNumber, ProductNotFound, SectionNotFound) as e:
        raise message_error(status.HTTP_409_CONFLICT, str(e))
    except Exception as e:
        logger.error(f"❌ Error creando lote: {e}")
        raise message_error(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR)

    return {"data": ProductBatchResponse(id=batch_id, **batch.model_dump())}
