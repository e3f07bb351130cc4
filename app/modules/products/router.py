# app/modules/products/router.py
import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, Request, Response, status
from sqlalchemy.orm import Session

from app.config.database import get_db
from app.core.exceptions import message_error
from app.core.payload import (
    JSONSyntaxError, first_type_mismatch, parse_int, read_json, strip_nulls
)
from .service import ProductService
from .schemas import PRODUCT_FIELD_TYPES, ProductCreate, ProductResponse
from .exceptions import ProductNotFound, ProductCodeExists

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Products"])

INVALID_ID = "invalid id"
INVALID_JSON = "invalid json"
INTERNAL_ERROR = "internal server error"


def get_product_service(db: Session = Depends(get_db)) -> ProductService:
    return ProductService(db)


async def _read_product_body(request: Request) -> Dict[str, Any]:
    """Cuerpo JSON con tipos válidos para un producto; 422 en otro caso"""
    try:
        body = await read_json(request)
    except JSONSyntaxError:
        raise message_error(status.HTTP_422_UNPROCESSABLE_ENTITY, INVALID_JSON)
    if not isinstance(body, dict) or first_type_mismatch(body, PRODUCT_FIELD_TYPES):
        raise message_error(status.HTTP_422_UNPROCESSABLE_ENTITY, INVALID_JSON)
    return strip_nulls(body)


@router.get("/ping")
async def ping():
    """Verificar que la API responde"""
    return {"message": "pong"}

# ===== CRUD =====

@router.get("/products/")
async def get_all_products(service: ProductService = Depends(get_product_service)):
    try:
        products = service.get_all()
    except Exception as e:
        logger.error(f"❌ Error listando productos: {e}")
        raise message_error(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR)
    return {"data": products}


@router.get("/products/{product_id}")
async def get_product(product_id: str, service: ProductService = Depends(get_product_service)):
    id_ = parse_int(product_id)
    if id_ is None:
        raise message_error(status.HTTP_400_BAD_REQUEST, INVALID_ID)
    try:
        product = service.get(id_)
    except ProductNotFound:
        raise message_error(status.HTTP_404_NOT_FOUND, "product not found")
    except Exception as e:
        logger.error(f"❌ Error consultando producto {id_}: {e}")
        raise message_error(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR)
    return {"data": product}


@router.post("/products/", status_code=status.HTTP_201_CREATED)
async def create_product(request: Request, service: ProductService = Depends(get_product_service)):
    """
    Crear un producto

    **Validaciones:**
    - description y product_code (máx. 100 caracteres) no vacíos
    - expiration_rate, freezing_rate y recommended_freezing_temperature en (0, 100]
    - height, length, netweight, width y product_type_id distintos de cero
    """
    body = await _read_product_body(request)
    product = ProductCreate(**body)
    if not product.is_complete():
        raise message_error(status.HTTP_422_UNPROCESSABLE_ENTITY, INVALID_JSON)

    try:
        product_id = service.save(product)
    except ProductCodeExists as e:
        raise message_error(status.HTTP_409_CONFLICT, str(e))
    except Exception as e:
        logger.error(f"❌ Error creando producto: {e}")
        raise message_error(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR)

    return {"data": ProductResponse(id=product_id, **product.model_dump())}


@router.patch("/products/{product_id}")
async def update_product(
    product_id: str,
    request: Request,
    service: ProductService = Depends(get_product_service)
):
    """Actualización parcial: los campos omitidos conservan su valor"""
    id_ = parse_int(product_id)
    if id_ is None or id_ <= 0:
        raise message_error(status.HTTP_400_BAD_REQUEST, INVALID_ID)
    try:
        current = service.get(id_)
    except ProductNotFound:
        raise message_error(status.HTTP_404_NOT_FOUND, "product not found")
    except Exception as e:
        logger.error(f"❌ Error consultando producto {id_}: {e}")
        raise message_error(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR)

    body = await _read_product_body(request)
    body.pop("id", None)
    merged = ProductCreate(**{**current.model_dump(exclude={"id"}), **body})

    try:
        updated = service.update(id_, merged)
    except ProductCodeExists as e:
        raise message_error(status.HTTP_409_CONFLICT, str(e))
    except Exception as e:
        logger.error(f"❌ Error actualizando producto {id_}: {e}")
        raise message_error(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR)
    return {"data": updated}


@router.delete("/products/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_product(product_id: str, service: ProductService = Depends(get_product_service)):
    id_ = parse_int(product_id)
    if id_ is None:
        raise message_error(status.HTTP_400_BAD_REQUEST, INVALID_ID)
    try:
        service.delete(id_)
    except ProductNotFound:
        raise message_error(status.HTTP_404_NOT_FOUND, "product not found")
    except Exception as e:
        logger.error(f"❌ Error eliminando producto {id_}: {e}")
        raise message_error(status.HTTP_500_INTERNAL_SERVER_ERROR, str(e))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
