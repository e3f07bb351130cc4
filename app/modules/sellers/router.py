# app/modules/sellers/router.py
import logging

from fastapi import APIRouter, Depends, Request, Response, status
from sqlalchemy.orm import Session

from app.config.database import get_db
from app.core.exceptions import web_error
from app.core.payload import (
    JSONSyntaxError, first_type_mismatch, is_positive_integer, parse_int, read_json, strip_nulls
)
from .service import SellerService
from .schemas import SELLER_FIELD_TYPES, SELLER_STRING_FIELDS, SellerCreate, SellerResponse
from .exceptions import SellerNotFound, SellerAlreadyExists

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/seller", tags=["Sellers"])

INVALID_ID = "invalid id"
INVALID_JSON = "invalid json"
ID_GREATER = "id must be 1 or greater"
NOT_FOUND = "seller not found"
LOCALITY_NOT_EXISTS = "id locality not exists"
INTERNAL_ERROR = "internal server error"


def get_seller_service(db: Session = Depends(get_db)) -> SellerService:
    return SellerService(db)


@router.get("")
async def get_all_sellers(service: SellerService = Depends(get_seller_service)):
    try:
        sellers = service.get_all()
    except SellerNotFound:
        raise web_error(status.HTTP_404_NOT_FOUND, "Sellers not found")
    except Exception as e:
        logger.error(f"❌ Error listando vendedores: {e}")
        raise web_error(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR)
    return {"data": sellers}


@router.get("/{seller_id}")
async def get_seller(seller_id: str, service: SellerService = Depends(get_seller_service)):
    id_ = parse_int(seller_id)
    if id_ is None:
        raise web_error(status.HTTP_400_BAD_REQUEST, INVALID_ID)
    try:
        seller = service.get(id_)
    except SellerNotFound:
        raise web_error(status.HTTP_404_NOT_FOUND, NOT_FOUND)
    except Exception as e:
        logger.error(f"❌ Error consultando vendedor {id_}: {e}")
        raise web_error(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR)
    return {"data": seller}


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_seller(request: Request, service: SellerService = Depends(get_seller_service)):
    """
    Crear un vendedor

    **Validaciones (422):**
    - cid entero mayor que cero
    - locality_id entero mayor que cero y registrado
    - company_name, address y telephone textos no vacíos

    **Conflicto (409):** cid ya registrado
    """
    try:
        body = await read_json(request)
    except JSONSyntaxError:
        raise web_error(status.HTTP_400_BAD_REQUEST, INVALID_JSON)
    if body is None:
        body = {}
    if not isinstance(body, dict):
        raise web_error(status.HTTP_400_BAD_REQUEST, INVALID_JSON)

    if not is_positive_integer(body.get("cid")):
        raise web_error(
            status.HTTP_422_UNPROCESSABLE_ENTITY,
            "invalid or missing cid. CID must be 1 or greater"
        )
    if not is_positive_integer(body.get("locality_id")):
        raise web_error(
            status.HTTP_422_UNPROCESSABLE_ENTITY,
            "invalid or missing locality. Locality_id must be 1 or greater"
        )
    if not service.locality_exists(int(body["locality_id"])):
        raise web_error(status.HTTP_422_UNPROCESSABLE_ENTITY, LOCALITY_NOT_EXISTS)

    for field in SELLER_STRING_FIELDS:
        value = body.get(field)
        if not isinstance(value, str) or value == "":
            raise web_error(status.HTTP_422_UNPROCESSABLE_ENTITY, f"Invalid or missing '{field}'")

    seller = SellerCreate(
        cid=int(body["cid"]),
        locality_id=int(body["locality_id"]),
        **{field: body[field] for field in SELLER_STRING_FIELDS}
    )

    try:
        seller_id = service.save(seller)
    except SellerAlreadyExists:
        raise web_error(status.HTTP_409_CONFLICT, "seller already exists")
    except Exception as e:
        logger.error(f"❌ Error creando vendedor: {e}")
        raise web_error(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR)

    return {"data": SellerResponse(id=seller_id, **seller.model_dump())}


@router.patch("/{seller_id}")
async def update_seller(seller_id: str, request: Request, service: SellerService = Depends(get_seller_service)):
    """Actualización parcial; locality_id enviado debe existir"""
    id_ = parse_int(seller_id)
    if id_ is None or id_ < 1:
        raise web_error(status.HTTP_400_BAD_REQUEST, ID_GREATER)
    try:
        current = service.get(id_)
    except SellerNotFound:
        raise web_error(status.HTTP_404_NOT_FOUND, NOT_FOUND)
    except Exception as e:
        logger.error(f"❌ Error consultando vendedor {id_}: {e}")
        raise web_error(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR)

    try:
        body = await read_json(request)
    except JSONSyntaxError:
        raise web_error(status.HTTP_400_BAD_REQUEST, INVALID_JSON)
    if body is None:
        body = {}
    if not isinstance(body, dict) or first_type_mismatch(body, SELLER_FIELD_TYPES):
        raise web_error(status.HTTP_400_BAD_REQUEST, INVALID_JSON)

    body = strip_nulls(body)
    body.pop("id", None)
    seller = SellerCreate(**{**current.model_dump(exclude={"id"}), **body})

    if seller.locality_id > 0 and not service.locality_exists(seller.locality_id):
        raise web_error(status.HTTP_422_UNPROCESSABLE_ENTITY, LOCALITY_NOT_EXISTS)

    try:
        updated = service.update(id_, seller)
    except Exception as e:
        logger.error(f"❌ Error actualizando vendedor {id_}: {e}")
        raise web_error(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR)
    return {"data": updated}


@router.delete("/{seller_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_seller(seller_id: str, service: SellerService = Depends(get_seller_service)):
    id_ = parse_int(seller_id)
    if id_ is None:
        raise web_error(status.HTTP_400_BAD_REQUEST, INVALID_ID)
    if id_ < 1:
        raise web_error(status.HTTP_400_BAD_REQUEST, ID_GREATER)
    try:
        service.delete(id_)
    except SellerNotFound:
        raise web_error(status.HTTP_404_NOT_FOUND, NOT_FOUND)
    except Exception as e:
        logger.error(f"❌ Error eliminando vendedor {id_}: {e}")
        raise web_error(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
