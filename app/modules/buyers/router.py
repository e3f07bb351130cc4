# app/modules/buyers/router.py
import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from sqlalchemy.orm import Session

from app.config.database import get_db
from app.core.exceptions import error_body
from app.core.payload import JSONSyntaxError, first_type_mismatch, parse_int, read_json, strip_nulls
from .service import BuyerService
from .schemas import BUYER_FIELD_TYPES, BuyerCreate, BuyerUpdate, BuyerResponse
from .exceptions import BuyerNotFound, BuyerAlreadyExists

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/buyers", tags=["Buyers"])

INVALID_ID = "Invalid id"
BAD_REQUEST = "Bad request"
NOT_FOUND = "Buyer not found"
INTERNAL_ERROR = "Internal server error"


def get_buyer_service(db: Session = Depends(get_db)) -> BuyerService:
    return BuyerService(db)


async def _read_buyer_body(request: Request) -> Dict[str, Any]:
    try:
        body = await read_json(request)
    except JSONSyntaxError:
        raise error_body(status.HTTP_400_BAD_REQUEST, BAD_REQUEST)
    if body is None:
        body = {}
    if not isinstance(body, dict) or first_type_mismatch(body, BUYER_FIELD_TYPES):
        raise error_body(status.HTTP_400_BAD_REQUEST, BAD_REQUEST)
    return strip_nulls(body)


@router.get("")
async def get_all_buyers(service: BuyerService = Depends(get_buyer_service)):
    try:
        buyers = service.get_all()
    except Exception as e:
        logger.error(f"❌ Error listando compradores: {e}")
        # Respuesta en texto plano
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=INTERNAL_ERROR)
    return {"data": buyers}


@router.get("/{buyer_id}")
async def get_buyer(buyer_id: str, service: BuyerService = Depends(get_buyer_service)):
    id_ = parse_int(buyer_id)
    if id_ is None:
        raise error_body(status.HTTP_400_BAD_REQUEST, INVALID_ID)
    try:
        buyer = service.get(id_)
    except BuyerNotFound:
        raise error_body(status.HTTP_404_NOT_FOUND, NOT_FOUND)
    except Exception as e:
        logger.error(f"❌ Error consultando comprador {id_}: {e}")
        raise error_body(status.HTTP_500_INTERNAL_SERVER_ERROR, " Internal error")
    return {"data": buyer}


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_buyer(request: Request, service: BuyerService = Depends(get_buyer_service)):
    """
    Crear un comprador

    card_number_id, first_name y last_name son obligatorios;
    card_number_id no puede repetirse.
    """
    buyer = BuyerCreate(**await _read_buyer_body(request))
    if buyer.has_empty_fields():
        raise error_body(status.HTTP_422_UNPROCESSABLE_ENTITY, "Missing fields")

    try:
        buyer_id = service.save(buyer)
    except BuyerAlreadyExists:
        raise error_body(status.HTTP_409_CONFLICT, "Buyer already exists")
    except Exception as e:
        logger.error(f"❌ Error creando comprador: {e}")
        raise error_body(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR)

    return {"data": BuyerResponse(id=buyer_id, **buyer.model_dump())}


@router.patch("/{buyer_id}")
async def update_buyer(buyer_id: str, request: Request, service: BuyerService = Depends(get_buyer_service)):
    id_ = parse_int(buyer_id)
    if id_ is None:
        raise error_body(status.HTTP_400_BAD_REQUEST, INVALID_ID)
    try:
        current = service.get(id_)
    except BuyerNotFound:
        raise error_body(status.HTTP_404_NOT_FOUND, NOT_FOUND)
    except Exception as e:
        logger.error(f"❌ Error consultando comprador {id_}: {e}")
        raise error_body(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR)

    changes = BuyerUpdate(**await _read_buyer_body(request))

    try:
        updated = service.update(current, changes)
    except BuyerAlreadyExists:
        raise error_body(status.HTTP_409_CONFLICT, "Buyer already exists")
    except Exception as e:
        logger.error(f"❌ Error actualizando comprador {id_}: {e}")
        raise error_body(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR)
    return {"data": updated}


@router.delete("/{buyer_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_buyer(buyer_id: str, service: BuyerService = Depends(get_buyer_service)):
    id_ = parse_int(buyer_id)
    if id_ is None:
        raise error_body(status.HTTP_400_BAD_REQUEST, INVALID_ID)
    try:
        service.delete(id_)
    except BuyerNotFound:
        raise error_body(status.HTTP_404_NOT_FOUND, NOT_FOUND)
    except Exception as e:
        logger.error(f"❌ Error eliminando comprador {id_}: {e}")
        raise error_body(status.HTTP_500_INTERNAL_SERVER_ERROR, " Internal error")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
