# app/modules/warehouses/router.py
import logging

from fastapi import APIRouter, Depends, Request, Response, status
from sqlalchemy.orm import Session

from app.config.database import get_db
from app.core.exceptions import message_error
from app.core.payload import (
    JSONSyntaxError, first_missing, first_type_mismatch, parse_int, read_json, strip_nulls
)
from .service import WarehouseService
from .schemas import (
    WAREHOUSE_FIELDS, WAREHOUSE_FIELD_TYPES, WarehouseCreate, WarehouseResponse
)
from .exceptions import WarehouseNotFound, IncorrectWarehouseData, WarehouseAlreadyExists

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/warehouses", tags=["Warehouses"])

INTERNAL_ERROR = "Internal server error"
NOT_FOUND = "Warehouse not found"


def get_warehouse_service(db: Session = Depends(get_db)) -> WarehouseService:
    return WarehouseService(db)


def _internal_error():
    return message_error(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR)


@router.get("/")
async def get_all_warehouses(service: WarehouseService = Depends(get_warehouse_service)):
    try:
        warehouses = service.get_all()
    except Exception as e:
        logger.error(f"❌ Error listando bodegas: {e}")
        raise _internal_error()
    return {"data": warehouses}


@router.get("/{warehouse_id}")
async def get_warehouse(warehouse_id: str, service: WarehouseService = Depends(get_warehouse_service)):
    id_ = parse_int(warehouse_id)
    if id_ is None:
        raise _internal_error()
    try:
        warehouse = service.get(id_)
    except WarehouseNotFound:
        raise message_error(status.HTTP_404_NOT_FOUND, "Not found")
    except Exception as e:
        logger.error(f"❌ Error consultando bodega {id_}: {e}")
        raise _internal_error()
    return {"data": warehouse}


@router.post("/", status_code=status.HTTP_201_CREATED)
async def create_warehouse(request: Request, service: WarehouseService = Depends(get_warehouse_service)):
    """
    Crear una bodega

    **Campos obligatorios:** address, telephone, warehouse_code,
    minimum_capacity, minimum_temperature

    **Validaciones (422):** textos vacíos o minimum_capacity negativa
    **Conflicto (409):** warehouse_code ya registrado
    """
    try:
        body = await read_json(request)
    except JSONSyntaxError:
        raise _internal_error()
    if body is None:
        body = {}
    if not isinstance(body, dict):
        raise _internal_error()

    if first_missing(body, WAREHOUSE_FIELDS):
        raise message_error(status.HTTP_422_UNPROCESSABLE_ENTITY, "Invalid request body")

    warehouse = WarehouseCreate.from_loose_body(body)

    try:
        warehouse_id = service.save(warehouse)
    except WarehouseAlreadyExists:
        raise message_error(status.HTTP_409_CONFLICT, "Warehouse already exists")
    except IncorrectWarehouseData:
        raise message_error(status.HTTP_422_UNPROCESSABLE_ENTITY, "Incorrect data")
    except Exception as e:
        logger.error(f"❌ Error creando bodega: {e}")
        raise _internal_error()

    return {"data": WarehouseResponse(id=warehouse_id, **warehouse.model_dump())}


@router.patch("/{warehouse_id}")
async def update_warehouse(
    warehouse_id: str,
    request: Request,
    service: WarehouseService = Depends(get_warehouse_service)
):
    """Actualización parcial; cualquier error de lectura o validación es 500"""
    id_ = parse_int(warehouse_id)
    if id_ is None:
        raise _internal_error()
    try:
        current = service.get(id_)
    except Exception:
        raise message_error(status.HTTP_404_NOT_FOUND, NOT_FOUND)

    try:
        body = await read_json(request)
    except JSONSyntaxError:
        raise _internal_error()
    if body is None:
        body = {}
    if not isinstance(body, dict) or first_type_mismatch(body, WAREHOUSE_FIELD_TYPES):
        raise _internal_error()

    body = strip_nulls(body)
    body.pop("id", None)
    warehouse = WarehouseCreate(**{**current.model_dump(exclude={"id"}), **body})

    try:
        updated = service.update(id_, warehouse)
    except Exception as e:
        logger.error(f"❌ Error actualizando bodega {id_}: {e}")
        raise _internal_error()
    return {"data": updated}


@router.delete("/{warehouse_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_warehouse(warehouse_id: str, service: WarehouseService = Depends(get_warehouse_service)):
    id_ = parse_int(warehouse_id)
    if id_ is None:
        raise _internal_error()
    try:
        service.delete(id_)
    except WarehouseNotFound:
        raise message_error(status.HTTP_404_NOT_FOUND, NOT_FOUND)
    except Exception as e:
        logger.error(f"❌ Error eliminando bodega {id_}: {e}")
        raise _internal_error()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
