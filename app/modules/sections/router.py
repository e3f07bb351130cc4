# app/modules/sections/router.py
import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Query, Request, Response, status
from sqlalchemy.orm import Session

from app.config.database import get_db
from app.core.exceptions import message_error
from app.core.payload import (
    JSONSyntaxError, first_missing, first_type_mismatch, parse_int, read_json, strip_nulls
)
from .service import SectionService
from .schemas import SECTION_FIELDS, SECTION_FIELD_TYPES, SectionCreate, SectionResponse
from .exceptions import SectionNotFound, DuplicateSectionNumber

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/sections", tags=["Sections"])

INTERNAL_ERROR = "internal error"


def get_section_service(db: Session = Depends(get_db)) -> SectionService:
    return SectionService(db)


async def _read_section_body(request: Request, require_all: bool) -> Dict[str, Any]:
    """
    Decodificar el cuerpo de una sección.

    Orden de validación: sintaxis JSON, campos faltantes (solo al crear),
    tipos de cada campo en el orden en que aparecen.
    """
    try:
        body = await read_json(request)
    except JSONSyntaxError:
        raise message_error(status.HTTP_400_BAD_REQUEST, "bad request: invalid JSON syntax")
    if body is None:
        body = {}
    if not isinstance(body, dict):
        raise message_error(status.HTTP_500_INTERNAL_SERVER_ERROR, "internal server error")

    if require_all:
        missing = first_missing(body, SECTION_FIELDS)
        if missing:
            raise message_error(status.HTTP_422_UNPROCESSABLE_ENTITY, f"field {missing} is missing")

    mismatch = first_type_mismatch(body, SECTION_FIELD_TYPES)
    if mismatch:
        field, provided, expected = mismatch
        raise message_error(
            status.HTTP_400_BAD_REQUEST,
            f"bad request: type {provided} was provided at {field} field, {expected} was expected."
        )
    return strip_nulls(body)


def _check_negative(section: SectionCreate):
    error = section.negative_field_error()
    if error:
        raise message_error(status.HTTP_400_BAD_REQUEST, error)

# ===== REPORTES =====

@router.get("/reportProducts")
async def report_products(
    id: Optional[str] = Query(None, description="ID de sección; vacío para todas"),
    service: SectionService = Depends(get_section_service)
):
    """Cantidad de productos (suma de lotes) por sección"""
    section_id = 0
    if id:
        section_id = parse_int(id)
        if section_id is None:
            raise message_error(status.HTTP_400_BAD_REQUEST, "bad id")

    try:
        report = service.product_count(section_id)
    except SectionNotFound:
        raise message_error(status.HTTP_404_NOT_FOUND, "section not found")
    except Exception as e:
        logger.error(f"❌ Error generando reporte de secciones: {e}")
        raise message_error(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR)
    return {"data": report}

# ===== CRUD =====

@router.get("/")
async def get_all_sections(service: SectionService = Depends(get_section_service)):
    try:
        sections = service.get_all()
    except Exception as e:
        logger.error(f"❌ Error listando secciones: {e}")
        raise message_error(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR)
    return {"data": sections}


@router.get("/{section_id}")
async def get_section(section_id: str, service: SectionService = Depends(get_section_service)):
    id_ = parse_int(section_id)
    if id_ is None:
        raise message_error(status.HTTP_400_BAD_REQUEST, "bad ID")
    try:
        section = service.get(id_)
    except SectionNotFound:
        raise message_error(status.HTTP_404_NOT_FOUND, "section not found")
    except Exception as e:
        logger.error(f"❌ Error consultando sección {id_}: {e}")
        raise message_error(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR)
    return {"data": section}


@router.post("/", status_code=status.HTTP_201_CREATED)
async def create_section(request: Request, service: SectionService = Depends(get_section_service)):
    """
    Crear una sección

    **Validaciones:**
    - Todos los campos son obligatorios y enteros
    - product_type_id y warehouse_id mayores que cero
    - section_number único
    """
    body = await _read_section_body(request, require_all=True)
    body.pop("id", None)
    section = SectionCreate(**body)
    _check_negative(section)

    try:
        section_id = service.save(section)
    except DuplicateSectionNumber:
        raise message_error(status.HTTP_409_CONFLICT, "duplicate section number")
    except Exception as e:
        logger.error(f"❌ Error creando sección: {e}")
        raise message_error(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR)

    return {"data": SectionResponse(id=section_id, **section.model_dump())}


@router.patch("/{section_id}")
async def update_section(
    section_id: str,
    request: Request,
    service: SectionService = Depends(get_section_service)
):
    """Actualización parcial de una sección existente"""
    id_ = parse_int(section_id)
    if id_ is None or id_ <= 0:
        raise message_error(status.HTTP_400_BAD_REQUEST, "bad id")
    try:
        current = service.get(id_)
    except Exception:
        raise message_error(status.HTTP_404_NOT_FOUND, "section not found")

    body = await _read_section_body(request, require_all=False)
    body.pop("id", None)
    section = SectionCreate(**{**current.model_dump(exclude={"id"}), **body})
    _check_negative(section)

    try:
        updated = service.update(id_, section)
    except DuplicateSectionNumber:
        raise message_error(status.HTTP_409_CONFLICT, "duplicate section number")
    except Exception as e:
        logger.error(f"❌ Error actualizando sección {id_}: {e}")
        raise message_error(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR)
    return {"data": updated}


@router.delete("/{section_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_section(section_id: str, service: SectionService = Depends(get_section_service)):
    id_ = parse_int(section_id)
    if id_ is None or id_ <= 0:
        raise message_error(status.HTTP_400_BAD_REQUEST, "bad id")
    try:
        service.delete(id_)
    except SectionNotFound:
        raise message_error(status.HTTP_404_NOT_FOUND, "section not found")
    except Exception as e:
        logger.error(f"❌ Error eliminando sección {id_}: {e}")
        raise message_error(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
