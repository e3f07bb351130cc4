# app/modules/localities/router.py
import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request, status
from sqlalchemy.orm import Session

from app.config.database import get_db
from app.core.exceptions import web_error
from app.core.payload import JSONSyntaxError, is_positive_integer, parse_int, read_json
from .service import LocalityService
from .schemas import LOCALITY_STRING_FIELDS, LocalityCreate, LocalityResponse
from .exceptions import LocalityNotFound, LocalityAlreadyExists, NoRows

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/localities", tags=["Localities"])

INVALID_ID = "invalid id"
ID_GREATER = "id must be 1 or greater"
INTERNAL_ERROR = "internal server error"


def get_locality_service(db: Session = Depends(get_db)) -> LocalityService:
    return LocalityService(db)

# ===== REPORTES =====

@router.get("/reportSellers")
async def report_sellers(
    id: Optional[str] = Query(None, description="ID de localidad; vacío para todas"),
    service: LocalityService = Depends(get_locality_service)
):
    """
    Reporte de vendedores por localidad

    **Respuesta:** lista de {locality_id, locality_name, postal_code, sellers_count}
    """
    locality_id = 0
    if id:
        locality_id = parse_int(id)
        if locality_id is None:
            raise web_error(status.HTTP_400_BAD_REQUEST, INVALID_ID)
        if locality_id < 1:
            raise web_error(
                status.HTTP_400_BAD_REQUEST,
                "Error getting the report for the requested ID. Id must be greater than 0"
            )
        try:
            service.get(locality_id)
        except LocalityNotFound:
            raise web_error(status.HTTP_404_NOT_FOUND, "locality not found")
        except Exception as e:
            logger.error(f"❌ Error consultando localidad {locality_id}: {e}")
            raise web_error(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR)

    try:
        report = service.report_sellers(locality_id)
    except NoRows:
        raise web_error(status.HTTP_404_NOT_FOUND, "Sellers Not found for the requested ID")
    except Exception as e:
        logger.error(f"❌ Error generando reporte de vendedores: {e}")
        raise web_error(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR)
    return {"data": report}

# ===== CRUD =====

@router.get("/")
async def get_all_localities(service: LocalityService = Depends(get_locality_service)):
    try:
        localities = service.get_all()
    except NoRows:
        raise web_error(status.HTTP_404_NOT_FOUND, "Localities not found")
    except Exception as e:
        logger.error(f"❌ Error listando localidades: {e}")
        raise web_error(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR)
    return {"data": localities}


@router.get("/{locality_id}")
async def get_locality(locality_id: str, service: LocalityService = Depends(get_locality_service)):
    id_ = parse_int(locality_id)
    if id_ is None:
        raise web_error(status.HTTP_400_BAD_REQUEST, INVALID_ID)
    if id_ < 1:
        raise web_error(status.HTTP_400_BAD_REQUEST, ID_GREATER)
    try:
        locality = service.get(id_)
    except LocalityNotFound:
        raise web_error(status.HTTP_404_NOT_FOUND, "locality not found")
    except Exception as e:
        logger.error(f"❌ Error consultando localidad {id_}: {e}")
        raise web_error(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR)
    return {"data": locality}


@router.post("/", status_code=status.HTTP_201_CREATED)
async def create_locality(request: Request, service: LocalityService = Depends(get_locality_service)):
    """
    Crear una localidad

    **Validaciones (422):**
    - postal_code entero mayor que cero
    - locality_name, province_name y country_name textos no vacíos

    **Conflicto (409):** postal_code ya registrado
    """
    try:
        body = await read_json(request)
    except JSONSyntaxError:
        raise web_error(status.HTTP_422_UNPROCESSABLE_ENTITY, "invalid json")
    if body is None:
        body = {}
    if not isinstance(body, dict):
        raise web_error(status.HTTP_422_UNPROCESSABLE_ENTITY, "invalid json")

    if not is_positive_integer(body.get("postal_code")):
        raise web_error(status.HTTP_422_UNPROCESSABLE_ENTITY, "Invalid or missing 'postal_code'")

    for field in LOCALITY_STRING_FIELDS:
        value = body.get(field)
        if not isinstance(value, str) or value == "":
            raise web_error(status.HTTP_422_UNPROCESSABLE_ENTITY, f"Invalid or missing '{field}'")

    locality = LocalityCreate(
        postal_code=int(body["postal_code"]),
        **{field: body[field] for field in LOCALITY_STRING_FIELDS}
    )

    try:
        locality_id = service.save(locality)
    except LocalityAlreadyExists:
        raise web_error(status.HTTP_409_CONFLICT, "locality already exists")
    except Exception as e:
        logger.error(f"❌ Error creando localidad: {e}")
        raise web_error(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR)

    return {"data": LocalityResponse(id=locality_id, **locality.model_dump())}
