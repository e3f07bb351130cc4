# app/modules/carries/router.py
import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request, status
from sqlalchemy.orm import Session

from app.config.database import get_db
from app.core.exceptions import message_error
from app.core.payload import JSONSyntaxError, first_missing, parse_int, read_json
from .service import CarryService
from .schemas import CARRY_FIELDS, CARRY_STRING_FIELDS, CarryCreate, CarryResponse
from .exceptions import IncorrectCarryData, CarryAlreadyExists, LocalityCarriesNotFound

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Carries"])

INTERNAL_ERROR = "Internal server error"
LOCALITY_NOT_FOUND = "Locality not found"


def get_carry_service(db: Session = Depends(get_db)) -> CarryService:
    return CarryService(db)

# ===== REPORTES =====

@router.get("/localities/reportCarries")
async def report_carries(
    id: Optional[str] = Query(None, description="Código postal; vacío para todas las localidades"),
    service: CarryService = Depends(get_carry_service)
):
    """
    Transportistas por localidad

    Sin id devuelve una lista con las localidades que tienen transportistas;
    con id devuelve un único objeto para ese código postal.
    """
    if not id:
        try:
            report = service.report_by_locality()
        except Exception as e:
            logger.error(f"❌ Error generando reporte de transportistas: {e}")
            raise message_error(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR)
        return {"data": report}

    postal_code = parse_int(id)
    if postal_code is None:
        raise message_error(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR)

    try:
        report = service.report_by_postal_code(postal_code)
    except LocalityCarriesNotFound:
        raise message_error(status.HTTP_404_NOT_FOUND, LOCALITY_NOT_FOUND)
    except Exception as e:
        logger.error(f"❌ Error generando reporte de transportistas para {postal_code}: {e}")
        raise message_error(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR)
    return {"data": report}

# ===== CRUD =====

@router.get("/carries")
async def get_all_carries(service: CarryService = Depends(get_carry_service)):
    try:
        carries = service.get_all()
    except Exception as e:
        logger.error(f"❌ Error listando transportistas: {e}")
        raise message_error(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR)
    return {"data": carries}


@router.post("/carries", status_code=status.HTTP_201_CREATED)
async def create_carry(request: Request, service: CarryService = Depends(get_carry_service)):
    """
    Registrar un transportista

    **Campos obligatorios:** cid, company_name, address, telephone, locality_id
    (locality_id se envía como texto con el código postal, ej. "1000")
    """
    try:
        body = await read_json(request)
    except JSONSyntaxError:
        raise message_error(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR)
    if body is None:
        body = {}
    if not isinstance(body, dict):
        raise message_error(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR)

    if first_missing(body, CARRY_FIELDS):
        raise message_error(status.HTTP_422_UNPROCESSABLE_ENTITY, "Invalid request body")

    raw_locality = body["locality_id"]
    locality_id = parse_int(raw_locality) if isinstance(raw_locality, str) else None
    if locality_id is None:
        raise message_error(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR)

    # Un valor que no es texto queda vacío y lo rechaza el servicio
    carry = CarryCreate(
        locality_id=locality_id,
        **{
            field: body[field] if isinstance(body[field], str) else ""
            for field in CARRY_STRING_FIELDS
        }
    )

    try:
        carry_id = service.save(carry)
    except IncorrectCarryData:
        raise message_error(status.HTTP_422_UNPROCESSABLE_ENTITY, "Incorrect data")
    except CarryAlreadyExists:
        raise message_error(status.HTTP_409_CONFLICT, "Carry already exists")
    except LocalityCarriesNotFound:
        raise message_error(status.HTTP_404_NOT_FOUND, LOCALITY_NOT_FOUND)
    except Exception as e:
        logger.error(f"❌ Error creando transportista: {e}")
        raise message_error(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR)

    return {"data": CarryResponse(id=carry_id, **carry.model_dump())}
