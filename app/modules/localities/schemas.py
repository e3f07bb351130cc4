# app/modules/localities/schemas.py
from pydantic import BaseModel, ConfigDict

from app.shared.schemas import IdFirstModel

LOCALITY_STRING_FIELDS = ("locality_name", "province_name", "country_name")

class LocalityCreate(BaseModel):
    postal_code: int
    locality_name: str
    province_name: str
    country_name: str

class LocalityResponse(LocalityCreate, IdFirstModel):
    id: int

    model_config = ConfigDict(from_attributes=True)

class ReportSellers(BaseModel):
    """Cantidad de vendedores por localidad"""
    locality_id: int
    locality_name: str
    postal_code: int
    sellers_count: int
