# app/modules/carries/schemas.py
from pydantic import BaseModel, ConfigDict

from app.shared.schemas import IdFirstModel

CARRY_FIELDS = ("cid", "company_name", "address", "telephone", "locality_id")
CARRY_STRING_FIELDS = ("cid", "company_name", "address", "telephone")

class CarryCreate(BaseModel):
    cid: str = ""
    company_name: str = ""
    address: str = ""
    telephone: str = ""
    locality_id: int = 0

    def has_incorrect_data(self) -> bool:
        if any(getattr(self, field) == "" for field in CARRY_STRING_FIELDS):
            return True
        return self.locality_id < 0

class CarryResponse(CarryCreate, IdFirstModel):
    id: int

    model_config = ConfigDict(from_attributes=True)

class LocalityCarriesReport(BaseModel):
    """Cantidad de transportistas por código postal"""
    locality_id: str
    locality_name: str
    carries_count: int
