# app/modules/sellers/schemas.py
from pydantic import BaseModel, ConfigDict

from app.shared.schemas import IdFirstModel

SELLER_STRING_FIELDS = ("company_name", "address", "telephone")

SELLER_FIELD_TYPES = {
    "id": int,
    "cid": int,
    "company_name": str,
    "address": str,
    "telephone": str,
    "locality_id": int,
}

class SellerCreate(BaseModel):
    cid: int = 0
    company_name: str = ""
    address: str = ""
    telephone: str = ""
    locality_id: int = 0

class SellerResponse(SellerCreate, IdFirstModel):
    id: int

    model_config = ConfigDict(from_attributes=True)
