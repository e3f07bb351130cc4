# app/modules/buyers/schemas.py
from pydantic import BaseModel, ConfigDict

from app.shared.schemas import IdFirstModel

BUYER_FIELD_TYPES = {
    "card_number_id": str,
    "first_name": str,
    "last_name": str,
}

class BuyerCreate(BaseModel):
    card_number_id: str = ""
    first_name: str = ""
    last_name: str = ""

    def has_empty_fields(self) -> bool:
        return not (self.card_number_id and self.first_name and self.last_name)

class BuyerUpdate(BuyerCreate):
    """Campos vacíos se ignoran; card_number_id solo se usa para validar duplicados"""
    pass

class BuyerResponse(BuyerCreate, IdFirstModel):
    id: int

    model_config = ConfigDict(from_attributes=True)
