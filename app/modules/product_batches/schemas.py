# app/modules/product_batches/schemas.py
from typing import Optional
from pydantic import BaseModel, ConfigDict

from app.core.payload import is_date
from app.shared.schemas import IdFirstModel

BATCH_FIELD_TYPES = {
    "batch_number": int,
    "current_quantity": int,
    "current_temperature": int,
    "due_date": str,
    "initial_quantity": int,
    "manufacturing_date": str,
    "manufacturing_hour": int,
    "minimum_temperature": int,
    "product_id": int,
    "section_id": int,
}

# Orden en el que se reportan los campos faltantes
BATCH_FIELDS = tuple(BATCH_FIELD_TYPES)

class ProductBatchCreate(BaseModel):
    batch_number: int = 0
    current_quantity: int = 0
    current_temperature: int = 0
    due_date: str = ""
    initial_quantity: int = 0
    manufacturing_date: str = ""
    manufacturing_hour: int = 0
    minimum_temperature: int = 0
    product_id: int = 0
    section_id: int = 0

    def validation_error(self) -> Optional[str]:
        """Primer rango o formato inválido, None si el lote es válido"""
        if self.current_quantity < 0:
            return "current_quantity must be equal or greater than 0"
        if self.initial_quantity < 0:
            return "initial_quantity must be equal or greater than 0"
        if not 0 <= self.manufacturing_hour <= 23:
            return "manufacturing_hour value must be within range [0 - 23]"
        if self.product_id < 0:
            return "product_id must be equal or greater than 0"
        if self.section_id < 0:
            return "section_id must be equal or greater than 0"
        if not is_date(self.due_date):
            return "due_date should match format YYYY-MM-DD"
        if not is_date(self.manufacturing_date):
            return "manufacturing_date should match format YYYY-MM-DD"
        return None

class ProductBatchResponse(ProductBatchCreate, IdFirstModel):
    id: int

    model_config = ConfigDict(from_attributes=True)
