# app/modules/sections/schemas.py
from typing import Optional
from pydantic import BaseModel, ConfigDict

from app.shared.schemas import IdFirstModel

# Orden en el que se reportan los campos faltantes
SECTION_FIELDS = (
    "section_number",
    "current_temperature",
    "minimum_temperature",
    "current_capacity",
    "minimum_capacity",
    "maximum_capacity",
    "warehouse_id",
    "product_type_id",
)

SECTION_FIELD_TYPES = {"id": int, **{field: int for field in SECTION_FIELDS}}

class SectionBase(BaseModel):
    section_number: int = 0
    current_temperature: int = 0
    minimum_temperature: int = 0
    current_capacity: int = 0
    minimum_capacity: int = 0
    maximum_capacity: int = 0
    warehouse_id: int = 0
    product_type_id: int = 0

    def negative_field_error(self) -> Optional[str]:
        if self.product_type_id <= 0:
            return "negative product_type_id"
        if self.warehouse_id <= 0:
            return "negative warehouse_id"
        return None

class SectionCreate(SectionBase):
    pass

class SectionResponse(SectionBase, IdFirstModel):
    id: int

    model_config = ConfigDict(from_attributes=True)

class SectionProductCount(BaseModel):
    id: int
    section_number: int
    product_count: int
