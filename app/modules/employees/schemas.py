# app/modules/employees/schemas.py
from typing import Optional
from pydantic import BaseModel, ConfigDict

from app.shared.schemas import IdFirstModel

EMPLOYEE_FIELDS = ("card_number_id", "first_name", "last_name", "warehouse_id")

EMPLOYEE_FIELD_TYPES = {
    "id": int,
    "card_number_id": str,
    "first_name": str,
    "last_name": str,
    "warehouse_id": int,
}

class EmployeeCreate(BaseModel):
    card_number_id: str = ""
    first_name: str = ""
    last_name: str = ""
    warehouse_id: int = 0

    def negative_field_error(self) -> Optional[str]:
        if self.warehouse_id <= 0:
            return "negative warehouse_id"
        return None

class EmployeeResponse(EmployeeCreate, IdFirstModel):
    id: int

    model_config = ConfigDict(from_attributes=True)
