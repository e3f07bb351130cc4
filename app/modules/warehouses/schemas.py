# app/modules/warehouses/schemas.py
from typing import Any, Dict
from pydantic import BaseModel, ConfigDict

from app.core.payload import fits_type
from app.shared.schemas import IdFirstModel

WAREHOUSE_FIELDS = (
    "address", "telephone", "warehouse_code", "minimum_capacity", "minimum_temperature"
)

WAREHOUSE_FIELD_TYPES = {
    "id": int,
    "address": str,
    "telephone": str,
    "warehouse_code": str,
    "minimum_capacity": int,
    "minimum_temperature": int,
}

ZERO_VALUES = {int: 0, str: ""}

class WarehouseCreate(BaseModel):
    address: str = ""
    telephone: str = ""
    warehouse_code: str = ""
    minimum_capacity: int = 0
    minimum_temperature: int = 0

    @classmethod
    def from_loose_body(cls, body: Dict[str, Any]) -> "WarehouseCreate":
        """
        Construir desde un cuerpo sin validar tipos.

        Un valor con tipo incorrecto queda en el cero de su tipo
        y la validación del servicio decide si es aceptable.
        """
        values = {}
        for field in WAREHOUSE_FIELDS:
            target = WAREHOUSE_FIELD_TYPES[field]
            value = body.get(field)
            if target is int and isinstance(value, float) and value.is_integer():
                value = int(value)
            if value is None or not fits_type(value, target):
                value = ZERO_VALUES[target]
            values[field] = value
        return cls(**values)

    def has_incorrect_data(self) -> bool:
        if "" in (self.address, self.telephone, self.warehouse_code):
            return True
        return self.minimum_capacity < 0

class WarehouseResponse(WarehouseCreate, IdFirstModel):
    id: int

    model_config = ConfigDict(from_attributes=True)
