# app/modules/products/schemas.py
from pydantic import BaseModel, ConfigDict, Field

from app.shared.schemas import IdFirstModel

# Tipo esperado de cada campo del cuerpo JSON
PRODUCT_FIELD_TYPES = {
    "id": int,
    "description": str,
    "expiration_rate": float,
    "freezing_rate": float,
    "height": float,
    "length": float,
    "netweight": float,
    "product_code": str,
    "recommended_freezing_temperature": float,
    "width": float,
    "product_type_id": int,
    "seller_id": int,
}

class ProductBase(BaseModel):
    """Campos de un producto; los ausentes toman el valor cero"""
    description: str = ""
    expiration_rate: float = 0
    freezing_rate: float = 0
    height: float = 0
    length: float = 0
    netweight: float = 0
    product_code: str = ""
    recommended_freezing_temperature: float = 0
    width: float = 0
    product_type_id: int = 0
    seller_id: int = 0

    def is_complete(self) -> bool:
        """Validación de campos obligatorios y rangos al crear"""
        for rate in (self.expiration_rate, self.freezing_rate, self.recommended_freezing_temperature):
            if rate == 0 or rate > 100:
                return False
        if not self.description:
            return False
        if 0 in (self.height, self.length, self.netweight, self.width):
            return False
        if not self.product_code or len(self.product_code) > 100:
            return False
        return self.product_type_id != 0

class ProductCreate(ProductBase):
    pass

class ProductResponse(ProductBase, IdFirstModel):
    id: int = Field(..., description="ID asignado por la base de datos")

    model_config = ConfigDict(from_attributes=True)
