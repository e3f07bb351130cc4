# app/modules/product_records/schemas.py
from pydantic import BaseModel, ConfigDict

from app.shared.schemas import IdFirstModel

RECORD_FIELD_TYPES = {
    "last_update_date": str,
    "purchase_price": float,
    "sale_price": float,
    "product_id": int,
}

class ProductRecordCreate(BaseModel):
    last_update_date: str = ""
    purchase_price: float = 0
    sale_price: float = 0
    product_id: int = 0

class ProductRecordResponse(ProductRecordCreate, IdFirstModel):
    id: int

    model_config = ConfigDict(from_attributes=True)

class ProductRecordReport(BaseModel):
    """Cantidad de registros de precio por producto"""
    product_id: int
    description: str
    record_count: int
