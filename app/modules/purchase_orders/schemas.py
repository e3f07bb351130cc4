# app/modules/purchase_orders/schemas.py
from pydantic import BaseModel, ConfigDict

from app.shared.schemas import IdFirstModel

# user_id del cuerpo es el id con el que se verifica si la orden ya existe
PURCHASE_ORDER_FIELD_TYPES = {
    "user_id": int,
    "order_number": str,
    "order_date": str,
    "tracking_code": str,
    "buyer_id": int,
    "product_record_id": int,
    "order_status_id": int,
}

class PurchaseOrderCreate(BaseModel):
    order_number: str = ""
    order_date: str = ""
    tracking_code: str = ""
    buyer_id: int = 0
    product_record_id: int = 0
    order_status_id: int = 0

    def has_missing_fields(self) -> bool:
        if "" in (self.order_number, self.order_date, self.tracking_code):
            return True
        return min(self.buyer_id, self.product_record_id, self.order_status_id) <= 0

class PurchaseOrderResponse(PurchaseOrderCreate, IdFirstModel):
    id: int

    model_config = ConfigDict(from_attributes=True)

class BuyerPurchaseOrdersReport(BaseModel):
    id: int
    card_number_id: str
    first_name: str
    last_name: str
    purchase_orders_count: int
