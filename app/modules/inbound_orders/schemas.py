# app/modules/inbound_orders/schemas.py
from typing import Optional
from pydantic import BaseModel, ConfigDict

from app.shared.schemas import IdFirstModel

INBOUND_ORDER_FIELDS = ("order_number", "employee_id", "product_batch_id", "warehouse_id")

INBOUND_ORDER_FIELD_TYPES = {
    "id": int,
    "order_date": str,
    "order_number": str,
    "employee_id": int,
    "product_batch_id": int,
    "warehouse_id": int,
}

class InboundOrderCreate(BaseModel):
    order_date: str = ""
    order_number: str = ""
    employee_id: int = 0
    product_batch_id: int = 0
    warehouse_id: int = 0

    def negative_field_error(self) -> Optional[str]:
        if self.warehouse_id <= 0:
            return "negative warehouse_id"
        return None

class InboundOrderResponse(InboundOrderCreate, IdFirstModel):
    id: int

    model_config = ConfigDict(from_attributes=True)

class EmployeeInboundReport(BaseModel):
    """Datos del empleado más la cantidad de órdenes de entrada registradas"""
    id: int
    card_number_id: str
    first_name: str
    last_name: str
    warehouse_id: int
    inboud_orders_count: int
