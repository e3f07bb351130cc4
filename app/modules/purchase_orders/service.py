# app/modules/purchase_orders/service.py
from typing import List
from sqlalchemy.orm import Session

from .repository import PurchaseOrderRepository
from .schemas import PurchaseOrderCreate, BuyerPurchaseOrdersReport
from .exceptions import PurchaseOrderAlreadyExists, BuyerNotExists, ProductRecordNotExists

class PurchaseOrderService:

    def __init__(self, db: Session):
        self.db = db
        self.repository = PurchaseOrderRepository(db)

    def save(self, order: PurchaseOrderCreate, user_id: int = 0) -> int:
        """
        Registrar una orden de compra

        Orden de verificación: id de orden repetido, comprador existente,
        registro de producto existente. El id final lo asigna la base.
        """
        if self.repository.exists(user_id):
            raise PurchaseOrderAlreadyExists()
        if not self.repository.buyer_exists(order.buyer_id):
            raise BuyerNotExists()
        if not self.repository.product_record_exists(order.product_record_id):
            raise ProductRecordNotExists()
        return self.repository.save(order.model_dump()).id

    def report_by_buyer(self, buyer_id: int = 0) -> List[BuyerPurchaseOrdersReport]:
        if buyer_id != 0 and not self.repository.buyer_exists(buyer_id):
            raise BuyerNotExists()
        return [
            BuyerPurchaseOrdersReport(
                id=id_,
                card_number_id=card_number_id,
                first_name=first_name,
                last_name=last_name,
                purchase_orders_count=count
            )
            for id_, card_number_id, first_name, last_name, count
            in self.repository.count_by_buyer(buyer_id)
        ]
