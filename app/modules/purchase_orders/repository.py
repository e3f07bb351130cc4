# app/modules/purchase_orders/repository.py
from typing import List
from sqlalchemy import func
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError

from app.shared.database.models import Buyer, ProductRecord, PurchaseOrder

class PurchaseOrderRepository:

    def __init__(self, db: Session):
        self.db = db

    def exists(self, purchase_order_id: int) -> bool:
        return self.db.query(PurchaseOrder.id)\
            .filter(PurchaseOrder.id == purchase_order_id).first() is not None

    def buyer_exists(self, buyer_id: int) -> bool:
        return self.db.query(Buyer.id).filter(Buyer.id == buyer_id).first() is not None

    def product_record_exists(self, product_record_id: int) -> bool:
        return self.db.query(ProductRecord.id)\
            .filter(ProductRecord.id == product_record_id).first() is not None

    def save(self, order_data: dict) -> PurchaseOrder:
        try:
            order = PurchaseOrder(**order_data)
            self.db.add(order)
            self.db.commit()
            self.db.refresh(order)
            return order
        except SQLAlchemyError as e:
            self.db.rollback()
            raise e

    def count_by_buyer(self, buyer_id: int = 0) -> List[tuple]:
        """(id, card_number_id, first_name, last_name, purchase_orders_count) con LEFT JOIN"""
        query = self.db.query(
            Buyer.id,
            Buyer.card_number_id,
            Buyer.first_name,
            Buyer.last_name,
            func.count(PurchaseOrder.id)
        ).outerjoin(PurchaseOrder, PurchaseOrder.buyer_id == Buyer.id)

        if buyer_id:
            query = query.filter(Buyer.id == buyer_id)

        return query.group_by(Buyer.id, Buyer.card_number_id, Buyer.first_name, Buyer.last_name)\
            .order_by(Buyer.id)\
            .all()
