# app/modules/buyers/repository.py
from typing import List, Optional
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError

from app.shared.database.models import Buyer

class BuyerRepository:

    def __init__(self, db: Session):
        self.db = db

    def get_all(self) -> List[Buyer]:
        return self.db.query(Buyer).order_by(Buyer.id).all()

    def get(self, buyer_id: int) -> Optional[Buyer]:
        return self.db.query(Buyer).filter(Buyer.id == buyer_id).first()

    def exists(self, card_number_id: str) -> bool:
        return self.db.query(Buyer.id)\
            .filter(Buyer.card_number_id == card_number_id).first() is not None

    def save(self, buyer_data: dict) -> Buyer:
        try:
            buyer = Buyer(**buyer_data)
            self.db.add(buyer)
            self.db.commit()
            self.db.refresh(buyer)
            return buyer
        except SQLAlchemyError as e:
            self.db.rollback()
            raise e

    def update(self, buyer_id: int, buyer_data: dict) -> bool:
        try:
            rows_updated = self.db.query(Buyer)\
                .filter(Buyer.id == buyer_id)\
                .update(buyer_data)
            self.db.commit()
            return rows_updated > 0
        except SQLAlchemyError as e:
            self.db.rollback()
            raise e

    def delete(self, buyer_id: int) -> bool:
        try:
            rows_deleted = self.db.query(Buyer).filter(Buyer.id == buyer_id).delete()
            self.db.commit()
            return rows_deleted > 0
        except SQLAlchemyError as e:
            self.db.rollback()
            raise e
