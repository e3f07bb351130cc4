# app/modules/sellers/repository.py
from typing import List, Optional
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError

from app.shared.database.models import Seller, Locality

class SellerRepository:

    def __init__(self, db: Session):
        self.db = db

    def get_all(self) -> List[Seller]:
        return self.db.query(Seller).order_by(Seller.id).all()

    def get(self, seller_id: int) -> Optional[Seller]:
        return self.db.query(Seller).filter(Seller.id == seller_id).first()

    def exists(self, cid: int) -> bool:
        return self.db.query(Seller.id).filter(Seller.cid == cid).first() is not None

    def locality_exists(self, locality_id: int) -> bool:
        return self.db.query(Locality.id).filter(Locality.id == locality_id).first() is not None

    def save(self, seller_data: dict) -> Seller:
        try:
            seller = Seller(**seller_data)
            self.db.add(seller)
            self.db.commit()
            self.db.refresh(seller)
            return seller
        except SQLAlchemyError as e:
            self.db.rollback()
            raise e

    def update(self, seller_id: int, seller_data: dict) -> bool:
        try:
            rows_updated = self.db.query(Seller)\
                .filter(Seller.id == seller_id)\
                .update(seller_data)
            self.db.commit()
            return rows_updated > 0
        except SQLAlchemyError as e:
            self.db.rollback()
            raise e

    def delete(self, seller_id: int) -> bool:
        try:
            rows_deleted = self.db.query(Seller).filter(Seller.id == seller_id).delete()
            self.db.commit()
            return rows_deleted > 0
        except SQLAlchemyError as e:
            self.db.rollback()
            raise e
