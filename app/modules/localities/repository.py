# app/modules/localities/repository.py
from typing import List, Optional
from sqlalchemy import func
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError

from app.shared.database.models import Locality, Seller

class LocalityRepository:

    def __init__(self, db: Session):
        self.db = db

    def get_all(self) -> List[Locality]:
        return self.db.query(Locality).order_by(Locality.id).all()

    def get(self, locality_id: int) -> Optional[Locality]:
        return self.db.query(Locality).filter(Locality.id == locality_id).first()

    def exists(self, postal_code: int) -> bool:
        return self.db.query(Locality.id)\
            .filter(Locality.postal_code == postal_code).first() is not None

    def save(self, locality_data: dict) -> Locality:
        try:
            locality = Locality(**locality_data)
            self.db.add(locality)
            self.db.commit()
            self.db.refresh(locality)
            return locality
        except SQLAlchemyError as e:
            self.db.rollback()
            raise e

    def report_sellers(self, locality_id: int = 0) -> List[tuple]:
        """(locality_id, locality_name, postal_code, sellers_count) con LEFT JOIN"""
        query = self.db.query(
            Locality.id,
            Locality.locality_name,
            Locality.postal_code,
            func.count(Seller.id)
        ).outerjoin(Seller, Seller.locality_id == Locality.id)

        if locality_id:
            query = query.filter(Locality.id == locality_id)

        return query.group_by(Locality.id, Locality.locality_name, Locality.postal_code)\
            .order_by(Locality.id)\
            .all()
