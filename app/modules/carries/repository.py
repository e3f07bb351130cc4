# app/modules/carries/repository.py
from typing import List, Optional
from sqlalchemy import func
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError

from app.shared.database.models import Carry, Locality

class CarryRepository:

    def __init__(self, db: Session):
        self.db = db

    def get_all(self) -> List[Carry]:
        return self.db.query(Carry).order_by(Carry.id).all()

    def exists(self, cid: str) -> bool:
        return self.db.query(Carry.id).filter(Carry.cid == cid).first() is not None

    def locality_exists(self, postal_code: int) -> bool:
        return self.db.query(Locality.id)\
            .filter(Locality.postal_code == postal_code).first() is not None

    def save(self, carry_data: dict) -> Carry:
        try:
            carry = Carry(**carry_data)
            self.db.add(carry)
            self.db.commit()
            self.db.refresh(carry)
            return carry
        except SQLAlchemyError as e:
            self.db.rollback()
            raise e

    def count_by_locality(self) -> List[tuple]:
        """(postal_code, locality_name, carries_count) solo de localidades con transportistas"""
        return self.db.query(
            Locality.postal_code,
            Locality.locality_name,
            func.count(Carry.id)
        ).join(Carry, Carry.locality_id == Locality.postal_code)\
            .group_by(Locality.postal_code, Locality.locality_name)\
            .order_by(Locality.postal_code)\
            .all()

    def count_by_postal_code(self, postal_code: int) -> Optional[tuple]:
        return self.db.query(
            Locality.postal_code,
            Locality.locality_name,
            func.count(Carry.id)
        ).outerjoin(Carry, Carry.locality_id == Locality.postal_code)\
            .filter(Locality.postal_code == postal_code)\
            .group_by(Locality.postal_code, Locality.locality_name)\
            .first()
