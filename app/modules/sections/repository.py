# app/modules/sections/repository.py
from typing import List, Optional
from sqlalchemy import func
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError

from app.shared.database.models import Section, ProductBatch

class SectionRepository:

    def __init__(self, db: Session):
        self.db = db

    # ===== CONSULTAS =====

    def get_all(self) -> List[Section]:
        return self.db.query(Section).order_by(Section.id).all()

    def get(self, section_id: int) -> Optional[Section]:
        return self.db.query(Section).filter(Section.id == section_id).first()

    def exists(self, section_number: int) -> bool:
        return self.db.query(Section.id)\
            .filter(Section.section_number == section_number).first() is not None

    def product_count(self, section_id: int = 0) -> List[tuple]:
        """(id, section_number, suma de current_quantity de sus lotes)"""
        query = self.db.query(
            Section.id,
            Section.section_number,
            func.coalesce(func.sum(ProductBatch.current_quantity), 0)
        ).outerjoin(ProductBatch, ProductBatch.section_id == Section.id)

        if section_id:
            query = query.filter(Section.id == section_id)

        return query.group_by(Section.id, Section.section_number).order_by(Section.id).all()

    # ===== ESCRITURA =====

    def save(self, section_data: dict) -> Section:
        try:
            section = Section(**section_data)
            self.db.add(section)
            self.db.commit()
            self.db.refresh(section)
            return section
        except SQLAlchemyError as e:
            self.db.rollback()
            raise e

    def update(self, section_id: int, section_data: dict) -> bool:
        try:
            rows_updated = self.db.query(Section)\
                .filter(Section.id == section_id)\
                .update(section_data)
            self.db.commit()
            return rows_updated > 0
        except SQLAlchemyError as e:
            self.db.rollback()
            raise e

    def delete(self, section_id: int) -> bool:
        """Eliminar la sección junto con sus lotes"""
        try:
            section = self.get(section_id)
            if section is None:
                return False
            self.db.delete(section)
            self.db.commit()
            return True
        except SQLAlchemyError as e:
            self.db.rollback()
            raise e
