# app/modules/product_batches/repository.py
from typing import List
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError

from app.shared.database.models import ProductBatch, Product, Section
from .exceptions import ProductNotFound, SectionNotFound

class ProductBatchRepository:

    def __init__(self, db: Session):
        self.db = db

    def get_all(self) -> List[ProductBatch]:
        return self.db.query(ProductBatch).order_by(ProductBatch.id).all()

    def exists(self, batch_number: int) -> bool:
        return self.db.query(ProductBatch.id)\
            .filter(ProductBatch.batch_number == batch_number).first() is not None

    def save(self, batch_data: dict) -> ProductBatch:
        """Insertar lote validando que producto y sección existan"""
        if self.db.query(Product.id).filter(Product.id == batch_data["product_id"]).first() is None:
            raise ProductNotFound()
        if self.db.query(Section.id).filter(Section.id == batch_data["section_id"]).first() is None:
            raise SectionNotFound()
        try:
            batch = ProductBatch(**batch_data)
            self.db.add(batch)
            self.db.commit()
            self.db.refresh(batch)
            return batch
        except SQLAlchemyError as e:
            self.db.rollback()
            raise e
