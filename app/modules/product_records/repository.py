# app/modules/product_records/repository.py
from typing import List, Optional
from sqlalchemy import func
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError

from app.shared.database.models import Product, ProductRecord

class ProductRecordRepository:

    def __init__(self, db: Session):
        self.db = db

    def product_exists(self, product_id: int) -> bool:
        return self.db.query(Product.id).filter(Product.id == product_id).first() is not None

    def save(self, record_data: dict) -> ProductRecord:
        try:
            record = ProductRecord(**record_data)
            self.db.add(record)
            self.db.commit()
            self.db.refresh(record)
            return record
        except SQLAlchemyError as e:
            self.db.rollback()
            raise e

    def count_by_product(self, product_id: Optional[int] = None) -> List[tuple]:
        """(product_id, description, record_count) con LEFT JOIN; 0 registros incluidos"""
        query = self.db.query(
            Product.id,
            Product.description,
            func.count(ProductRecord.id)
        ).outerjoin(ProductRecord, ProductRecord.product_id == Product.id)

        if product_id:
            query = query.filter(Product.id == product_id)

        return query.group_by(Product.id, Product.description).order_by(Product.id).all()
