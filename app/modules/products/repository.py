# app/modules/products/repository.py
from typing import List, Optional
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError

from app.shared.database.models import Product

class ProductRepository:

    def __init__(self, db: Session):
        self.db = db

    # ===== CONSULTAS =====

    def get_all(self) -> List[Product]:
        return self.db.query(Product).order_by(Product.id).all()

    def get(self, product_id: int) -> Optional[Product]:
        return self.db.query(Product).filter(Product.id == product_id).first()

    def exists(self, product_code: str) -> bool:
        """Verificar si ya hay un producto con ese código"""
        return self.db.query(Product.id)\
            .filter(Product.product_code == product_code).first() is not None

    # ===== ESCRITURA =====

    def save(self, product_data: dict) -> Product:
        try:
            product = Product(**product_data)
            self.db.add(product)
            self.db.commit()
            self.db.refresh(product)
            return product
        except SQLAlchemyError as e:
            self.db.rollback()
            raise e

    def update(self, product_id: int, product_data: dict) -> bool:
        try:
            rows_updated = self.db.query(Product)\
                .filter(Product.id == product_id)\
                .update(product_data)
            self.db.commit()
            return rows_updated > 0
        except SQLAlchemyError as e:
            self.db.rollback()
            raise e

    def delete(self, product_id: int) -> bool:
        try:
            rows_deleted = self.db.query(Product)\
                .filter(Product.id == product_id)\
                .delete()
            self.db.commit()
            return rows_deleted > 0
        except SQLAlchemyError as e:
            self.db.rollback()
            raise e
