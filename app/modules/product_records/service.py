# app/modules/product_records/service.py
from typing import List
from sqlalchemy.orm import Session

from .repository import ProductRecordRepository
from .schemas import ProductRecordCreate, ProductRecordReport
from .exceptions import ProductNotFound

class ProductRecordService:

    def __init__(self, db: Session):
        self.db = db
        self.repository = ProductRecordRepository(db)

    def save(self, record: ProductRecordCreate) -> int:
        if not self.repository.product_exists(record.product_id):
            raise ProductNotFound()
        return self.repository.save(record.model_dump()).id

    def report(self, product_id: int = 0) -> List[ProductRecordReport]:
        """Reporte de registros; product_id = 0 incluye todos los productos"""
        if product_id != 0 and not self.repository.product_exists(product_id):
            raise ProductNotFound()
        return [
            ProductRecordReport(product_id=pid, description=description, record_count=count)
            for pid, description, count in self.repository.count_by_product(product_id)
        ]
