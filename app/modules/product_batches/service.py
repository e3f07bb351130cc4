# app/modules/product_batches/service.py
from typing import List
from sqlalchemy.orm import Session

from .repository import ProductBatchRepository
from .schemas import ProductBatchCreate, ProductBatchResponse
from .exceptions import DuplicateBatchNumber

class ProductBatchService:

    def __init__(self, db: Session):
        self.db = db
        self.repository = ProductBatchRepository(db)

    def get_all(self) -> List[ProductBatchResponse]:
        return [ProductBatchResponse.model_validate(b) for b in self.repository.get_all()]

    def save(self, batch: ProductBatchCreate) -> int:
        if self.repository.exists(batch.batch_number):
            raise DuplicateBatchNumber()
        return self.repository.save(batch.model_dump()).id
