# app/modules/warehouses/repository.py
from typing import List, Optional
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError

from app.shared.database.models import Warehouse

class WarehouseRepository:

    def __init__(self, db: Session):
        self.db = db

    def get_all(self) -> List[Warehouse]:
        return self.db.query(Warehouse).order_by(Warehouse.id).all()

    def get(self, warehouse_id: int) -> Optional[Warehouse]:
        return self.db.query(Warehouse).filter(Warehouse.id == warehouse_id).first()

    def exists(self, warehouse_code: str) -> bool:
        return self.db.query(Warehouse.id)\
            .filter(Warehouse.warehouse_code == warehouse_code).first() is not None

    def save(self, warehouse_data: dict) -> Warehouse:
        try:
            warehouse = Warehouse(**warehouse_data)
            self.db.add(warehouse)
            self.db.commit()
            self.db.refresh(warehouse)
            return warehouse
        except SQLAlchemyError as e:
            self.db.rollback()
            raise e

    def update(self, warehouse_id: int, warehouse_data: dict) -> bool:
        try:
            rows_updated = self.db.query(Warehouse)\
                .filter(Warehouse.id == warehouse_id)\
                .update(warehouse_data)
            self.db.commit()
            return rows_updated > 0
        except SQLAlchemyError as e:
            self.db.rollback()
            raise e

    def delete(self, warehouse_id: int) -> bool:
        try:
            rows_deleted = self.db.query(Warehouse).filter(Warehouse.id == warehouse_id).delete()
            self.db.commit()
            return rows_deleted > 0
        except SQLAlchemyError as e:
            self.db.rollback()
            raise e
