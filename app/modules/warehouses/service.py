# app/modules/warehouses/service.py
from typing import List
from sqlalchemy.orm import Session

from .repository import WarehouseRepository
from .schemas import WarehouseCreate, WarehouseResponse
from .exceptions import WarehouseNotFound, IncorrectWarehouseData, WarehouseAlreadyExists

class WarehouseService:

    def __init__(self, db: Session):
        self.db = db
        self.repository = WarehouseRepository(db)

    def get_all(self) -> List[WarehouseResponse]:
        return [WarehouseResponse.model_validate(w) for w in self.repository.get_all()]

    def get(self, warehouse_id: int) -> WarehouseResponse:
        warehouse = self.repository.get(warehouse_id)
        if warehouse is None:
            raise WarehouseNotFound()
        return WarehouseResponse.model_validate(warehouse)

    def save(self, warehouse: WarehouseCreate) -> int:
        """Textos no vacíos, capacidad mínima no negativa y código único"""
        if warehouse.has_incorrect_data():
            raise IncorrectWarehouseData()
        if self.repository.exists(warehouse.warehouse_code):
            raise WarehouseAlreadyExists()
        return self.repository.save(warehouse.model_dump()).id

    def update(self, warehouse_id: int, warehouse: WarehouseCreate) -> WarehouseResponse:
        if warehouse.has_incorrect_data():
            raise IncorrectWarehouseData()
        if not self.repository.update(warehouse_id, warehouse.model_dump()):
            raise WarehouseNotFound()
        return WarehouseResponse(id=warehouse_id, **warehouse.model_dump())

    def delete(self, warehouse_id: int) -> None:
        if not self.repository.delete(warehouse_id):
            raise WarehouseNotFound()
