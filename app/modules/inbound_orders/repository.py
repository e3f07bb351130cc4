# app/modules/inbound_orders/repository.py
from typing import List, Optional
from sqlalchemy import func
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError

from app.shared.database.models import Employee, InboundOrder, Warehouse

class InboundOrderRepository:

    def __init__(self, db: Session):
        self.db = db

    def employee_exists(self, employee_id: int) -> bool:
        return self.db.query(Employee.id).filter(Employee.id == employee_id).first() is not None

    def warehouse_exists(self, warehouse_id: int) -> bool:
        return self.db.query(Warehouse.id).filter(Warehouse.id == warehouse_id).first() is not None

    def exists(self, order_number: str) -> bool:
        return self.db.query(InboundOrder.id)\
            .filter(InboundOrder.order_number == order_number).first() is not None

    def save(self, order_data: dict) -> InboundOrder:
        try:
            order = InboundOrder(**order_data)
            self.db.add(order)
            self.db.commit()
            self.db.refresh(order)
            return order
        except SQLAlchemyError as e:
            self.db.rollback()
            raise e

    def _report_query(self):
        return self.db.query(
            Employee,
            func.count(InboundOrder.id)
        ).outerjoin(InboundOrder, InboundOrder.employee_id == Employee.id)\
            .group_by(Employee.id)

    def count_by_employee(self) -> List[tuple]:
        """(empleado, cantidad de órdenes) para todos los empleados"""
        return self._report_query().order_by(Employee.id).all()

    def count_for_employee(self, employee_id: int) -> Optional[tuple]:
        return self._report_query().filter(Employee.id == employee_id).first()
