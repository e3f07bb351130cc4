# app/modules/inbound_orders/service.py
import logging
from datetime import datetime
from typing import List
from zoneinfo import ZoneInfo
from sqlalchemy.orm import Session

from app.config.settings import settings
from .repository import InboundOrderRepository
from .schemas import InboundOrderCreate, EmployeeInboundReport
from .exceptions import (
    EmployeeNotFound, EmployeeDoesNotExist, WarehouseDoesNotExist, InboundOrderAlreadyExists
)

logger = logging.getLogger(__name__)

def today() -> str:
    """Fecha actual en la zona horaria de la operación, formato YYYY-MM-DD"""
    return datetime.now(ZoneInfo(settings.timezone)).strftime("%Y-%m-%d")

class InboundOrderService:

    def __init__(self, db: Session):
        self.db = db
        self.repository = InboundOrderRepository(db)

    @staticmethod
    def _to_report(employee, count: int) -> EmployeeInboundReport:
        return EmployeeInboundReport(
            id=employee.id,
            card_number_id=employee.card_number_id,
            first_name=employee.first_name,
            last_name=employee.last_name,
            warehouse_id=employee.warehouse_id,
            inboud_orders_count=count
        )

    def report_all(self) -> List[EmployeeInboundReport]:
        return [self._to_report(e, count) for e, count in self.repository.count_by_employee()]

    def report(self, employee_id: int) -> EmployeeInboundReport:
        row = self.repository.count_for_employee(employee_id)
        if row is None:
            raise EmployeeNotFound()
        return self._to_report(*row)

    def save(self, order: InboundOrderCreate) -> int:
        """
        Registrar una orden de entrada

        Valida en orden: empleado existente, bodega existente y número
        de orden no repetido.
        """
        if not self.repository.employee_exists(order.employee_id):
            raise EmployeeDoesNotExist()
        if not self.repository.warehouse_exists(order.warehouse_id):
            raise WarehouseDoesNotExist()
        if self.repository.exists(order.order_number):
            raise InboundOrderAlreadyExists()

        saved = self.repository.save(order.model_dump())
        logger.info(f"📥 Orden de entrada {order.order_number} registrada con id {saved.id}")
        return saved.id
