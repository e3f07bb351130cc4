# app/modules/employees/service.py
from typing import List
from sqlalchemy.orm import Session

from .repository import EmployeeRepository
from .schemas import EmployeeCreate, EmployeeResponse
from .exceptions import EmployeeNotFound, EmployeeAlreadyExists

class EmployeeService:

    def __init__(self, db: Session):
        self.db = db
        self.repository = EmployeeRepository(db)

    def get_all(self) -> List[EmployeeResponse]:
        return [EmployeeResponse.model_validate(e) for e in self.repository.get_all()]

    def get(self, employee_id: int) -> EmployeeResponse:
        employee = self.repository.get(employee_id)
        if employee is None:
            raise EmployeeNotFound()
        return EmployeeResponse.model_validate(employee)

    def save(self, employee: EmployeeCreate) -> int:
        if self.repository.exists(employee.card_number_id):
            raise EmployeeAlreadyExists()
        return self.repository.save(employee.model_dump()).id

    def update(self, employee_id: int, employee: EmployeeCreate) -> EmployeeResponse:
        """Actualizar; el número de tarjeta solo se valida si cambió"""
        current = self.get(employee_id)
        if employee.card_number_id != current.card_number_id \
                and self.repository.exists(employee.card_number_id):
            raise EmployeeAlreadyExists()

        self.repository.update(employee_id, employee.model_dump())
        return EmployeeResponse(id=employee_id, **employee.model_dump())

    def delete(self, employee_id: int) -> None:
        if not self.repository.delete(employee_id):
            raise EmployeeNotFound()
