# app/modules/employees/repository.py
from typing import List, Optional
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError

from app.shared.database.models import Employee

class EmployeeRepository:

    def __init__(self, db: Session):
        self.db = db

    def get_all(self) -> List[Employee]:
        return self.db.query(Employee).order_by(Employee.id).all()

    def get(self, employee_id: int) -> Optional[Employee]:
        return self.db.query(Employee).filter(Employee.id == employee_id).first()

    def exists(self, card_number_id: str) -> bool:
        return self.db.query(Employee.id)\
            .filter(Employee.card_number_id == card_number_id).first() is not None

    def save(self, employee_data: dict) -> Employee:
        try:
            employee = Employee(**employee_data)
            self.db.add(employee)
            self.db.commit()
            self.db.refresh(employee)
            return employee
        except SQLAlchemyError as e:
            self.db.rollback()
            raise e

    def update(self, employee_id: int, employee_data: dict) -> bool:
        try:
            rows_updated = self.db.query(Employee)\
                .filter(Employee.id == employee_id)\
                .update(employee_data)
            self.db.commit()
            return rows_updated > 0
        except SQLAlchemyError as e:
            self.db.rollback()
            raise e

    def delete(self, employee_id: int) -> bool:
        try:
            rows_deleted = self.db.query(Employee).filter(Employee.id == employee_id).delete()
            self.db.commit()
            return rows_deleted > 0
        except SQLAlchemyError as e:
            self.db.rollback()
            raise e
