# app/modules/carries/service.py
from typing import List
from sqlalchemy.orm import Session

from .repository import CarryRepository
from .schemas import CarryCreate, CarryResponse, LocalityCarriesReport
from .exceptions import IncorrectCarryData, CarryAlreadyExists, LocalityCarriesNotFound

class CarryService:

    def __init__(self, db: Session):
        self.db = db
        self.repository = CarryRepository(db)

    def get_all(self) -> List[CarryResponse]:
        return [CarryResponse.model_validate(c) for c in self.repository.get_all()]

    def save(self, carry: CarryCreate) -> int:
        """
        Registrar un transportista

        Falla si hay textos vacíos o locality_id negativo, si el cid ya
        existe o si ninguna localidad tiene ese código postal.
        """
        if carry.has_incorrect_data():
            raise IncorrectCarryData()
        if self.repository.exists(carry.cid):
            raise CarryAlreadyExists()
        if not self.repository.locality_exists(carry.locality_id):
            raise LocalityCarriesNotFound()
        return self.repository.save(carry.model_dump()).id

    def report_by_locality(self) -> List[LocalityCarriesReport]:
        return [
            LocalityCarriesReport(
                locality_id=str(postal_code),
                locality_name=name,
                carries_count=count
            )
            for postal_code, name, count in self.repository.count_by_locality()
        ]

    def report_by_postal_code(self, postal_code: int) -> LocalityCarriesReport:
        row = self.repository.count_by_postal_code(postal_code)
        if row is None:
            raise LocalityCarriesNotFound()
        code, name, count = row
        return LocalityCarriesReport(locality_id=str(code), locality_name=name, carries_count=count)
