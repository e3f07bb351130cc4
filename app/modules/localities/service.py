# app/modules/localities/service.py
from typing import List
from sqlalchemy.orm import Session

from .repository import LocalityRepository
from .schemas import LocalityCreate, LocalityResponse, ReportSellers
from .exceptions import LocalityNotFound, LocalityAlreadyExists, NoRows

class LocalityService:
    """
    Servicio de localidades
    """

    def __init__(self, db: Session):
        self.db = db
        self.repository = LocalityRepository(db)

    def get_all(self) -> List[LocalityResponse]:
        localities = self.repository.get_all()
        if not localities:
            raise NoRows()
        return [LocalityResponse.model_validate(locality) for locality in localities]

    def get(self, locality_id: int) -> LocalityResponse:
        locality = self.repository.get(locality_id)
        if locality is None:
            raise LocalityNotFound()
        return LocalityResponse.model_validate(locality)

    def save(self, locality: LocalityCreate) -> int:
        """Crear localidad; postal_code debe ser único"""
        if self.repository.exists(locality.postal_code):
            raise LocalityAlreadyExists()
        return self.repository.save(locality.model_dump()).id

    def report_sellers(self, locality_id: int = 0) -> List[ReportSellers]:
        rows = self.repository.report_sellers(locality_id)
        if not rows:
            raise NoRows()
        return [
            ReportSellers(locality_id=lid, locality_name=name, postal_code=postal_code, sellers_count=count)
            for lid, name, postal_code, count in rows
        ]
