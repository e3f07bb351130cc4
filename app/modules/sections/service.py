# app/modules/sections/service.py
from typing import List
from sqlalchemy.orm import Session

from .repository import SectionRepository
from .schemas import SectionCreate, SectionResponse, SectionProductCount
from .exceptions import SectionNotFound, DuplicateSectionNumber

class SectionService:
    """
    Servicio de secciones de bodega
    """

    def __init__(self, db: Session):
        self.db = db
        self.repository = SectionRepository(db)

    def get_all(self) -> List[SectionResponse]:
        return [SectionResponse.model_validate(s) for s in self.repository.get_all()]

    def get(self, section_id: int) -> SectionResponse:
        section = self.repository.get(section_id)
        if section is None:
            raise SectionNotFound()
        return SectionResponse.model_validate(section)

    def save(self, section: SectionCreate) -> int:
        if self.repository.exists(section.section_number):
            raise DuplicateSectionNumber()
        return self.repository.save(section.model_dump()).id

    def update(self, section_id: int, section: SectionCreate) -> SectionResponse:
        current = self.get(section_id)
        if current.section_number != section.section_number and self.repository.exists(section.section_number):
            raise DuplicateSectionNumber()
        self.repository.update(section_id, section.model_dump())
        return SectionResponse(id=section_id, **section.model_dump())

    def delete(self, section_id: int) -> None:
        if not self.repository.delete(section_id):
            raise SectionNotFound()

    def product_count(self, section_id: int = 0) -> List[SectionProductCount]:
        """
        Cantidad de productos por sección.
        Con section_id distinto de cero la sección debe existir.
        """
        rows = self.repository.product_count(section_id)
        if section_id != 0 and not rows:
            raise SectionNotFound()
        return [
            SectionProductCount(id=sid, section_number=number, product_count=int(count))
            for sid, number, count in rows
        ]
