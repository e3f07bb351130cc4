# app/modules/sellers/service.py
from typing import List
from sqlalchemy.orm import Session

from .repository import SellerRepository
from .schemas import SellerCreate, SellerResponse
from .exceptions import SellerNotFound, SellerAlreadyExists

class SellerService:

    def __init__(self, db: Session):
        self.db = db
        self.repository = SellerRepository(db)

    def get_all(self) -> List[SellerResponse]:
        """Listar vendedores; lista vacía se reporta como no encontrado"""
        sellers = self.repository.get_all()
        if not sellers:
            raise SellerNotFound()
        return [SellerResponse.model_validate(s) for s in sellers]

    def get(self, seller_id: int) -> SellerResponse:
        seller = self.repository.get(seller_id)
        if seller is None:
            raise SellerNotFound()
        return SellerResponse.model_validate(seller)

    def save(self, seller: SellerCreate) -> int:
        if self.repository.exists(seller.cid):
            raise SellerAlreadyExists()
        return self.repository.save(seller.model_dump()).id

    def update(self, seller_id: int, seller: SellerCreate) -> SellerResponse:
        if not self.repository.update(seller_id, seller.model_dump()):
            raise SellerNotFound()
        return SellerResponse(id=seller_id, **seller.model_dump())

    def delete(self, seller_id: int) -> None:
        self.get(seller_id)
        if not self.repository.delete(seller_id):
            raise SellerNotFound()

    def locality_exists(self, locality_id: int) -> bool:
        return self.repository.locality_exists(locality_id)
