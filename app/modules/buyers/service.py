# app/modules/buyers/service.py
from typing import List
from sqlalchemy.orm import Session

from .repository import BuyerRepository
from .schemas import BuyerCreate, BuyerUpdate, BuyerResponse
from .exceptions import BuyerNotFound, BuyerAlreadyExists

class BuyerService:
    """
    Servicio de compradores
    """

    def __init__(self, db: Session):
        self.db = db
        self.repository = BuyerRepository(db)

    def get_all(self) -> List[BuyerResponse]:
        return [BuyerResponse.model_validate(b) for b in self.repository.get_all()]

    def get(self, buyer_id: int) -> BuyerResponse:
        buyer = self.repository.get(buyer_id)
        if buyer is None:
            raise BuyerNotFound()
        return BuyerResponse.model_validate(buyer)

    def save(self, buyer: BuyerCreate) -> int:
        if self.repository.exists(buyer.card_number_id):
            raise BuyerAlreadyExists()
        return self.repository.save(buyer.model_dump()).id

    def update(self, current: BuyerResponse, changes: BuyerUpdate) -> BuyerResponse:
        """
        Aplicar cambios sobre un comprador existente.

        Si el card_number_id enviado ya está registrado se rechaza la
        actualización. Solo first_name y last_name no vacíos sobrescriben;
        el número de tarjeta no se modifica.
        """
        if changes.card_number_id and self.repository.exists(changes.card_number_id):
            raise BuyerAlreadyExists()

        updated = current.model_copy()
        if changes.first_name:
            updated.first_name = changes.first_name
        if changes.last_name:
            updated.last_name = changes.last_name

        self.repository.update(current.id, {
            "first_name": updated.first_name,
            "last_name": updated.last_name
        })
        return updated

    def delete(self, buyer_id: int) -> None:
        self.get(buyer_id)
        if not self.repository.delete(buyer_id):
            raise BuyerNotFound()
