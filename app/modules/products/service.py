# app/modules/products/service.py
from typing import List
from sqlalchemy.orm import Session

from .repository import ProductRepository
from .schemas import ProductCreate, ProductResponse
from .exceptions import ProductNotFound, ProductCodeExists

class ProductService:
    """
    Servicio del catálogo de productos
    """

    def __init__(self, db: Session):
        self.db = db
        self.repository = ProductRepository(db)

    def get_all(self) -> List[ProductResponse]:
        return [ProductResponse.model_validate(p) for p in self.repository.get_all()]

    def get(self, product_id: int) -> ProductResponse:
        product = self.repository.get(product_id)
        if product is None:
            raise ProductNotFound()
        return ProductResponse.model_validate(product)

    def save(self, product: ProductCreate) -> int:
        """Crear producto; product_code debe ser único"""
        if self.repository.exists(product.product_code):
            raise ProductCodeExists()
        return self.repository.save(product.model_dump()).id

    def update(self, product_id: int, product: ProductCreate) -> ProductResponse:
        """
        Actualizar producto existente.
        Solo se valida la unicidad del código cuando este cambia.
        """
        current = self.get(product_id)
        if current.product_code != product.product_code and self.repository.exists(product.product_code):
            raise ProductCodeExists()
        self.repository.update(product_id, product.model_dump())
        return ProductResponse(id=product_id, **product.model_dump())

    def delete(self, product_id: int) -> None:
        self.get(product_id)
        if not self.repository.delete(product_id):
            raise ProductNotFound()
