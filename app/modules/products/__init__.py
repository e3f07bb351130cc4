# app/modules/products/__init__.py
"""
Módulo Products - Catálogo de productos

Operaciones:
- Listar, consultar, crear, actualizar y eliminar productos
- Ping de disponibilidad de la API

Arquitectura:
- router.py: Endpoints FastAPI
- service.py: Lógica de negocio (unicidad de product_code)
- repository.py: Acceso a datos
- schemas.py: Modelos Pydantic de request/response
- exceptions.py: Errores sentinela del módulo
"""

from .router import router as products_router
from .service import ProductService
from .repository import ProductRepository

__all__ = [
    "products_router",
    "ProductService",
    "ProductRepository"
]
