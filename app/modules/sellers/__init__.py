# app/modules/sellers/__init__.py
"""
Módulo Sellers - Vendedores asociados a una localidad

Errores con el sobre {"code": "...", "message": "..."}.
"""

from .router import router as sellers_router
from .service import SellerService
from .repository import SellerRepository

__all__ = [
    "sellers_router",
    "SellerService",
    "SellerRepository"
]
