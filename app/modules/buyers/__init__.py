# app/modules/buyers/__init__.py
"""
Módulo Buyers - Compradores

Errores con el sobre {"error": "..."}.
"""

from .router import router as buyers_router
from .service import BuyerService
from .repository import BuyerRepository

__all__ = [
    "buyers_router",
    "BuyerService",
    "BuyerRepository"
]
