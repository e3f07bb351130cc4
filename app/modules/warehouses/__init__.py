# app/modules/warehouses/__init__.py
"""
Módulo Warehouses - Bodegas

Errores con el sobre {"message": "..."}; los fallos de lectura del cuerpo
o del id se reportan como 500.
"""

from .router import router as warehouses_router
from .service import WarehouseService
from .repository import WarehouseRepository

__all__ = [
    "warehouses_router",
    "WarehouseService",
    "WarehouseRepository"
]
