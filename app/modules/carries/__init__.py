# app/modules/carries/__init__.py
"""
Módulo Carries - Transportistas y su reporte por localidad

El locality_id de un transportista es el código postal de la localidad.
"""

from .router import router as carries_router
from .service import CarryService
from .repository import CarryRepository

__all__ = [
    "carries_router",
    "CarryService",
    "CarryRepository"
]
