# app/modules/localities/__init__.py
"""
Módulo Localities - Localidades y reporte de vendedores por localidad

Errores con el sobre {"code": "...", "message": "..."}.
"""

from .router import router as localities_router
from .service import LocalityService
from .repository import LocalityRepository

__all__ = [
    "localities_router",
    "LocalityService",
    "LocalityRepository"
]
