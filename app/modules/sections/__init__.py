# app/modules/sections/__init__.py
"""
Módulo Sections - Secciones de bodega

- CRUD de secciones (section_number único)
- Reporte de cantidad de productos por sección (suma de lotes)
"""

from .router import router as sections_router
from .service import SectionService
from .repository import SectionRepository

__all__ = [
    "sections_router",
    "SectionService",
    "SectionRepository"
]
