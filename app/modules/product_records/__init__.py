# app/modules/product_records/__init__.py
"""
Módulo Product Records - Historial de precios de productos

- POST /productRecords: registrar precios de compra y venta de un producto
- GET /products/reportRecords: cantidad de registros por producto
"""

from .router import router as product_records_router
from .service import ProductRecordService
from .repository import ProductRecordRepository

__all__ = [
    "product_records_router",
    "ProductRecordService",
    "ProductRecordRepository"
]
