# app/modules/purchase_orders/__init__.py
"""
Módulo Purchase Orders - Órdenes de compra y reporte por comprador

Errores con el sobre {"error": "..."}.
"""

from .router import router as purchase_orders_router
from .service import PurchaseOrderService
from .repository import PurchaseOrderRepository

__all__ = [
    "purchase_orders_router",
    "PurchaseOrderService",
    "PurchaseOrderRepository"
]
