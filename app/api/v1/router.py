# app/api/v1/router.py
from fastapi import APIRouter

from app.config.settings import settings

# ✅ IMPORTAR MÓDULOS
from app.modules.products import products_router
from app.modules.product_records import product_records_router
from app.modules.sections import sections_router
from app.modules.product_batches import product_batches_router
from app.modules.buyers import buyers_router
from app.modules.purchase_orders import purchase_orders_router
from app.modules.sellers import sellers_router
from app.modules.localities import localities_router
from app.modules.carries import carries_router
from app.modules.employees import employees_router
from app.modules.inbound_orders import inbound_orders_router
from app.modules.warehouses import warehouses_router

# Crear router principal de la API v1
api_router = APIRouter()

# ==================== REPORTES ====================
# Se registran antes que las entidades porque comparten prefijo
# con rutas /{id} (ej. /products/reportRecords y /products/{product_id})

api_router.include_router(product_records_router)
api_router.include_router(purchase_orders_router)
api_router.include_router(carries_router)
api_router.include_router(inbound_orders_router)

# ==================== ENTIDADES ====================

api_router.include_router(products_router)
api_router.include_router(sections_router)
api_router.include_router(product_batches_router)
api_router.include_router(buyers_router)
api_router.include_router(sellers_router)
api_router.include_router(localities_router)
api_router.include_router(employees_router)
api_router.include_router(warehouses_router)

# ==================== ENDPOINTS RAÍZ ====================

MODULES = {
    "products": "/api/v1/products/",
    "product_records": "/api/v1/productRecords",
    "sections": "/api/v1/sections/",
    "product_batches": "/api/v1/productBatches/",
    "buyers": "/api/v1/buyers",
    "purchase_orders": "/api/v1/purchaseOrders",
    "sellers": "/api/v1/seller",
    "localities": "/api/v1/localities/",
    "carries": "/api/v1/carries",
    "employees": "/api/v1/employees",
    "inbound_orders": "/api/v1/inboundOrders",
    "warehouses": "/api/v1/warehouses/",
}

@api_router.get("/")
async def api_root():
    """Root endpoint de la API"""
    return {
        "message": f"{settings.app_name} v1",
        "version": settings.version,
        "status": "active",
        "docs": "/docs",
        "available_endpoints": MODULES
    }

@api_router.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "service": settings.app_name,
        "version": settings.version,
        "architecture": "modular_monolith",
        "modules": sorted(MODULES)
    }
