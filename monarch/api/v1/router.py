# monarch/api/v1/router.py
from fastapi import APIRouter

from monarch.config.settings import settings
from monarch.modules.catalog import catalog_router
from monarch.modules.orders import orders_router
from monarch.modules.expenses import expenses_router
from monarch.modules.reports import reports_router
from monarch.modules.profile import profile_router
from monarch.shared.live import COLLECTIONS
from .live import router as live_router

# Main v1 router
api_router = APIRouter(prefix="/api/v1")

# ==================== MODULES ====================

api_router.include_router(catalog_router)
api_router.include_router(orders_router)
api_router.include_router(expenses_router)
api_router.include_router(reports_router)
api_router.include_router(profile_router)
api_router.include_router(live_router)

# ==================== ROOT ENDPOINTS ====================

@api_router.get("/")
async def api_root():
    """Index of the v1 modules"""
    return {
        "message": "Monarch Pro API v1",
        "version": settings.version,
        "status": "active",
        "available_endpoints": {
            "catalog": "/api/v1/catalog",
            "orders": "/api/v1/orders",
            "expenses": "/api/v1/expenses",
            "reports": "/api/v1/reports",
            "profile": "/api/v1/profile",
            "live": "/api/v1/live/{collection}"
        }
    }

@api_router.get("/health")
async def health_check():
    return {
        "status": "healthy",
        "service": settings.app_name,
        "version": settings.version,
        "live_collections": list(COLLECTIONS)
    }
