# monarch/modules/catalog/__init__.py
"""
Catalog module - what the rep sells and where

- Routes: named groupings of shops visited together
- Shops: the customers on each route
- Brands: sellable products with pack size and unit price

Architecture:
- router.py: FastAPI endpoints
- service.py: business rules and live publishing
- repository.py: data access
- schemas.py: Pydantic request/response models
"""

from .router import router as catalog_router
from .service import CatalogService
from .repository import CatalogRepository

__all__ = [
    "catalog_router",
    "CatalogService",
    "CatalogRepository"
]
