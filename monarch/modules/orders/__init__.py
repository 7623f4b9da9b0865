# monarch/modules/orders/__init__.py
"""
Orders module - capture and history of shop orders

- Cart to priced order lines (cart.py)
- Order history per day, deletion
- Shareable order text and WhatsApp link (share.py)

Architecture:
- router.py: FastAPI endpoints
- service.py: business rules and live publishing
- repository.py: data access
- schemas.py: Pydantic request/response models
"""

from .router import router as orders_router
from .service import OrdersService
from .repository import OrdersRepository

__all__ = [
    "orders_router",
    "OrdersService",
    "OrdersRepository"
]
