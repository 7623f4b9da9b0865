# monarch/modules/reports/__init__.py
"""
Reports module - derived sales figures, never persisted

- Daily summary: total, units and revenue per brand, expenses, net
- Monthly summary with top selling brand
- Dashboard combining both

The arithmetic lives in aggregation.py and works on plain records.
"""

from .router import router as reports_router
from .service import ReportsService

__all__ = [
    "reports_router",
    "ReportsService"
]
