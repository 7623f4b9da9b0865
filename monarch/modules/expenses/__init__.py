from .router import router as expenses_router
from .service import ExpensesService
from .repository import ExpensesRepository

__all__ = [
    "expenses_router",
    "ExpensesService",
    "ExpensesRepository"
]
