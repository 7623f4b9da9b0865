# monarch/modules/orders/router.py
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import Optional
from datetime import date

from monarch.config.database import get_db
from .service import OrdersService
from .schemas import OrderCreateRequest, OrderResponse, OrderHistoryResponse, OrderShareResponse

router = APIRouter(prefix="/orders", tags=["Orders"])

# ==================== CAPTURE ====================

@router.post("", response_model=OrderResponse, status_code=201)
async def create_order(order_data: OrderCreateRequest, db: Session = Depends(get_db)):
    """
    Save an order for a shop from a cart of brand id -> quantity

    - Entries with quantity 0 or less are dropped
    - Each line is priced with the brand's current price
    - The rep name is taken from the profile
    """
    service = OrdersService(db)
    return await service.create_order(order_data)

# ==================== HISTORY ====================

@router.get("", response_model=OrderHistoryResponse)
async def get_order_history(
    on: Optional[date] = Query(None, description="Day to list (YYYY-MM-DD), defaults to today"),
    db: Session = Depends(get_db)
):
    """
    Orders of one day, newest first
    """
    service = OrdersService(db)
    return await service.get_orders_by_date(on or date.today())

@router.get("/{order_id}", response_model=OrderResponse)
async def get_order(order_id: int, db: Session = Depends(get_db)):
    service = OrdersService(db)
    return await service.get_order(order_id)

@router.delete("/{order_id}")
async def delete_order(order_id: int, db: Session = Depends(get_db)):
    service = OrdersService(db)
    return await service.delete_order(order_id)

# ==================== SHARING ====================

@router.get("/{order_id}/share", response_model=OrderShareResponse)
async def share_order(order_id: int, db: Session = Depends(get_db)):
    """
    Shareable text for an order and a WhatsApp link carrying it
    """
    service = OrdersService(db)
    return await service.share_order(order_id)
