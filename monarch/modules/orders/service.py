# monarch/modules/orders/service.py
import logging
from datetime import date
from decimal import Decimal
from typing import List, Optional, Dict, Any
from fastapi import HTTPException
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError

from monarch.config.settings import settings
from monarch.modules.profile.service import ProfileService
from monarch.shared.live import publish_collection, to_records
from .cart import build_order_items, EmptyCartError, UnknownProductError
from .repository import OrdersRepository
from .schemas import OrderCreateRequest, OrderResponse, OrderHistoryResponse, OrderShareResponse
from .share import format_order_message, share_url

logger = logging.getLogger(__name__)

class OrdersService:
    """
    Order capture from a cart, order history and sharing
    """

    def __init__(self, db: Session):
        self.db = db
        self.repository = OrdersRepository(db)
        self.profile = ProfileService(db)

    # ==================== CAPTURE ====================

    async def create_order(
        self,
        order_data: OrderCreateRequest,
        today: Optional[date] = None
    ) -> OrderResponse:
        """
        Price the cart against current brand prices and save the order
        """
        if order_data.shop_id is None:
            raise HTTPException(status_code=400, detail="Select a shop")

        shop = self.repository.get_shop_by_id(order_data.shop_id)
        if not shop:
            raise HTTPException(status_code=404, detail="Shop not found")

        brands = self.repository.get_brands_by_ids(
            brand_id for brand_id, quantity in order_data.items.items() if quantity > 0
        )
        try:
            lines, total = build_order_items(order_data.items, brands)
        except EmptyCartError as e:
            raise HTTPException(status_code=400, detail=str(e))
        except UnknownProductError as e:
            raise HTTPException(status_code=404, detail=str(e))

        rep_name = self.profile.get_profile().rep_name
        order_date = order_data.order_date or today or date.today()

        try:
            order = self.repository.create_order(
                shop_id=shop.id,
                shop_name=shop.name,
                rep_name=rep_name,
                order_date=order_date,
                total=total,
                lines=lines
            )
        except SQLAlchemyError as e:
            self.db.rollback()
            raise HTTPException(status_code=500, detail=f"Error saving order: {str(e)}")

        logger.info(f"Order {order.id} saved: {shop.name}, {len(lines)} lines, total {total}")
        self.publish_orders()
        return OrderResponse.model_validate(order)

    # ==================== HISTORY ====================

    async def get_order(self, order_id: int) -> OrderResponse:
        order = self.repository.get_order_by_id(order_id)
        if not order:
            raise HTTPException(status_code=404, detail="Order not found")
        return OrderResponse.model_validate(order)

    async def get_orders_by_date(self, order_date: date) -> OrderHistoryResponse:
        rows = self.repository.get_orders_by_date(order_date)
        # Numeric columns come back as Decimal; sum before converting to float
        total_amount = sum((Decimal(str(o.total or 0)) for o in rows), Decimal("0"))

        return OrderHistoryResponse(
            success=True,
            date=order_date,
            orders=[OrderResponse.model_validate(o) for o in rows],
            count=len(rows),
            total_amount=float(total_amount)
        )

    async def delete_order(self, order_id: int) -> Dict[str, Any]:
        order = self.repository.get_order_by_id(order_id)
        if not order:
            raise HTTPException(status_code=404, detail="Order not found")

        try:
            self.repository.delete_order(order)
        except SQLAlchemyError as e:
            self.db.rollback()
            raise HTTPException(status_code=500, detail=f"Error deleting order: {str(e)}")

        logger.info(f"Order deleted: {order_id}")

        self.publish_orders()
        return {"success": True, "deleted_id": order_id}

    # ==================== SHARING ====================

    async def share_order(self, order_id: int) -> OrderShareResponse:
        order = await self.get_order(order_id)
        profile = self.profile.get_profile()

        text = format_order_message(
            company=profile.company,
            rep_name=profile.rep_name,
            shop_name=order.shop_name,
            items=[item.model_dump() for item in order.items],
            total=order.total,
            currency=settings.currency_label
        )

        return OrderShareResponse(
            order_id=order.id,
            text=text,
            url=share_url(text, settings.share_base_url)
        )

    # ==================== LIVE SNAPSHOTS ====================

    def orders_snapshot(self) -> List[Dict[str, Any]]:
        return to_records(self.repository.get_orders(), OrderResponse)

    def publish_orders(self):
        publish_collection("orders", self.repository.get_orders(), OrderResponse)
