# monarch/modules/orders/repository.py
from datetime import date
from typing import Dict, List, Optional, Iterable
from sqlalchemy.orm import Session, selectinload
from sqlalchemy import desc

from monarch.shared.database.models import Order, OrderItem, Shop, Brand

class OrdersRepository:
    """
    Data access for orders and their line items
    """

    def __init__(self, db: Session):
        self.db = db

    def get_shop_by_id(self, shop_id: int) -> Optional[Shop]:
        return self.db.query(Shop).filter(Shop.id == shop_id).first()

    def get_brands_by_ids(self, brand_ids: Iterable[int]) -> Dict[int, Brand]:
        brands = self.db.query(Brand).filter(Brand.id.in_(list(brand_ids))).all()
        return {brand.id: brand for brand in brands}

    def create_order(
        self,
        shop_id: int,
        shop_name: str,
        rep_name: str,
        order_date: date,
        total,
        lines
    ) -> Order:
        """
        Save an order and its lines in a single commit
        """
        order = Order(
            shop_id=shop_id,
            shop_name=shop_name,
            rep_name=rep_name,
            order_date=order_date,
            total=total
        )
        for line in lines:
            order.items.append(OrderItem(
                brand_id=line.brand_id,
                name=line.name,
                size=line.size,
                quantity=line.quantity,
                unit_price=line.unit_price,
                subtotal=line.subtotal
            ))

        self.db.add(order)
        self.db.commit()
        self.db.refresh(order)

        return order

    def get_order_by_id(self, order_id: int) -> Optional[Order]:
        return self.db.query(Order).options(
            selectinload(Order.items)
        ).filter(Order.id == order_id).first()

    def get_orders(self) -> List[Order]:
        return self.db.query(Order).options(
            selectinload(Order.items)
        ).order_by(Order.id).all()

    def get_orders_by_date(self, order_date: date) -> List[Order]:
        """
        Orders of one day, newest first
        """
        return self.db.query(Order).options(
            selectinload(Order.items)
        ).filter(Order.order_date == order_date).order_by(desc(Order.id)).all()

    def delete_order(self, order: Order):
        self.db.delete(order)
        self.db.commit()
