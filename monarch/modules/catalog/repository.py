# monarch/modules/catalog/repository.py
from typing import List, Optional
from sqlalchemy.orm import Session

from monarch.shared.database.models import Route, Shop, Brand, Order, OrderItem

class CatalogRepository:
    """
    Data access for routes, shops and brands
    """

    def __init__(self, db: Session):
        self.db = db

    # ==================== ROUTES ====================

    def get_routes(self) -> List[Route]:
        return self.db.query(Route).order_by(Route.id).all()

    def get_route_by_id(self, route_id: int) -> Optional[Route]:
        return self.db.query(Route).filter(Route.id == route_id).first()

    def get_route_by_name(self, name: str) -> Optional[Route]:
        return self.db.query(Route).filter(Route.name == name).first()

    def create_route(self, name: str) -> Route:
        route = Route(name=name)

        self.db.add(route)
        self.db.commit()
        self.db.refresh(route)

        return route

    def delete_route(self, route: Route):
        """
        Delete a route; its shops stay, unassigned
        """
        self.db.query(Shop).filter(Shop.route_id == route.id).update(
            {Shop.route_id: None}, synchronize_session=False
        )
        self.db.delete(route)
        self.db.commit()

    # ==================== SHOPS ====================

    def get_shops(self, route_id: Optional[int] = None) -> List[Shop]:
        query = self.db.query(Shop)
        if route_id is not None:
            query = query.filter(Shop.route_id == route_id)
        return query.order_by(Shop.id).all()

    def get_shop_by_id(self, shop_id: int) -> Optional[Shop]:
        return self.db.query(Shop).filter(Shop.id == shop_id).first()

    def create_shop(
        self,
        name: str,
        route_id: Optional[int],
        address: Optional[str],
        phone: Optional[str]
    ) -> Shop:
        shop = Shop(name=name, route_id=route_id, address=address, phone=phone)

        self.db.add(shop)
        self.db.commit()
        self.db.refresh(shop)

        return shop

    def delete_shop(self, shop: Shop):
        """
        Delete a shop; past orders keep their copied shop name
        """
        self.db.query(Order).filter(Order.shop_id == shop.id).update(
            {Order.shop_id: None}, synchronize_session=False
        )
        self.db.delete(shop)
        self.db.commit()

    # ==================== BRANDS ====================

    def get_brands(self) -> List[Brand]:
        return self.db.query(Brand).order_by(Brand.id).all()

    def get_brand_by_id(self, brand_id: int) -> Optional[Brand]:
        return self.db.query(Brand).filter(Brand.id == brand_id).first()

    def get_brand_by_name(self, name: str) -> Optional[Brand]:
        return self.db.query(Brand).filter(Brand.name == name).first()

    def create_brand(self, name: str, size: Optional[str], price) -> Brand:
        brand = Brand(name=name, size=size, price=price)

        self.db.add(brand)
        self.db.commit()
        self.db.refresh(brand)

        return brand

    def update_brand(self, brand: Brand, changes: dict) -> Brand:
        for field, value in changes.items():
            setattr(brand, field, value)

        self.db.commit()
        self.db.refresh(brand)

        return brand

    def delete_brand(self, brand: Brand):
        self.db.query(OrderItem).filter(OrderItem.brand_id == brand.id).update(
            {OrderItem.brand_id: None}, synchronize_session=False
        )
        self.db.delete(brand)
        self.db.commit()
