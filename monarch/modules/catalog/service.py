# monarch/modules/catalog/service.py
import logging
from typing import List, Optional, Dict, Any
from fastapi import HTTPException
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError

from monarch.modules.orders.service import OrdersService
from monarch.shared.live import publish_collection, to_records
from .repository import CatalogRepository
from .schemas import (
    RouteCreateRequest, ShopCreateRequest, BrandCreateRequest, BrandUpdateRequest,
    RouteResponse, ShopResponse, BrandResponse
)

logger = logging.getLogger(__name__)

class CatalogService:
    """
    Routes, shops and brands the rep sells against
    """

    def __init__(self, db: Session):
        self.db = db
        self.repository = CatalogRepository(db)

    # ==================== ROUTES ====================

    async def list_routes(self) -> List[RouteResponse]:
        return [RouteResponse.model_validate(r) for r in self.repository.get_routes()]

    async def create_route(self, route_data: RouteCreateRequest) -> RouteResponse:
        if self.repository.get_route_by_name(route_data.name):
            raise HTTPException(status_code=409, detail=f"Route '{route_data.name}' already exists")

        try:
            route = self.repository.create_route(route_data.name)
        except SQLAlchemyError as e:
            self.db.rollback()
            raise HTTPException(status_code=500, detail=f"Error saving route: {str(e)}")

        logger.info(f"Route created: {route.id} {route.name}")
        self._publish_routes()
        return RouteResponse.model_validate(route)

    async def delete_route(self, route_id: int) -> Dict[str, Any]:
        route = self.repository.get_route_by_id(route_id)
        if not route:
            raise HTTPException(status_code=404, detail="Route not found")

        try:
            self.repository.delete_route(route)
        except SQLAlchemyError as e:
            self.db.rollback()
            raise HTTPException(status_code=500, detail=f"Error deleting route: {str(e)}")

        logger.info(f"Route deleted: {route_id}")

        self._publish_routes()
        self._publish_shops()
        return {"success": True, "deleted_id": route_id}

    # ==================== SHOPS ====================

    async def list_shops(self, route_id: Optional[int] = None) -> List[ShopResponse]:
        return [ShopResponse.model_validate(s) for s in self.repository.get_shops(route_id)]

    async def create_shop(self, shop_data: ShopCreateRequest) -> ShopResponse:
        if shop_data.route_id is not None and not self.repository.get_route_by_id(shop_data.route_id):
            raise HTTPException(status_code=404, detail="Route not found")

        try:
            shop = self.repository.create_shop(
                name=shop_data.name,
                route_id=shop_data.route_id,
                address=shop_data.address,
                phone=shop_data.phone
            )
        except SQLAlchemyError as e:
            self.db.rollback()
            raise HTTPException(status_code=500, detail=f"Error saving shop: {str(e)}")

        logger.info(f"Shop created: {shop.id} {shop.name}")
        self._publish_shops()
        return ShopResponse.model_validate(shop)

    async def delete_shop(self, shop_id: int) -> Dict[str, Any]:
        """
        Delete a shop; its orders lose the shop_id, so orders are republished too
        """
        shop = self.repository.get_shop_by_id(shop_id)
        if not shop:
            raise HTTPException(status_code=404, detail="Shop not found")

        try:
            self.repository.delete_shop(shop)
        except SQLAlchemyError as e:
            self.db.rollback()
            raise HTTPException(status_code=500, detail=f"Error deleting shop: {str(e)}")

        logger.info(f"Shop deleted: {shop_id}")

        self._publish_shops()
        OrdersService(self.db).publish_orders()
        return {"success": True, "deleted_id": shop_id}

    # ==================== BRANDS ====================

    async def list_brands(self) -> List[BrandResponse]:
        return [BrandResponse.model_validate(b) for b in self.repository.get_brands()]

    async def create_brand(self, brand_data: BrandCreateRequest) -> BrandResponse:
        if self.repository.get_brand_by_name(brand_data.name):
            raise HTTPException(status_code=409, detail=f"Brand '{brand_data.name}' already exists")

        try:
            brand = self.repository.create_brand(
                name=brand_data.name,
                size=brand_data.size,
                price=brand_data.price
            )
        except SQLAlchemyError as e:
            self.db.rollback()
            raise HTTPException(status_code=500, detail=f"Error saving brand: {str(e)}")

        logger.info(f"Brand created: {brand.id} {brand.name} @ {brand.price}")
        self._publish_brands()
        return BrandResponse.model_validate(brand)

    async def update_brand(self, brand_id: int, brand_data: BrandUpdateRequest) -> BrandResponse:
        brand = self.repository.get_brand_by_id(brand_id)
        if not brand:
            raise HTTPException(status_code=404, detail="Brand not found")

        changes = brand_data.model_dump(exclude_unset=True, exclude_none=True)
        if "name" in changes and changes["name"] != brand.name:
            if self.repository.get_brand_by_name(changes["name"]):
                raise HTTPException(status_code=409, detail=f"Brand '{changes['name']}' already exists")

        try:
            brand = self.repository.update_brand(brand, changes)
        except SQLAlchemyError as e:
            self.db.rollback()
            raise HTTPException(status_code=500, detail=f"Error updating brand: {str(e)}")

        self._publish_brands()
        return BrandResponse.model_validate(brand)

    async def delete_brand(self, brand_id: int) -> Dict[str, Any]:
        """
        Delete a brand; order lines lose the brand_id, so orders are republished too
        """
        brand = self.repository.get_brand_by_id(brand_id)
        if not brand:
            raise HTTPException(status_code=404, detail="Brand not found")

        try:
            self.repository.delete_brand(brand)
        except SQLAlchemyError as e:
            self.db.rollback()
            raise HTTPException(status_code=500, detail=f"Error deleting brand: {str(e)}")

        logger.info(f"Brand deleted: {brand_id}")

        self._publish_brands()
        OrdersService(self.db).publish_orders()
        return {"success": True, "deleted_id": brand_id}

    # ==================== LIVE SNAPSHOTS ====================

    def routes_snapshot(self) -> List[Dict[str, Any]]:
        return to_records(self.repository.get_routes(), RouteResponse)

    def shops_snapshot(self) -> List[Dict[str, Any]]:
        return to_records(self.repository.get_shops(), ShopResponse)

    def brands_snapshot(self) -> List[Dict[str, Any]]:
        return to_records(self.repository.get_brands(), BrandResponse)

    def _publish_routes(self):
        publish_collection("routes", self.repository.get_routes(), RouteResponse)

    def _publish_shops(self):
        publish_collection("shops", self.repository.get_shops(), ShopResponse)

    def _publish_brands(self):
        publish_collection("brands", self.repository.get_brands(), BrandResponse)
