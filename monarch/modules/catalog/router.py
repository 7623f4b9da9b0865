# monarch/modules/catalog/router.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import Optional, List

from monarch.config.database import get_db
from .service import CatalogService
from .schemas import (
    RouteCreateRequest, RouteResponse,
    ShopCreateRequest, ShopResponse,
    BrandCreateRequest, BrandUpdateRequest, BrandResponse
)

router = APIRouter(prefix="/catalog", tags=["Catalog"])

# ==================== ROUTES ====================

@router.get("/routes", response_model=List[RouteResponse])
async def list_routes(db: Session = Depends(get_db)):
    """
    Routes in the order they were created
    """
    service = CatalogService(db)
    return await service.list_routes()

@router.post("/routes", response_model=RouteResponse, status_code=201)
async def create_route(route_data: RouteCreateRequest, db: Session = Depends(get_db)):
    service = CatalogService(db)
    return await service.create_route(route_data)

@router.delete("/routes/{route_id}")
async def delete_route(route_id: int, db: Session = Depends(get_db)):
    """
    Delete a route. Its shops are kept without a route.
    """
    service = CatalogService(db)
    return await service.delete_route(route_id)

# ==================== SHOPS ====================

@router.get("/shops", response_model=List[ShopResponse])
async def list_shops(route_id: Optional[int] = None, db: Session = Depends(get_db)):
    """
    All shops, or only the shops of one route
    """
    service = CatalogService(db)
    return await service.list_shops(route_id)

@router.post("/shops", response_model=ShopResponse, status_code=201)
async def create_shop(shop_data: ShopCreateRequest, db: Session = Depends(get_db)):
    service = CatalogService(db)
    return await service.create_shop(shop_data)

@router.delete("/shops/{shop_id}")
async def delete_shop(shop_id: int, db: Session = Depends(get_db)):
    service = CatalogService(db)
    return await service.delete_shop(shop_id)

# ==================== BRANDS ====================

@router.get("/brands", response_model=List[BrandResponse])
async def list_brands(db: Session = Depends(get_db)):
    service = CatalogService(db)
    return await service.list_brands()

@router.post("/brands", response_model=BrandResponse, status_code=201)
async def create_brand(brand_data: BrandCreateRequest, db: Session = Depends(get_db)):
    service = CatalogService(db)
    return await service.create_brand(brand_data)

@router.patch("/brands/{brand_id}", response_model=BrandResponse)
async def update_brand(brand_id: int, brand_data: BrandUpdateRequest, db: Session = Depends(get_db)):
    """
    Change a brand's name, size or price. Past orders keep the price they were sold at.
    """
    service = CatalogService(db)
    return await service.update_brand(brand_id, brand_data)

@router.delete("/brands/{brand_id}")
async def delete_brand(brand_id: int, db: Session = Depends(get_db)):
    service = CatalogService(db)
    return await service.delete_brand(brand_id)
