from pydantic import BaseModel, Field, ConfigDict, field_validator
from typing import Optional
from datetime import datetime
from decimal import Decimal

# ==================== BASE ====================

class CatalogBaseModel(BaseModel):
    """
    Base for every catalog response, read straight from ORM objects
    """
    model_config = ConfigDict(from_attributes=True)

def _strip_required(v: str) -> str:
    if not v or not v.strip():
        raise ValueError("This field cannot be empty")
    return v.strip()

# ==================== REQUEST SCHEMAS ====================

class RouteCreateRequest(BaseModel):
    name: str = Field(..., max_length=255, description="Route name")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str):
        return _strip_required(v)

class ShopCreateRequest(BaseModel):
    name: str = Field(..., max_length=255, description="Shop name")
    route_id: Optional[int] = Field(None, description="Route the shop belongs to")
    address: Optional[str] = Field(None, description="Street address")
    phone: Optional[str] = Field(None, max_length=50, description="Contact number")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str):
        return _strip_required(v)

class BrandCreateRequest(BaseModel):
    name: str = Field(..., max_length=255, description="Brand / product name")
    size: Optional[str] = Field(None, max_length=50, description="Pack size, e.g. 500ml")
    price: Decimal = Field(..., gt=0, description="Unit price")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str):
        return _strip_required(v)

class BrandUpdateRequest(BaseModel):
    name: Optional[str] = Field(None, max_length=255)
    size: Optional[str] = Field(None, max_length=50)
    price: Optional[Decimal] = Field(None, gt=0)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: Optional[str]):
        if v is None:
            return v
        return _strip_required(v)

# ==================== RESPONSE SCHEMAS ====================

class RouteResponse(CatalogBaseModel):
    id: int
    name: str
    created_at: Optional[datetime]

class ShopResponse(CatalogBaseModel):
    id: int
    name: str
    route_id: Optional[int]
    address: Optional[str]
    phone: Optional[str]
    created_at: Optional[datetime]

class BrandResponse(CatalogBaseModel):
    id: int
    name: str
    size: Optional[str]
    price: float
    created_at: Optional[datetime]
