from pydantic import BaseModel, Field, ConfigDict
from typing import List, Optional, Dict
from datetime import datetime, date

# ==================== BASE ====================

class OrdersBaseModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)

# ==================== REQUEST SCHEMAS ====================

class OrderCreateRequest(BaseModel):
    shop_id: Optional[int] = Field(None, description="Shop the order is for")
    items: Dict[int, int] = Field(
        default_factory=dict,
        description="Cart: brand id -> quantity. Quantities of 0 or less are ignored"
    )
    order_date: Optional[date] = Field(None, description="Defaults to today")

# ==================== RESPONSE SCHEMAS ====================

class OrderItemResponse(OrdersBaseModel):
    id: int
    brand_id: Optional[int]
    name: str
    size: Optional[str]
    quantity: int
    unit_price: float
    subtotal: float

class OrderResponse(OrdersBaseModel):
    id: int
    shop_id: Optional[int]
    shop_name: str
    rep_name: str
    order_date: date
    total: float
    created_at: Optional[datetime]
    items: List[OrderItemResponse]

class OrderHistoryResponse(BaseModel):
    success: bool
    date: date
    orders: List[OrderResponse]
    count: int
    total_amount: float

class OrderShareResponse(BaseModel):
    order_id: int
    text: str
    url: str
