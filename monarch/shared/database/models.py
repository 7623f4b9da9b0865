from sqlalchemy import Column, Integer, String, Date, DateTime, Text, ForeignKey, Numeric
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from monarch.config.database import Base

class TimestampMixin:
    """Automatic creation timestamp"""
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

# ===== CATALOG =====

class Route(Base, TimestampMixin):
    """A named grouping of shops visited together"""
    __tablename__ = "routes"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), unique=True, nullable=False)

    # Relationships
    shops = relationship("Shop", back_populates="route")

class Shop(Base, TimestampMixin):
    __tablename__ = "shops"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False, index=True)
    route_id = Column(Integer, ForeignKey("routes.id", ondelete="SET NULL"), index=True)
    address = Column(Text)
    phone = Column(String(50))

    # Relationships
    route = relationship("Route", back_populates="shops")
    orders = relationship("Order", back_populates="shop")

class Brand(Base, TimestampMixin):
    """A sellable product: name, pack size and unit price"""
    __tablename__ = "brands"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), unique=True, nullable=False)
    size = Column(String(50))
    price = Column(Numeric(10, 2), nullable=False)

# ===== ORDERS =====

class Order(Base, TimestampMixin):
    """
    Items sold to one shop on one date.

    shop_name and rep_name are copied at save time so history survives
    renames and deletions of the shop.
    """
    __tablename__ = "orders"

    id = Column(Integer, primary_key=True, index=True)
    shop_id = Column(Integer, ForeignKey("shops.id", ondelete="SET NULL"), index=True)
    shop_name = Column(String(255), nullable=False)
    rep_name = Column(String(255), nullable=False)
    order_date = Column(Date, nullable=False, index=True)
    total = Column(Numeric(12, 2), nullable=False, default=0)

    # Relationships
    shop = relationship("Shop", back_populates="orders")
    items = relationship(
        "OrderItem",
        back_populates="order",
        cascade="all, delete-orphan",
        order_by="OrderItem.id"
    )

class OrderItem(Base):
    __tablename__ = "order_items"

    id = Column(Integer, primary_key=True, index=True)
    order_id = Column(Integer, ForeignKey("orders.id", ondelete="CASCADE"), nullable=False, index=True)
    brand_id = Column(Integer, ForeignKey("brands.id", ondelete="SET NULL"))
    name = Column(String(255), nullable=False)
    size = Column(String(50))
    quantity = Column(Integer, nullable=False)
    unit_price = Column(Numeric(10, 2), nullable=False)
    subtotal = Column(Numeric(12, 2), nullable=False)

    # Relationships
    order = relationship("Order", back_populates="items")

# ===== EXPENSES =====

class Expense(Base, TimestampMixin):
    __tablename__ = "expenses"

    id = Column(Integer, primary_key=True, index=True)
    amount = Column(Numeric(10, 2), nullable=False)
    concept = Column(String(255), nullable=False, default="General")
    expense_date = Column(Date, nullable=False, index=True)

# ===== SETTINGS =====

class Setting(Base):
    """Key/value profile settings (rep_name, company)"""
    __tablename__ = "settings"

    id = Column(Integer, primary_key=True, index=True)
    key = Column(String(100), unique=True, nullable=False)
    value = Column(Text, nullable=False)
