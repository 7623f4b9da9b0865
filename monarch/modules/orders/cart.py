# monarch/modules/orders/cart.py
"""
Turn a cart (brand id -> requested quantity) into priced order lines.
"""
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, List, Mapping, Optional, Tuple


class CartError(ValueError):
    pass


class EmptyCartError(CartError):
    def __init__(self):
        super().__init__("Add at least one item")


class UnknownProductError(CartError):
    def __init__(self, brand_id: int):
        self.brand_id = brand_id
        super().__init__(f"Brand {brand_id} not found")


@dataclass
class OrderLine:
    brand_id: int
    name: str
    size: Optional[str]
    quantity: int
    unit_price: Decimal
    subtotal: Decimal


def build_order_items(
    cart: Mapping[int, int],
    brands: Mapping[int, Any]
) -> Tuple[List[OrderLine], Decimal]:
    """
    Price every cart entry with a positive quantity.

    ``brands`` maps brand id to anything with ``name``, ``size`` and ``price``.
    Lines keep the cart's order. Raises UnknownProductError for an id missing
    from ``brands`` and EmptyCartError when nothing is left to sell.
    """
    lines = []
    for brand_id, quantity in cart.items():
        if quantity <= 0:
            continue

        brand = brands.get(brand_id)
        if brand is None:
            raise UnknownProductError(brand_id)

        unit_price = Decimal(str(brand.price))
        lines.append(OrderLine(
            brand_id=brand_id,
            name=brand.name,
            size=brand.size,
            quantity=quantity,
            unit_price=unit_price,
            subtotal=unit_price * quantity
        ))

    if not lines:
        raise EmptyCartError()

    total = sum((line.subtotal for line in lines), Decimal("0"))
    return lines, total
