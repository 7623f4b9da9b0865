# monarch/modules/orders/share.py
from decimal import Decimal
from typing import Any, Iterable, Mapping, Union
from urllib.parse import quote

Number = Union[int, float, Decimal]


def format_amount(value: Number) -> str:
    """
    Whole amounts without decimals (1200), the rest with two (12.50)
    """
    amount = Decimal(str(value))
    if amount == amount.to_integral_value():
        return str(int(amount))
    return f"{amount:.2f}"


def format_order_message(
    company: str,
    rep_name: str,
    shop_name: str,
    items: Iterable[Mapping[str, Any]],
    total: Number,
    currency: str = "Rs."
) -> str:
    lines = [
        f"*{company}*",
        f"*Rep:* {rep_name}",
        f"*Shop:* {shop_name}",
        "---"
    ]
    for item in items:
        lines.append(f"{item['name']} x {item['quantity']} = {format_amount(item['subtotal'])}")
    lines.append("---")
    lines.append(f"*Total: {currency}{format_amount(total)}*")

    return "\n".join(lines)


def share_url(text: str, base_url: str = "https://wa.me/") -> str:
    return f"{base_url}?text={quote(text, safe='')}"
