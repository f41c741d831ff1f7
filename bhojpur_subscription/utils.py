from __future__ import annotations
from decimal import Decimal, InvalidOperation
from typing import List, Optional, Tuple, Union
from urllib.parse import quote

# Default page for list endpoints
DEFAULT_COUNT = 10
DEFAULT_OFFSET = 0


def format_amount(amount: Union[Decimal, int, float, str]) -> str:
    """
    Render an amount (minor units, e.g. paisa) for a form field.

    Integral values lose their fractional part ("300", not "300.0");
    other values keep the shortest exact decimal form.
    """
    try:
        dec = Decimal(str(amount).strip()) if not isinstance(amount, Decimal) else amount
    except InvalidOperation as e:
        raise ValueError(f"Invalid amount: {amount!r}") from e
    if not dec.is_finite():
        raise ValueError(f"Invalid amount: {amount!r}")
    if dec == dec.to_integral_value():
        return str(int(dec))
    return format(dec.normalize(), "f")


def escape_id(value: str) -> str:
    """URL-escape an identifier for use as a single path segment."""
    if not isinstance(value, str) or not value.strip():
        raise ValueError("id is required and must be a non-empty string.")
    return quote(value, safe="")


def resource_path(*segments: str) -> str:
    """
    Join a /v1 path from fixed segments; each segment is used verbatim,
    so escape identifiers with escape_id() first.
    """
    return "/v1/" + "/".join(s.strip("/") for s in segments)


def page_params(count: int = DEFAULT_COUNT, offset: int = DEFAULT_OFFSET,
                customer_id: Optional[str] = None) -> List[Tuple[str, str]]:
    if count <= 0 or offset < 0:
        raise ValueError("count must be positive and offset non-negative.")
    values = [("count", str(count)), ("offset", str(offset))]
    if customer_id:
        values.append(("customer", customer_id))
    return values


__all__ = [
    "DEFAULT_COUNT",
    "DEFAULT_OFFSET",
    "format_amount",
    "escape_id",
    "resource_path",
    "page_params",
]
