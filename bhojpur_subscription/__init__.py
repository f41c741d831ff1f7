"""
Bhojpur Subscription Python SDK

Sync client for the subscription/payments REST API:
- Request transport (form-encoded requests, JSON responses, version header)
- Typed models with null-tolerant scalar fields
- Structured API errors (type/code/request id)
- Luhn checksum and card network detection
- Resource helpers: cards, charges, coupons, customers, invoices,
  invoice items, plans, subscriptions, tokens
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Version
# ---------------------------------------------------------------------------
__version__ = "0.1.0"

# ---------------------------------------------------------------------------
# Public API re-exports
# ---------------------------------------------------------------------------
from .config import SubscriptionConfig
from .client import API_VERSION, RawResponse, SubscriptionClient, decode, encode_params
from .errors import (
    SubscriptionSDKError,
    SubscriptionConfigError,
    SubscriptionTransportError,
    SubscriptionDecodeError,
    SubscriptionAPIError,
    CardNumberError,
    ErrorType,
    ErrorCode,
    ErrorDetail,
)
from .cards import CardNetwork, card_network, is_luhn_valid
from .nullable import NullableBool, NullableInt, NullableInt64, NullableStr, decode_nullable
from .models import Currency, CouponDuration, PlanInterval, SubscriptionStatus
from .params import (
    CardParams,
    ChargeParams,
    CouponParams,
    CustomerParams,
    InvoiceItemParams,
    InvoiceItemUpdate,
    PlanParams,
    SubscriptionParams,
)
from .resources import (
    CardsAPI,
    ChargesAPI,
    CouponsAPI,
    CustomersAPI,
    InvoicesAPI,
    InvoiceItemsAPI,
    PlansAPI,
    SubscriptionsAPI,
    TokensAPI,
)
from .debug import dprint, djson, is_enabled as debug_enabled, set_debug as set_debug_enabled

__all__ = (
    "__version__",
    # core
    "SubscriptionConfig",
    "SubscriptionClient",
    "RawResponse",
    "API_VERSION",
    "decode",
    "encode_params",
    # errors
    "SubscriptionSDKError",
    "SubscriptionConfigError",
    "SubscriptionTransportError",
    "SubscriptionDecodeError",
    "SubscriptionAPIError",
    "CardNumberError",
    "ErrorType",
    "ErrorCode",
    "ErrorDetail",
    # cards
    "CardNetwork",
    "card_network",
    "is_luhn_valid",
    # nullable scalars
    "NullableBool",
    "NullableInt",
    "NullableInt64",
    "NullableStr",
    "decode_nullable",
    # enums
    "Currency",
    "CouponDuration",
    "PlanInterval",
    "SubscriptionStatus",
    # params
    "CardParams",
    "ChargeParams",
    "CouponParams",
    "CustomerParams",
    "InvoiceItemParams",
    "InvoiceItemUpdate",
    "PlanParams",
    "SubscriptionParams",
    # resources
    "CardsAPI",
    "ChargesAPI",
    "CouponsAPI",
    "CustomersAPI",
    "InvoicesAPI",
    "InvoiceItemsAPI",
    "PlansAPI",
    "SubscriptionsAPI",
    "TokensAPI",
    # debug controls
    "dprint",
    "djson",
    "debug_enabled",
    "set_debug_enabled",
)
