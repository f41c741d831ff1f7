from __future__ import annotations
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .cards import CardNetwork
from .nullable import NullableBool, NullableInt, NullableInt64, NullableStr


# =============================================================================
# Base model: permissive to avoid breaking on API additions
# =============================================================================
class _APIModel(BaseModel):
    """
    Loose model that accepts extra fields so the SDK doesn't break
    when the API adds response properties.
    """
    model_config = ConfigDict(
        extra="allow",
        populate_by_name=True,
    )


# =============================================================================
# Enumerations
# =============================================================================
class Currency(str, Enum):
    """ISO codes for the major currencies (not the full list)."""
    INR = "inr"
    USD = "usd"
    EUR = "eur"
    GBP = "gbp"
    JPY = "jpy"
    CAD = "cad"
    HKD = "hkd"
    CNY = "cny"
    AUD = "aud"


class CouponDuration(str, Enum):
    FOREVER = "forever"
    ONCE = "once"
    REPEATING = "repeating"


class PlanInterval(str, Enum):
    SECOND = "second"
    MINUTE = "minute"
    HOUR = "hour"
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    QUARTER = "quarter"
    YEAR = "year"
    DECADE = "decade"
    CENTURY = "century"


class SubscriptionStatus(str, Enum):
    TRIALING = "trialing"
    ACTIVE = "active"
    PAST_DUE = "past_due"
    CANCELED = "canceled"
    UNPAID = "unpaid"


# =============================================================================
# Cards & tokens
# =============================================================================
class Card(_APIModel):
    id: str
    # Network display name, e.g. "Visa"; `network` gives the enum
    type: str
    exp_month: int
    exp_year: int
    last4: str
    fingerprint: str
    name: NullableStr = ""
    country: NullableStr = ""
    address_line1: NullableStr = ""
    address_line2: NullableStr = ""
    address_country: NullableStr = ""
    address_state: NullableStr = ""
    address_pin: NullableStr = ""
    address_city: NullableStr = ""
    address_line1_check: NullableStr = ""
    address_pin_check: NullableStr = ""
    cvc_check: NullableStr = ""

    @property
    def network(self) -> CardNetwork:
        try:
            return CardNetwork(self.type)
        except ValueError:
            return CardNetwork.UNKNOWN


class CardData(_APIModel):
    object: str = "list"
    count: int = 0
    url: str = ""
    data: List[Card] = Field(default_factory=list)


class Token(_APIModel):
    """Single-use token wrapping card details."""
    id: str
    amount: float = 0
    currency: str = ""
    created: int
    used: bool
    livemode: bool
    type: str
    card: Optional[Card] = None


# =============================================================================
# Charges
# =============================================================================
class FeeDetails(_APIModel):
    amount: float
    currency: str
    type: str
    application: NullableStr = ""


class Charge(_APIModel):
    id: str
    description: NullableStr = ""
    amount: float
    card: Optional[Card] = None
    currency: str
    created: int
    customer: NullableStr = ""
    invoice: NullableStr = ""
    fee: float = 0
    paid: bool
    fee_details: List[FeeDetails] = Field(default_factory=list)
    refunded: bool = False
    amount_refunded: float = 0
    failure_message: NullableStr = ""
    disputed: bool = False
    livemode: bool
    statement_description: str = ""

    @field_validator("fee_details", mode="before")
    @classmethod
    def _null_list(cls, v):
        return [] if v is None else v


# =============================================================================
# Plans, coupons, subscriptions
# =============================================================================
class Plan(_APIModel):
    id: str
    name: str
    amount: float
    interval: str
    interval_count: int = 1
    currency: str
    trial_period_days: NullableInt = 0
    livemode: bool


class Coupon(_APIModel):
    id: str
    duration: str
    percent_off: int
    duration_in_months: NullableInt = 0
    max_redemptions: NullableInt = 0
    redeem_by: NullableInt64 = 0
    times_redeemed: int = 0
    livemode: bool


class Discount(_APIModel):
    id: str = ""
    customer: str
    start: NullableInt64 = 0
    end: NullableInt64 = 0
    coupon: Optional[Coupon] = None


class Subscription(_APIModel):
    customer: str
    status: str
    plan: Optional[Plan] = None
    start: int
    ended_at: NullableInt64 = 0
    current_period_start: NullableInt64 = 0
    current_period_end: NullableInt64 = 0
    trial_start: NullableInt64 = 0
    trial_end: NullableInt64 = 0
    canceled_at: NullableInt64 = 0
    cancel_at_period_end: NullableBool = False
    quantity: int = 1

    @property
    def status_enum(self) -> Optional[SubscriptionStatus]:
        try:
            return SubscriptionStatus(self.status)
        except ValueError:
            return None


# =============================================================================
# Customers
# =============================================================================
class Customer(_APIModel):
    id: str
    description: NullableStr = ""
    email: NullableStr = ""
    created: int
    account_balance: float = 0
    delinquent: bool = False
    cards: CardData = Field(default_factory=CardData)
    discount: Optional[Discount] = None
    subscription: Optional[Subscription] = None
    livemode: bool
    default_card: NullableStr = ""


# =============================================================================
# Invoices
# =============================================================================
class InvoiceItem(_APIModel):
    id: str
    amount: float
    currency: str
    customer: str
    date: int
    description: NullableStr = ""
    invoice: NullableStr = ""
    livemode: bool


class Period(_APIModel):
    start: int
    end: int


class SubscriptionItem(_APIModel):
    amount: float
    period: Optional[Period] = None
    plan: Optional[Plan] = None


class InvoiceLines(_APIModel):
    invoiceitems: List[InvoiceItem] = Field(default_factory=list)
    prorations: List[InvoiceItem] = Field(default_factory=list)
    subscriptions: List[SubscriptionItem] = Field(default_factory=list)


class Invoice(_APIModel):
    id: str = ""  # upcoming invoices have no id yet
    amount_due: float
    attempt_count: int = 0
    attempted: bool = False
    closed: bool = False
    paid: bool = False
    period_end: int
    period_start: int
    subtotal: float
    total: float
    charge: NullableStr = ""
    customer: str
    date: int
    discount: Optional[Discount] = None
    lines: Optional[InvoiceLines] = None
    starting_balance: float = 0
    ending_balance: Optional[float] = None
    next_payment_attempt: Optional[float] = None
    livemode: bool


# =============================================================================
# Envelopes
# =============================================================================
class DeleteResponse(_APIModel):
    id: str
    deleted: bool


# List endpoints wrap their items as {"data": [...]}
class ChargeList(_APIModel):
    data: List[Charge] = Field(default_factory=list)


class CouponList(_APIModel):
    data: List[Coupon] = Field(default_factory=list)


class CustomerList(_APIModel):
    data: List[Customer] = Field(default_factory=list)


class InvoiceList(_APIModel):
    data: List[Invoice] = Field(default_factory=list)


class InvoiceItemList(_APIModel):
    data: List[InvoiceItem] = Field(default_factory=list)


class PlanList(_APIModel):
    data: List[Plan] = Field(default_factory=list)


__all__ = [
    "Currency",
    "CouponDuration",
    "PlanInterval",
    "SubscriptionStatus",
    "Card",
    "CardData",
    "Token",
    "FeeDetails",
    "Charge",
    "Plan",
    "Coupon",
    "Discount",
    "Subscription",
    "Customer",
    "InvoiceItem",
    "Period",
    "SubscriptionItem",
    "InvoiceLines",
    "Invoice",
    "DeleteResponse",
    "ChargeList",
    "CouponList",
    "CustomerList",
    "InvoiceList",
    "InvoiceItemList",
    "PlanList",
]
