"""
Request parameter models.

Each model validates its inputs and flattens itself into the ordered
(key, value) form pairs the API expects via `to_params()`. Optional fields
are only sent when set.
"""

from __future__ import annotations
from typing import Dict, List, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .cards import CardNetwork, card_network
from .models import CouponDuration, Currency, PlanInterval
from .utils import format_amount

FormPairs = List[Tuple[str, str]]


class _Params(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, use_enum_values=True)


def _normalize_currency(v: Union[str, Currency]) -> str:
    v = v.value if isinstance(v, Currency) else v
    if not isinstance(v, str) or len(v.strip()) != 3:
        raise ValueError("currency must be a 3-letter ISO code, e.g. 'inr'.")
    return v.strip().lower()


# =============================================================================
# Cards
# =============================================================================
class CardParams(_Params):
    """Raw card details for creating cards, tokens, charges or customers."""
    number: str
    exp_month: int = Field(..., ge=1, le=12)
    exp_year: int
    name: Optional[str] = None
    cvc: Optional[str] = None
    address_line1: Optional[str] = None
    address_line2: Optional[str] = None
    address_country: Optional[str] = None
    address_state: Optional[str] = None
    address_pin: Optional[str] = None

    @property
    def network(self) -> CardNetwork:
        return card_network(self.number)

    def to_params(self) -> FormPairs:
        out: FormPairs = [
            ("card[number]", self.number),
            ("card[exp_month]", str(self.exp_month)),
            ("card[exp_year]", str(self.exp_year)),
        ]
        for key in ("name", "cvc", "address_line1", "address_line2", "address_pin",
                    "address_state", "address_country"):
            value = getattr(self, key)
            if value:
                out.append((f"card[{key}]", value))
        return out


def _card_or_token(card: Optional[CardParams], token: Optional[str]) -> FormPairs:
    if card is not None:
        return card.to_params()
    if token:
        return [("card", token)]
    return []


# =============================================================================
# Charges
# =============================================================================
class ChargeParams(_Params):
    """
    Either `card`, `token` or `customer` identifies what gets charged
    (checked in that order).
    """
    amount: float = Field(..., gt=0)
    currency: str
    description: str = ""
    customer: Optional[str] = None
    card: Optional[CardParams] = None
    token: Optional[str] = None
    statement_description: Optional[str] = Field(None, max_length=15)

    @field_validator("currency", mode="before")
    @classmethod
    def _currency_norm(cls, v):
        return _normalize_currency(v)

    def to_params(self) -> FormPairs:
        out: FormPairs = [
            ("amount", format_amount(self.amount)),
            ("currency", self.currency),
            ("description", self.description),
        ]
        if self.card is not None or self.token:
            out.extend(_card_or_token(self.card, self.token))
        else:
            out.append(("customer", self.customer or ""))
        if self.statement_description:
            out.append(("statement_description", self.statement_description))
        return out


# =============================================================================
# Coupons
# =============================================================================
class CouponParams(_Params):
    percent_off: int = Field(..., ge=1, le=100)
    duration: CouponDuration
    id: Optional[str] = None
    duration_in_months: Optional[int] = Field(None, gt=0)
    max_redemptions: Optional[int] = Field(None, gt=0)
    redeem_by: Optional[int] = None  # UTC unix timestamp

    def to_params(self) -> FormPairs:
        out: FormPairs = [
            ("duration", str(self.duration)),
            ("percent_off", str(self.percent_off)),
        ]
        if self.id:
            out.append(("id", self.id))
        if self.duration_in_months:
            out.append(("duration_in_months", str(self.duration_in_months)))
        if self.max_redemptions:
            out.append(("max_redemptions", str(self.max_redemptions)))
        if self.redeem_by:
            out.append(("redeem_by", str(self.redeem_by)))
        return out


# =============================================================================
# Customers
# =============================================================================
class CustomerParams(_Params):
    email: Optional[str] = None
    description: Optional[str] = None
    card: Optional[CardParams] = None
    token: Optional[str] = None
    coupon: Optional[str] = None
    plan: Optional[str] = None
    trial_end: Optional[int] = None
    account_balance: Optional[float] = None
    metadata: Dict[str, str] = Field(default_factory=dict)
    quantity: Optional[int] = Field(None, gt=0)

    def to_params(self) -> FormPairs:
        out: FormPairs = []
        if self.email:
            out.append(("email", self.email))
        if self.description:
            out.append(("description", self.description))
        if self.coupon:
            out.append(("coupon", self.coupon))
        if self.plan:
            out.append(("plan", self.plan))
        if self.trial_end:
            out.append(("trial_end", str(self.trial_end)))
        if self.account_balance:
            out.append(("account_balance", format_amount(self.account_balance)))
        if self.quantity:
            out.append(("quantity", str(self.quantity)))
        for k, v in self.metadata.items():
            out.append((f"metadata[{k}]", v))
        out.extend(_card_or_token(self.card, self.token))
        return out


# =============================================================================
# Invoice items
# =============================================================================
class InvoiceItemParams(_Params):
    """A negative amount credits the customer."""
    customer: str
    amount: float
    currency: str
    description: Optional[str] = None
    invoice: Optional[str] = None

    @field_validator("currency", mode="before")
    @classmethod
    def _currency_norm(cls, v):
        return _normalize_currency(v)

    def to_params(self) -> FormPairs:
        out: FormPairs = [
            ("amount", format_amount(self.amount)),
            ("currency", self.currency),
            ("customer", self.customer),
        ]
        if self.description:
            out.append(("description", self.description))
        if self.invoice:
            out.append(("invoice", self.invoice))
        return out


class InvoiceItemUpdate(_Params):
    amount: Optional[float] = None
    description: Optional[str] = None

    def to_params(self) -> FormPairs:
        out: FormPairs = []
        if self.description:
            out.append(("description", self.description))
        if self.amount:
            out.append(("amount", format_amount(self.amount)))
        return out


# =============================================================================
# Plans
# =============================================================================
class PlanParams(_Params):
    id: str
    name: str
    amount: float = Field(..., ge=0)  # 0 for a free plan
    currency: str
    interval: PlanInterval
    trial_period_days: Optional[int] = Field(None, gt=0)

    @field_validator("currency", mode="before")
    @classmethod
    def _currency_norm(cls, v):
        return _normalize_currency(v)

    def to_params(self) -> FormPairs:
        out: FormPairs = [
            ("id", self.id),
            ("name", self.name),
            ("amount", format_amount(self.amount)),
            ("interval", str(self.interval)),
            ("currency", self.currency),
        ]
        if self.trial_period_days:
            out.append(("trial_period_days", str(self.trial_period_days)))
        return out


# =============================================================================
# Subscriptions
# =============================================================================
class SubscriptionParams(_Params):
    plan: str
    coupon: Optional[str] = None
    prorate: bool = False
    trial_end: Optional[int] = None
    card: Optional[CardParams] = None
    token: Optional[str] = None
    quantity: Optional[int] = Field(None, gt=0)

    def to_params(self) -> FormPairs:
        out: FormPairs = [("plan", self.plan)]
        if self.coupon:
            out.append(("coupon", self.coupon))
        if self.prorate:
            out.append(("prorate", "true"))
        if self.trial_end:
            out.append(("trial_end", str(self.trial_end)))
        if self.quantity:
            out.append(("quantity", str(self.quantity)))
        # a token wins over raw card details here
        if self.token:
            out.append(("card", self.token))
        elif self.card is not None:
            out.extend(self.card.to_params())
        return out


__all__ = [
    "CardParams",
    "ChargeParams",
    "CouponParams",
    "CustomerParams",
    "InvoiceItemParams",
    "InvoiceItemUpdate",
    "PlanParams",
    "SubscriptionParams",
]
