"""
Resource APIs for the Bhojpur Subscription SDK.

Public exports:

- CardsAPI
- ChargesAPI
- CouponsAPI
- CustomersAPI
- InvoicesAPI
- InvoiceItemsAPI
- PlansAPI
- SubscriptionsAPI
- TokensAPI
"""

from .cards import CardsAPI
from .charges import ChargesAPI
from .coupons import CouponsAPI
from .customers import CustomersAPI
from .invoices import InvoicesAPI
from .invoice_items import InvoiceItemsAPI
from .plans import PlansAPI
from .subscriptions import SubscriptionsAPI
from .tokens import TokensAPI

__all__ = (
    "CardsAPI",
    "ChargesAPI",
    "CouponsAPI",
    "CustomersAPI",
    "InvoicesAPI",
    "InvoiceItemsAPI",
    "PlansAPI",
    "SubscriptionsAPI",
    "TokensAPI",
)
