from __future__ import annotations
from typing import List, Optional

from ..client import SubscriptionClient
from ..models import Invoice, InvoiceList
from ..utils import DEFAULT_COUNT, DEFAULT_OFFSET, escape_id, page_params, resource_path


class InvoicesAPI:
    """Read-only access to invoices, including a customer's upcoming one."""

    def __init__(self, client: SubscriptionClient):
        self.client = client

    def retrieve(self, invoice_id: str) -> Invoice:
        return self.client.get(resource_path("invoices", escape_id(invoice_id)), None, Invoice)

    def upcoming(self, customer_id: str) -> Invoice:
        """The invoice that will be billed next for `customer_id`."""
        if not customer_id:
            raise ValueError("customer_id is required.")
        self.client.trace("invoices.upcoming()", {"customer_id": customer_id})
        return self.client.get(resource_path("invoices", "upcoming"), [("customer", customer_id)], Invoice)

    def list(
        self,
        count: int = DEFAULT_COUNT,
        offset: int = DEFAULT_OFFSET,
        *,
        customer_id: Optional[str] = None,
    ) -> List[Invoice]:
        values = page_params(count, offset, customer_id)
        return self.client.get(resource_path("invoices"), values, InvoiceList).data
