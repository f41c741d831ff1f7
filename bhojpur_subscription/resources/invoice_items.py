from __future__ import annotations
from typing import List, Optional

from ..client import SubscriptionClient
from ..models import DeleteResponse, InvoiceItem, InvoiceItemList
from ..params import InvoiceItemParams, InvoiceItemUpdate
from ..utils import DEFAULT_COUNT, DEFAULT_OFFSET, escape_id, page_params, resource_path


class InvoiceItemsAPI:
    """
    One-off charges (or credits) added to a customer's next invoice.
    """

    def __init__(self, client: SubscriptionClient):
        self.client = client

    def create(self, params: InvoiceItemParams) -> InvoiceItem:
        self.client.trace("invoice_items.create()", {"customer": params.customer, "amount": params.amount})
        return self.client.post(resource_path("invoiceitems"), params.to_params(), InvoiceItem)

    def retrieve(self, item_id: str) -> InvoiceItem:
        return self.client.get(resource_path("invoiceitems", escape_id(item_id)), None, InvoiceItem)

    def update(self, item_id: str, params: InvoiceItemUpdate) -> InvoiceItem:
        """Change the amount and/or description of an item not yet invoiced."""
        path = resource_path("invoiceitems", escape_id(item_id))
        return self.client.post(path, params.to_params(), InvoiceItem)

    def delete(self, item_id: str) -> bool:
        path = resource_path("invoiceitems", escape_id(item_id))
        return self.client.delete(path, None, DeleteResponse).deleted

    def list(
        self,
        count: int = DEFAULT_COUNT,
        offset: int = DEFAULT_OFFSET,
        *,
        customer_id: Optional[str] = None,
    ) -> List[InvoiceItem]:
        values = page_params(count, offset, customer_id)
        return self.client.get(resource_path("invoiceitems"), values, InvoiceItemList).data
