from __future__ import annotations
from typing import List

from ..client import SubscriptionClient
from ..models import Customer, CustomerList, DeleteResponse
from ..params import CustomerParams
from ..utils import DEFAULT_COUNT, DEFAULT_OFFSET, escape_id, page_params, resource_path


class CustomersAPI:
    """
    Customers and their stored card, discount and subscription.

    `update` sends only the fields set on the params; everything else on the
    customer is left untouched by the server.
    """

    def __init__(self, client: SubscriptionClient):
        self.client = client

    def create(self, params: CustomerParams) -> Customer:
        self.client.trace("customers.create()", {"email": params.email, "plan": params.plan,
                                      "card_present": params.card is not None})
        return self.client.post(resource_path("customers"), params.to_params(), Customer)

    def retrieve(self, customer_id: str) -> Customer:
        return self.client.get(resource_path("customers", escape_id(customer_id)), None, Customer)

    def update(self, customer_id: str, params: CustomerParams) -> Customer:
        self.client.trace("customers.update()", {"customer_id": customer_id})
        path = resource_path("customers", escape_id(customer_id))
        return self.client.post(path, params.to_params(), Customer)

    def delete(self, customer_id: str) -> bool:
        """Permanently delete a customer. Returns the server's `deleted` flag."""
        self.client.trace("customers.delete()", {"customer_id": customer_id})
        path = resource_path("customers", escape_id(customer_id))
        return self.client.delete(path, None, DeleteResponse).deleted

    def list(self, count: int = DEFAULT_COUNT, offset: int = DEFAULT_OFFSET) -> List[Customer]:
        return self.client.get(resource_path("customers"), page_params(count, offset), CustomerList).data
