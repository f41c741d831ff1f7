from __future__ import annotations
from typing import List, Optional

from ..client import SubscriptionClient
from ..models import Charge, ChargeList
from ..params import ChargeParams
from ..utils import DEFAULT_COUNT, DEFAULT_OFFSET, escape_id, format_amount, page_params, resource_path


class ChargesAPI:
    """
    Credit card charges.

    Notes:
      - A charge needs a card, a card token or an existing customer.
      - `refund` without an amount refunds the whole charge.
    """

    def __init__(self, client: SubscriptionClient):
        self.client = client

    def create(self, params: ChargeParams) -> Charge:
        self.client.trace("charges.create()", {
            "amount": params.amount,
            "currency": params.currency,
            "card_present": params.card is not None,
            "token_present": bool(params.token),
            "customer": params.customer,
        })
        return self.client.post(resource_path("charges"), params.to_params(), Charge)

    def retrieve(self, charge_id: str) -> Charge:
        self.client.trace("charges.retrieve()", {"charge_id": charge_id})
        return self.client.get(resource_path("charges", escape_id(charge_id)), None, Charge)

    def refund(self, charge_id: str, *, amount: Optional[float] = None) -> Charge:
        """Refund a charge, fully or (with `amount`) partially."""
        if amount is not None and amount <= 0:
            raise ValueError("amount must be positive.")
        values = [("amount", format_amount(amount))] if amount is not None else []
        self.client.trace("charges.refund()", {"charge_id": charge_id, "amount": amount})
        path = resource_path("charges", escape_id(charge_id), "refund")
        return self.client.post(path, values, Charge)

    def list(
        self,
        count: int = DEFAULT_COUNT,
        offset: int = DEFAULT_OFFSET,
        *,
        customer_id: Optional[str] = None,
    ) -> List[Charge]:
        """List charges, optionally only those of one customer."""
        values = page_params(count, offset, customer_id)
        resp = self.client.get(resource_path("charges"), values, ChargeList)
        self.client.trace("charges.list ids", [c.id for c in resp.data])
        return resp.data
