from __future__ import annotations

from ..client import SubscriptionClient
from ..models import Subscription
from ..params import SubscriptionParams
from ..utils import escape_id, resource_path


def _subscription_path(customer_id: str) -> str:
    return resource_path("customers", escape_id(customer_id), "subscription")


class SubscriptionsAPI:
    """
    A customer's (single) subscription.

    Notes:
      - `update` subscribes the customer to `params.plan`, replacing any
        current plan.
      - `cancel` ends it now, or at the end of the paid period with
        `at_period_end=True`.
    """

    def __init__(self, client: SubscriptionClient):
        self.client = client

    def update(self, customer_id: str, params: SubscriptionParams) -> Subscription:
        self.client.trace("subscriptions.update()", {"customer_id": customer_id, "plan": params.plan,
                                          "prorate": params.prorate})
        return self.client.post(_subscription_path(customer_id), params.to_params(), Subscription)

    def cancel(self, customer_id: str, *, at_period_end: bool = False) -> Subscription:
        self.client.trace("subscriptions.cancel()", {"customer_id": customer_id, "at_period_end": at_period_end})
        values = [("at_period_end", "true")] if at_period_end else None
        return self.client.delete(_subscription_path(customer_id), values, Subscription)
