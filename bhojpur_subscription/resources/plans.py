from __future__ import annotations
from typing import List

from ..client import SubscriptionClient
from ..models import DeleteResponse, Plan, PlanList
from ..params import PlanParams
from ..utils import DEFAULT_COUNT, DEFAULT_OFFSET, escape_id, page_params, resource_path


class PlansAPI:
    """
    Recurring price plans.

    Only a plan's name can change after creation; amount, currency and
    interval are fixed.
    """

    def __init__(self, client: SubscriptionClient):
        self.client = client

    def create(self, params: PlanParams) -> Plan:
        self.client.trace("plans.create()", {"id": params.id, "amount": params.amount, "interval": params.interval})
        return self.client.post(resource_path("plans"), params.to_params(), Plan)

    def retrieve(self, plan_id: str) -> Plan:
        return self.client.get(resource_path("plans", escape_id(plan_id)), None, Plan)

    def update(self, plan_id: str, name: str) -> Plan:
        if not name or not name.strip():
            raise ValueError("name is required.")
        path = resource_path("plans", escape_id(plan_id))
        return self.client.post(path, [("name", name.strip())], Plan)

    def delete(self, plan_id: str) -> bool:
        path = resource_path("plans", escape_id(plan_id))
        return self.client.delete(path, None, DeleteResponse).deleted

    def list(self, count: int = DEFAULT_COUNT, offset: int = DEFAULT_OFFSET) -> List[Plan]:
        return self.client.get(resource_path("plans"), page_params(count, offset), PlanList).data
