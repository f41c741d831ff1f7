from __future__ import annotations
from typing import List

from ..client import SubscriptionClient
from ..models import Coupon, CouponList, DeleteResponse
from ..params import CouponParams
from ..utils import DEFAULT_COUNT, DEFAULT_OFFSET, escape_id, page_params, resource_path


class CouponsAPI:
    """Percent-off discounts that can be applied to customers."""

    def __init__(self, client: SubscriptionClient):
        self.client = client

    def create(self, params: CouponParams) -> Coupon:
        self.client.trace("coupons.create()", {"id": params.id, "percent_off": params.percent_off,
                                    "duration": params.duration})
        return self.client.post(resource_path("coupons"), params.to_params(), Coupon)

    def retrieve(self, coupon_id: str) -> Coupon:
        return self.client.get(resource_path("coupons", escape_id(coupon_id)), None, Coupon)

    def delete(self, coupon_id: str) -> bool:
        self.client.trace("coupons.delete()", {"coupon_id": coupon_id})
        resp = self.client.delete(resource_path("coupons", escape_id(coupon_id)), None, DeleteResponse)
        return resp.deleted

    def list(self, count: int = DEFAULT_COUNT, offset: int = DEFAULT_OFFSET) -> List[Coupon]:
        return self.client.get(resource_path("coupons"), page_params(count, offset), CouponList).data
