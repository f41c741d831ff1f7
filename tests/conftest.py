import json
from typing import Any, Callable, List

import httpx
import pytest

from bhojpur_subscription import SubscriptionClient, SubscriptionConfig

TEST_KEY = "sk_test_4eC39HqLyjWDarjtT1zdp7dc"
TEST_BASE_URL = "https://api.test.local"


class Recorder:
    """MockTransport handler that records requests and replays canned responses."""

    def __init__(self, status: int = 200, body: Any = None, headers=None):
        self.requests: List[httpx.Request] = []
        self.status = status
        self.body = {} if body is None else body
        self.headers = headers or {}

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if isinstance(self.body, (bytes, str)):
            content = self.body.encode() if isinstance(self.body, str) else self.body
        else:
            content = json.dumps(self.body).encode()
        return httpx.Response(self.status, content=content, headers=self.headers)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def config() -> SubscriptionConfig:
    return SubscriptionConfig(api_key=TEST_KEY, base_url=TEST_BASE_URL, debug=False)


@pytest.fixture
def make_client(config) -> Callable[..., SubscriptionClient]:
    clients: List[SubscriptionClient] = []

    def _make(handler, **overrides) -> SubscriptionClient:
        cfg = config.copy_with(**overrides) if overrides else config
        client = SubscriptionClient(cfg, transport=httpx.MockTransport(handler))
        clients.append(client)
        return client

    yield _make
    for c in clients:
        c.close()


def form(request: httpx.Request) -> List[tuple]:
    """Decode a form-encoded request body into ordered pairs."""
    return list(httpx.QueryParams(request.content.decode()).multi_items())


CARD_JSON = {
    "id": "card_1",
    "type": "Visa",
    "exp_month": 5,
    "exp_year": 2030,
    "last4": "4242",
    "fingerprint": "fp_1",
    "name": None,
    "country": "IN",
    "address_city": None,
    "cvc_check": "pass",
}

CHARGE_JSON = {
    "id": "ch_1",
    "description": None,
    "amount": 300,
    "card": CARD_JSON,
    "currency": "inr",
    "created": 1700000000,
    "customer": None,
    "invoice": None,
    "fee": 9,
    "paid": True,
    "fee_details": None,
    "refunded": False,
    "amount_refunded": 0,
    "failure_message": None,
    "disputed": False,
    "livemode": False,
    "statement_description": "",
}

PLAN_JSON = {
    "id": "gold",
    "name": "Gold",
    "amount": 2000,
    "interval": "month",
    "interval_count": 1,
    "currency": "inr",
    "trial_period_days": None,
    "livemode": False,
}

COUPON_JSON = {
    "id": "SAVE20",
    "duration": "repeating",
    "percent_off": 20,
    "duration_in_months": 3,
    "max_redemptions": None,
    "redeem_by": None,
    "times_redeemed": 0,
    "livemode": False,
}

SUBSCRIPTION_JSON = {
    "customer": "cus_1",
    "status": "active",
    "plan": PLAN_JSON,
    "start": 1700000000,
    "ended_at": None,
    "current_period_start": 1700000000,
    "current_period_end": 1702592000,
    "trial_start": None,
    "trial_end": None,
    "canceled_at": None,
    "cancel_at_period_end": False,
    "quantity": 1,
}

CUSTOMER_JSON = {
    "id": "cus_1",
    "description": None,
    "email": "pramila@example.com",
    "created": 1700000000,
    "account_balance": 0,
    "delinquent": False,
    "cards": {"object": "list", "count": 1, "url": "/v1/customers/cus_1/cards", "data": [CARD_JSON]},
    "discount": None,
    "subscription": SUBSCRIPTION_JSON,
    "livemode": False,
    "default_card": "card_1",
}

INVOICE_ITEM_JSON = {
    "id": "ii_1",
    "amount": 1500,
    "currency": "inr",
    "customer": "cus_1",
    "date": 1700000000,
    "description": None,
    "invoice": None,
    "livemode": False,
}

INVOICE_JSON = {
    "id": "in_1",
    "amount_due": 2000,
    "attempt_count": 0,
    "attempted": False,
    "closed": False,
    "paid": False,
    "period_end": 1702592000,
    "period_start": 1700000000,
    "subtotal": 2000,
    "total": 2000,
    "charge": None,
    "customer": "cus_1",
    "date": 1700000000,
    "discount": None,
    "lines": {
        "invoiceitems": [INVOICE_ITEM_JSON],
        "prorations": [],
        "subscriptions": [
            {"amount": 2000, "period": {"start": 1700000000, "end": 1702592000}, "plan": PLAN_JSON}
        ],
    },
    "starting_balance": 0,
    "ending_balance": None,
    "next_payment_attempt": 1702595600,
    "livemode": False,
}

TOKEN_JSON = {
    "id": "tok_1",
    "amount": 0,
    "currency": "inr",
    "created": 1700000000,
    "used": False,
    "livemode": False,
    "type": "card",
    "card": CARD_JSON,
}
