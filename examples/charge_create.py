from __future__ import annotations
import argparse
from _common import add_common_args, make_client_from_args, pretty
from bhojpur_subscription.resources import ChargesAPI
from bhojpur_subscription.params import ChargeParams
from bhojpur_subscription.errors import SubscriptionAPIError

def main():
    ap = argparse.ArgumentParser(description="Charge a card token or an existing customer")
    add_common_args(ap)
    ap.add_argument("--amount", required=True, type=int, help="Amount in minor units (e.g., paisa)")
    ap.add_argument("--currency", default="inr", help="Currency (default inr)")
    ap.add_argument("--token", default=None, help="Card token id")
    ap.add_argument("--customer", default=None, help="Customer id (used when no token is given)")
    ap.add_argument("--description", default="", help="Charge description")
    args = ap.parse_args()

    params = ChargeParams(
        amount=args.amount,
        currency=args.currency,
        token=args.token,
        customer=args.customer,
        description=args.description,
    )
    print("[RUN] Creating charge")
    print(f"  amount    : {args.amount}")
    print(f"  currency  : {params.currency}")
    print(f"  token     : {args.token}")
    print(f"  customer  : {args.customer}")

    with make_client_from_args(args) as client:
        try:
            ch = ChargesAPI(client).create(params)
            print(pretty(ch.model_dump(mode="json")))
        except SubscriptionAPIError as e:
            print(f"[RUN] HTTP ERROR status={e.status} req_id={e.request_id}")
            print(pretty(e.to_dict()))

if __name__ == "__main__":
    main()
