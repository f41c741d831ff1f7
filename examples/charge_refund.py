from __future__ import annotations
import argparse
from _common import add_common_args, make_client_from_args, pretty
from bhojpur_subscription.resources import ChargesAPI
from bhojpur_subscription.errors import SubscriptionAPIError

def main():
    ap = argparse.ArgumentParser(description="Refund a charge, fully or partially")
    add_common_args(ap)
    ap.add_argument("--id", required=True, help="Charge id")
    ap.add_argument("--amount", type=int, default=None, help="Partial amount (default: full refund)")
    args = ap.parse_args()

    client = make_client_from_args(args)
    try:
        try:
            ch = ChargesAPI(client).refund(args.id, amount=args.amount)
            print(pretty(ch.model_dump(mode="json")))
        except SubscriptionAPIError as e:
            print(f"[REFUND] HTTP {e.status} req_id={e.request_id}")
            print(pretty(e.to_dict()))
    finally:
        client.close()

if __name__ == "__main__":
    main()
