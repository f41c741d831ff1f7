from __future__ import annotations
import argparse
from _common import add_common_args, make_client_from_args, pretty
from bhojpur_subscription.resources import SubscriptionsAPI
from bhojpur_subscription.params import SubscriptionParams
from bhojpur_subscription.errors import SubscriptionAPIError

def main():
    ap = argparse.ArgumentParser(description="Subscribe a customer to a plan, or cancel")
    add_common_args(ap)
    ap.add_argument("--customer", required=True, help="Customer id")
    ap.add_argument("--plan", default=None, help="Plan id to subscribe to")
    ap.add_argument("--prorate", action="store_true", help="Prorate when switching plans")
    ap.add_argument("--cancel", action="store_true", help="Cancel instead of subscribing")
    ap.add_argument("--at-period-end", action="store_true", help="With --cancel: end at period end")
    args = ap.parse_args()

    if not args.cancel and not args.plan:
        ap.error("--plan is required unless --cancel is given")

    client = make_client_from_args(args)
    try:
        api = SubscriptionsAPI(client)
        try:
            if args.cancel:
                sub = api.cancel(args.customer, at_period_end=args.at_period_end)
            else:
                sub = api.update(args.customer, SubscriptionParams(plan=args.plan, prorate=args.prorate))
            print(pretty(sub.model_dump(mode="json")))
        except SubscriptionAPIError as e:
            print(f"[SUB] HTTP {e.status} req_id={e.request_id}")
            print(pretty(e.to_dict()))
    finally:
        client.close()

if __name__ == "__main__":
    main()
