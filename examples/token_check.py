from __future__ import annotations
import argparse
from _common import add_common_args, make_client_from_args, pretty
from bhojpur_subscription.resources import TokensAPI
from bhojpur_subscription.errors import SubscriptionAPIError

def main():
    ap = argparse.ArgumentParser(description="Fetch a card token by id")
    add_common_args(ap)
    ap.add_argument("--token", required=True, help="Card token id")
    args = ap.parse_args()

    client = make_client_from_args(args)
    try:
        try:
            tok = TokensAPI(client).try_retrieve(args.token)
            if tok is None:
                print(f"[TOKEN] {args.token} not found")
            else:
                print(pretty(tok.model_dump(mode="json")))
        except SubscriptionAPIError as e:
            print(f"[TOKEN] HTTP {e.status}")
            print(pretty(e.to_dict()))
    finally:
        client.close()

if __name__ == "__main__":
    main()
