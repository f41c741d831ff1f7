from __future__ import annotations
import argparse, json
from typing import Any
from bhojpur_subscription import SubscriptionConfig, SubscriptionClient
from bhojpur_subscription.debug import dprint

def add_common_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--base-url", default=None, help="Override BHOJPUR_BASE_URL")
    p.add_argument("--api-key", default=None, help="Override BHOJPUR_API_KEY")
    p.add_argument("--timeout", type=float, default=None, help="HTTP timeout seconds")
    p.add_argument("--debug", type=int, default=None, help="Set debug 1/0 (overrides BHOJPUR_DEBUG)")

def make_client_from_args(args) -> SubscriptionClient:
    cfg = SubscriptionConfig(
        api_key=args.api_key,
        base_url=args.base_url,
        timeout=args.timeout,
        debug=(None if args.debug is None else bool(args.debug)),
    )
    dprint("[COMMON] Config", cfg.masked())
    return SubscriptionClient(cfg)

def pretty(obj: Any) -> str:
    return json.dumps(obj, ensure_ascii=False, indent=2)
