from __future__ import annotations
import argparse
from bhojpur_subscription import CardNumberError, card_network, is_luhn_valid

def main():
    ap = argparse.ArgumentParser(description="Check a card number offline (Luhn + network)")
    ap.add_argument("number", help="Card number, digits only")
    args = ap.parse_args()

    try:
        valid = is_luhn_valid(args.number)
    except CardNumberError as e:
        print(f"[CARD] rejected: {e}")
        return
    print(f"  luhn    : {'ok' if valid else 'FAILED'}")
    print(f"  network : {card_network(args.number).value}")

if __name__ == "__main__":
    main()
