"""
Minimal script that uses the public API to perform a card sale.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from paylane_client import ConfigError, PaylaneError, create_rest_client


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Perform a PayLane card sale")
    parser.add_argument(
        "--env-file",
        default=".env",
        help="Path to the .env file containing PAYLANE_* settings",
    )
    parser.add_argument("--amount", type=float, default=10.0, help="Sale amount")
    parser.add_argument("--currency", default="EUR", help="ISO 4217 currency code")
    parser.add_argument(
        "--card-number",
        default="4111111111111111",
        help="Card number (defaults to a test card)",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Python logging level (default: INFO)",
    )
    return parser.parse_args()


def main() -> int:
    args = parse_args()
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(message)s",
    )

    try:
        client = create_rest_client(env_file=args.env_file)
    except ConfigError as exc:
        logging.error("Invalid configuration: %s", exc)
        return 1

    params = {
        "sale": {
            "amount": args.amount,
            "currency": args.currency,
            "description": "Example sale",
        },
        "customer": {
            "name": "Hans Muller",
            "email": "hans@muller.de",
            "ip": "127.0.0.1",
            "address": {
                "street_house": "Platz der Republik 1",
                "city": "Berlin",
                "state": "Berlin",
                "zip": "11011",
                "country_code": "DE",
            },
        },
        "card": {
            "card_number": args.card_number,
            "expiration_month": "03",
            "expiration_year": "2030",
            "name_on_card": "Hans Muller",
            "card_code": "123",
        },
    }

    with client:
        try:
            sale = client.card_sale(params)
        except PaylaneError as exc:
            logging.error("Card sale request failed: %s", exc)
            return 1

        if not client.is_success():
            logging.error("Card sale declined: %s", json.dumps(sale.get("error")))
            return 1

    logging.info("Card sale accepted, id_sale=%s", sale.get("id_sale"))
    return 0


if __name__ == "__main__":
    sys.exit(main())
