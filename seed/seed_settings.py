#!/usr/bin/env python3
"""
Seed script to store sample formatter settings via API endpoints.

Run:
    python seed/seed_settings.py \
      --api-id <API-ID> \
      --api-key <API-KEY>
"""

import argparse
import json
from pathlib import Path
import sys
from typing import Any, cast

from aws_lambda_powertools import Logger
import requests

logger = Logger(service="seed")


SETTINGS_API_URL = (
    "http://localhost:4566/restapis/{0}/snd/_user_request_/v1/fields/{1}/settings"
)


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Seed formatter settings via Easy Read Pager API"
    )

    parser.add_argument(
        "--api-id",
        required=True,
        help="Base API ID (e.g. LocalStack API Gateway ID)",
    )
    parser.add_argument(
        "--api-key",
        default=None,
        help="API key for x-api-key header (optional for local)",
    )

    return parser.parse_args()


def load_sample_data() -> dict[str, Any]:
    data_file = Path(__file__).parent / "data" / "settings.json"
    with open(data_file, encoding="utf-8") as f:
        return cast(dict[str, Any], json.load(f))


def seed_settings() -> None:
    try:
        args = parse_args()
        data = load_sample_data()

        headers: dict[str, str] = {
            "Content-Type": "application/json",
        }
        if args.api_key:
            headers["x-api-key"] = args.api_key

        logger.info("Starting seeding process", extra={"api_id": args.api_id})

        for field in cast(list[dict[str, Any]], data.get("fields", [])):
            url = SETTINGS_API_URL.format(args.api_id, field["field_id"])

            response = requests.put(
                url,
                headers=headers,
                json={"settings": field["settings"]},
                timeout=30,
            )

            if response.ok:
                logger.info(
                    "Seeded formatter settings",
                    extra={"field_id": field["field_id"]},
                )
            else:
                logger.error(
                    "Failed to seed formatter settings",
                    extra={
                        "field_id": field["field_id"],
                        "status": response.status_code,
                        "response": response.text,
                    },
                )

        logger.info("Seeding completed")

    except Exception as exc:
        logger.exception("Seeding failed", exc_info=exc)
        sys.exit(1)


if __name__ == "__main__":
    seed_settings()
