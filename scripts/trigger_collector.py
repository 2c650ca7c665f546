#!/usr/bin/env python3
# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Trigger the payment collector endpoint by hand.

Usage:
    python scripts/trigger_collector.py
    CRON_SECRET=my-secret python scripts/trigger_collector.py \
        http://localhost:8000/api/v1/cron/collector
"""

from __future__ import annotations

import argparse
import json
import os
import sys

import httpx

DEFAULT_ENDPOINT = "http://localhost:8000/api/v1/cron/collector"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Trigger the payment collector.")
    parser.add_argument("endpoint", nargs="?", default=DEFAULT_ENDPOINT)
    parser.add_argument(
        "--secret",
        default=os.environ.get("CRON_SECRET", ""),
        help="Cron secret (defaults to $CRON_SECRET)",
    )
    args = parser.parse_args(argv)

    if not args.secret:
        print("No cron secret given; set CRON_SECRET or pass --secret", file=sys.stderr)
        return 2

    try:
        response = httpx.post(
            args.endpoint,
            headers={"Authorization": f"Bearer {args.secret}"},
            timeout=60.0,
        )
    except httpx.HTTPError as e:
        print(f"Connection error: {e}", file=sys.stderr)
        return 1

    print(f"Status: {response.status_code}")
    try:
        payload = response.json()
    except ValueError:
        print(response.text)
        return 1
    print(json.dumps(payload, indent=2))

    if response.status_code == 401:
        print("CRON_SECRET rejected by the server", file=sys.stderr)
        return 1
    if response.is_success and payload.get("success"):
        result = payload["result"]
        print(f"{result['completed']} completed of {result['processed']} processed")
        return 0
    return 1


if __name__ == "__main__":
    sys.exit(main())
