#!/usr/bin/env python3
"""List a Media Tracker resource and print it as JSON.

Configuration comes from the environment:
- MEDIA_TRACKER_API_BASE_URL
- MEDIA_TRACKER_API_KEY
- MEDIA_TRACKER_TIMEOUT (optional, seconds)

Examples::

    python scripts/list_resources.py videos --limit 5 --view with_channel
    python scripts/list_resources.py channels --order-by desc
    python scripts/list_resources.py videos --id dQw4w9WgXcQ
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

_repo = Path(__file__).resolve().parent.parent
_src = _repo / "src"
if _src.is_dir():
    sys.path.insert(0, str(_src))

from pymediatracker import (  # noqa: E402
    ListParams,
    MediaTrackerClient,
    MediaTrackerConfig,
    MediaTrackerConfigError,
    SortOrder,
)

_RESOURCES = ("videos", "channels", "visualizations")


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument("resource", choices=_RESOURCES)
    parser.add_argument("--id", dest="item_id", help="Fetch a single item instead of the collection")
    parser.add_argument("--offset", type=int)
    parser.add_argument("--limit", type=int)
    parser.add_argument("--view")
    parser.add_argument("--order-by", choices=[order.value for order in SortOrder])
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


async def _run(args: argparse.Namespace) -> int:
    try:
        config = MediaTrackerConfig.from_env()
    except MediaTrackerConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    async with MediaTrackerClient(config) as client:
        store = getattr(client, args.resource)
        if args.item_id is not None:
            result = await store.get_by_id(args.item_id)
            payload = result.data.model_dump(mode="json") if result.data is not None else None
        else:
            params = ListParams(
                offset=args.offset,
                limit=args.limit,
                view=args.view,
                order_by=args.order_by,
            )
            result = await store.list(params)
            payload = [item.model_dump(mode="json") for item in result.data]

        if not result.ok:
            print(f"Request failed (status={result.status}): {store.error}", file=sys.stderr)
            return 1

    print(json.dumps(payload, indent=2, ensure_ascii=False))
    return 0


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return asyncio.run(_run(args))


if __name__ == "__main__":
    raise SystemExit(main())
