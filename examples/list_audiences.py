#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import logging
import os

from chimpkit import ListFilter, MailchimpClient


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="List every audience of a Mailchimp account")
    p.add_argument("--api-key", default=os.environ.get("MAILCHIMP_API_KEY", ""))
    p.add_argument("--page-size", type=int, default=10)
    p.add_argument("--members", action="store_true", help="Also list members of each audience")
    p.add_argument("--verbose", action="store_true")
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    async with MailchimpClient(args.api_key) as client:
        iterator = await client.lists.iter(ListFilter(count=args.page_size))
        print("=" * 65)
        print(f"Audiences  : {iterator.total_items}")
        print("=" * 65)
        async for audience in iterator:
            print(f"{audience.id:12} | {audience.name}")
            if args.members:
                async for member in await audience.iter_members():
                    print(f"{'':12} | {member.email_address:40} {member.status}")
        print("=" * 65)
        print(f"Pages fetched after the first: {iterator.pages_fetched}")


if __name__ == "__main__":
    asyncio.run(main())
