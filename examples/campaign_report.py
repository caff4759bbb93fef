#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import os

from chimpkit import CampaignFilter, MailchimpAPIError, MailchimpClient


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Show recent campaigns and their send statistics")
    p.add_argument("--api-key", default=os.environ.get("MAILCHIMP_API_KEY", ""))
    p.add_argument("--status", default="sent", choices=["save", "paused", "schedule", "sending", "sent"])
    p.add_argument("--limit", type=int, default=10)
    return p.parse_args()


async def main() -> None:
    args = parse_args()

    async with MailchimpClient(args.api_key) as client:
        try:
            info = await client.api_root.get_info()
        except MailchimpAPIError as e:
            print(f"Cannot reach account: {e}")
            return
        print(f"Account    : {info.account_name}")

        iterator = await client.campaigns.iter(
            CampaignFilter(status=args.status, count=args.limit, sort_field="send_time", sort_dir="DESC")
        )
        print(f"{'Campaign':12} | {'Sent':>8} | {'Opens':>8} | {'Clicks':>8}")
        print("-" * 45)
        shown = 0
        async for campaign in iterator:
            if shown >= args.limit:
                break
            shown += 1
            report = await client.reports.get(campaign.id)
            opens = (report.opens or {}).get("opens_total", 0)
            clicks = (report.clicks or {}).get("clicks_total", 0)
            print(f"{campaign.id:12} | {report.emails_sent or 0:>8} | {opens:>8} | {clicks:>8}")


if __name__ == "__main__":
    asyncio.run(main())
