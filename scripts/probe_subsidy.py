#!/usr/bin/env python3
"""
Fetch the live subsidy page once and print what the extractor finds.

Useful when the upstream page layout drifts and lookups start falling back
to manual mode.

Usage:
  python3 scripts/probe_subsidy.py --region 서울 --trim M3_LR
  python3 scripts/probe_subsidy.py --region 서울 --trim M3_LR --file saved_page.html
"""
import argparse
import asyncio

from app.services.extraction import extract
from app.services.extraction_result import Found
from app.services.subsidy_fetcher import SubsidyPageFetcher, SubsidySourceError
from app.services.text import normalize


def parse_args():
    p = argparse.ArgumentParser(description="Probe subsidy extraction against the live page")
    p.add_argument("--region", required=True)
    p.add_argument("--trim", required=True)
    p.add_argument("--file", help="Read page text from a saved file instead of fetching")
    return p.parse_args()


async def main():
    args = parse_args()

    if args.file:
        with open(args.file, encoding="utf-8") as f:
            page_text = f.read()
    else:
        try:
            page_text = await SubsidyPageFetcher().fetch()
        except SubsidySourceError as e:
            print(f"Fetch failed: {e}")
            return 2
    print(f"Page length: {len(page_text)} chars")

    result = extract(page_text, normalize(args.region), args.trim.strip())
    if isinstance(result, Found):
        print(f"Found: {result.amount_won:,}원 via {result.matched_alias}")
        return 0
    print(f"Not found: {result.reason.value}")
    return 1


if __name__ == "__main__":
    raise SystemExit(asyncio.run(main()))
