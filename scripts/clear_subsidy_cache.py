#!/usr/bin/env python3
"""
Show and optionally delete the Redis-backed subsidy cache.

The cache lives under two keys (see app/services/subsidy_cache.py):
  {prefix}:map  hash of "region||trim" -> won
  {prefix}:ts   shared generation timestamp (epoch ms)

Usage:
  # dry-run (default) - list entries only
  REDIS_HOST=localhost REDIS_PORT=6379 python3 scripts/clear_subsidy_cache.py

  # actually delete the cache
  REDIS_HOST=localhost REDIS_PORT=6379 python3 scripts/clear_subsidy_cache.py --delete

If REDIS_PASSWORD is set, it will be used.
"""

import argparse
import asyncio
import os
from datetime import datetime, timezone

import redis
from redis.asyncio import Redis as AsyncRedis

from app.services.subsidy_cache import RedisSubsidyCache


def parse_args():
    p = argparse.ArgumentParser(description="Show and optionally delete the subsidy cache in Redis")
    p.add_argument("--prefix", default=os.environ.get("REDIS_CACHE_PREFIX", "subsidy:cache"),
                   help="Cache key prefix")
    p.add_argument("--delete", action="store_true", help="Delete the cache (use with caution)")
    return p.parse_args()


async def clear_cache(host, port, password, prefix):
    client = AsyncRedis(host=host, port=port, password=password, decode_responses=True)
    try:
        return await RedisSubsidyCache(client, ttl_seconds=0, prefix=prefix).clear()
    finally:
        await client.aclose()


def main():
    args = parse_args()

    host = os.environ.get("REDIS_HOST", "localhost")
    port = int(os.environ.get("REDIS_PORT", 6379))
    password = os.environ.get("REDIS_PASSWORD") or None

    print(f"Connecting to Redis {host}:{port} (password set: {'yes' if password else 'no'})")
    try:
        r = redis.Redis(host=host, port=port, password=password, decode_responses=True)
        r.ping()
    except redis.RedisError as e:
        print(f"ERROR: cannot connect to Redis: {e}")
        return 2

    map_key = f"{args.prefix}:map"
    ts_key = f"{args.prefix}:ts"

    entries = r.hgetall(map_key)
    ts = r.get(ts_key)
    if ts:
        generated = datetime.fromtimestamp(int(ts) / 1000, tz=timezone.utc).isoformat()
        print(f"Cache generation: {generated}")

    if not entries:
        print("No cached subsidy entries found.")
    else:
        print(f"Found {len(entries)} entr{'y' if len(entries) == 1 else 'ies'}:")
        for key, won in sorted(entries.items()):
            print(f"   {key}: {int(won):,}원")

    if args.delete:
        deleted = asyncio.run(clear_cache(host, port, password, args.prefix))
        print(f"Deleted {deleted} key(s)")
    else:
        print("Dry-run: nothing was deleted. Re-run with --delete to remove the cache.")

    return 0


if __name__ == '__main__':
    raise SystemExit(main())
