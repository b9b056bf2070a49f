#!/usr/bin/env python3
"""
Environment variable check helper intended to run in a deployment
environment. Prints the effective subsidy lookup settings and highlights
values that commonly break extraction (missing source URL, no timeout).
"""
from app.core.config import settings

EXPECTED_SOURCE_URL = "https://ev.or.kr/nportal/buySupprt/initPsLocalCarPirceAction.do"


def check_environment():
    """Print a summary of the subsidy settings."""
    print("Starting environment variable check")

    values = [
        ("SUBSIDY_SOURCE_URL", settings.SUBSIDY_SOURCE_URL),
        ("SUBSIDY_SOURCE_NAME", settings.SUBSIDY_SOURCE_NAME),
        ("SUBSIDY_FETCH_TIMEOUT_SECONDS", settings.SUBSIDY_FETCH_TIMEOUT_SECONDS),
        ("SUBSIDY_CACHE_BACKEND", settings.SUBSIDY_CACHE_BACKEND),
        ("SUBSIDY_CACHE_TTL_SECONDS", settings.SUBSIDY_CACHE_TTL_SECONDS),
        ("REDIS_HOST", settings.REDIS_HOST),
        ("REDIS_PORT", settings.REDIS_PORT),
        ("REDIS_PASSWORD", settings.REDIS_PASSWORD),
        ("ALLOWED_ORIGINS", settings.ALLOWED_ORIGINS),
    ]

    print("\nEnvironment variables summary:")
    for var_name, var_value in values:
        if var_value in (None, ""):
            print(f"  {var_name}: NOT SET")
        elif "PASSWORD" in var_name:
            print(f"  {var_name}: ***")
        else:
            print(f"  {var_name}: {var_value}")

    print("\nSource URL check:")
    print(f"  Configured URL: {settings.SUBSIDY_SOURCE_URL}")
    print(f"  Expected URL: {EXPECTED_SOURCE_URL}")
    if settings.SUBSIDY_SOURCE_URL == EXPECTED_SOURCE_URL:
        print("  Source URL matches expected value")
    else:
        print("  Source URL does not match the expected value")

    if settings.SUBSIDY_FETCH_TIMEOUT_SECONDS <= 0:
        print("  WARNING: fetch timeout is disabled; requests may hang")

    print("\nOther settings:")
    print(f"  ENVIRONMENT: {settings.ENVIRONMENT}")
    print(f"  DOCKER_ENV: {settings.DOCKER_ENV}")


if __name__ == "__main__":
    check_environment()
