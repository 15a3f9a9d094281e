#!/usr/bin/env python
"""
Periodic maintenance for the Guidepost backend.

Deletes expired session rows. Expired sessions are already rejected on
read; this only reclaims storage. Schedule it (cron, a Supabase scheduled
function, etc.) as often as you like.

Usage:
    uv run python run_maintenance.py
"""

import argparse
import asyncio
import logging

from api.dependencies import get_container
from shared.config import get_settings
from shared.log_config import configure_logging

logger = logging.getLogger("guidepost.maintenance")


async def purge_sessions() -> int:
    return await get_container().auth.purge_expired_sessions()


def main():
    parser = argparse.ArgumentParser(description="Guidepost maintenance tasks")
    parser.add_argument("--log-level", type=str, help="Override the configured log level")
    args = parser.parse_args()

    configure_logging(args.log_level or get_settings().log_level)
    removed = asyncio.run(purge_sessions())
    logger.info("Maintenance finished: %d expired session(s) removed", removed)


if __name__ == "__main__":
    main()
