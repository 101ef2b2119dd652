"""Print or save today's LeetCode daily challenge.

Usage: leetcode-daily [--save | -s]
"""

import asyncio
import sys

from loguru import logger

from gitexpress.config import configure_logging, get_settings
from gitexpress.domain.exceptions import GitExpressError
from gitexpress.services import create_leetcode_service
from gitexpress.services.leetcode import format_report


async def main() -> int:
    settings = get_settings()
    configure_logging(settings.log_level)

    service = create_leetcode_service(settings)
    save = "--save" in sys.argv or "-s" in sys.argv

    try:
        if save:
            await service.save_to_file()
        else:
            print(format_report(await service.get_daily_problem()))
    except GitExpressError as e:
        logger.error(f"❌ Error: {e}")
        return 1

    return 0


def cli() -> None:
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    cli()
