"""Print or save the Codeforces problem of the day.

Usage: codeforces-daily [--save | -s]
"""

import asyncio
import json
import sys

from loguru import logger

from gitexpress.config import configure_logging, get_settings
from gitexpress.domain.exceptions import GitExpressError
from gitexpress.services import create_codeforces_service
from gitexpress.services.codeforces import format_summary


async def main() -> int:
    settings = get_settings()
    configure_logging(settings.log_level)

    service = create_codeforces_service(settings)
    save = "--save" in sys.argv or "-s" in sys.argv

    try:
        if save:
            await service.save_to_file()
        else:
            record = await service.get_daily_problem()
            print(json.dumps(format_summary(record), indent=2, ensure_ascii=False))
    except GitExpressError as e:
        logger.error(f"❌ Error: {e}")
        return 1

    return 0


def cli() -> None:
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    cli()
