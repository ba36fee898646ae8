import argparse
import asyncio
import json
import logging
import sys

from dotenv import load_dotenv

load_dotenv()

from .report import run_health_checker
from .targets import ConfigError

logger = logging.getLogger(__name__)


async def run_forever(sites: str | None, webhook_urls, interval: float) -> None:
    while True:
        try:
            report = await run_health_checker(sites, webhook_urls)
            print(json.dumps(report, indent=4, ensure_ascii=False), flush=True)
        except ConfigError as e:
            logger.error(f"Health checker failed: {e}")
        await asyncio.sleep(interval)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Probe the configured services and print a health report")
    parser.add_argument('--sites', type=str, help='Path to the sites JSON/YAML document')
    parser.add_argument('--no-webhooks', action='store_true', help='Do not forward the report to WEBHOOK_URLS')
    parser.add_argument('--interval', type=float, default=0,
                        help='Repeat every N seconds (default: 0, run once)')
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stderr,
    )
    webhook_urls = [] if args.no_webhooks else None

    if args.interval > 0:
        try:
            asyncio.run(run_forever(args.sites, webhook_urls, args.interval))
        except KeyboardInterrupt:
            pass
        return 0

    try:
        report = asyncio.run(run_health_checker(args.sites, webhook_urls))
    except ConfigError as e:
        print(json.dumps({"error": "Health checker failed", "details": str(e)}, indent=4), file=sys.stderr)
        return 1
    print(json.dumps(report, indent=4, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
