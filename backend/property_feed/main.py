import argparse
import logging
import sys
from typing import Optional, Sequence

from property_feed.connectors.agents_society import AgentsSocietyConnector
from property_feed.core.config import get_settings
from property_feed.core.errors import FeedError
from property_feed.core.logging_config import setup_logging
from property_feed.workers.jobs import build_properties_json

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(
        prog="build-properties-json",
        description="Fetch the property XML feed and write normalized listings as JSON.",
    )
    parser.add_argument("--feed-url", default=settings.feed_url, help="XML feed to fetch")
    parser.add_argument("--output", default=settings.output_path, help="JSON file to write")
    parser.add_argument(
        "--timeout",
        type=float,
        default=settings.request_timeout_seconds,
        help="HTTP timeout in seconds (default: wait indefinitely)",
    )
    parser.add_argument("--log-level", default=settings.log_level, help="logging level (default: %(default)s)")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    connector = AgentsSocietyConnector(feed_url=args.feed_url, timeout=args.timeout)
    try:
        result = build_properties_json(output_path=args.output, connector=connector)
    except FeedError as exc:
        logger.debug("Build failed", exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(f"Wrote {result.count} properties to {result.output_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
