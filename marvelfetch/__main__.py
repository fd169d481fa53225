"""Command line entry point: ``python -m marvelfetch characters --top 20``."""

import argparse
import logging
import sys
from typing import List, Optional

from .auth import ClientConfig, load_credentials
from .client import MarvelClient
from .exceptions import MarvelFetchError
from .formatters import FORMATTERS, character_rows, comic_rows

logger = logging.getLogger("marvelfetch")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="marvelfetch",
        description="Fetch a complete Marvel catalog collection and summarise it.",
    )
    parser.add_argument("resource", choices=["characters", "comics"])
    parser.add_argument(
        "--top", type=int, default=None, help="Only show the first N rows"
    )
    parser.add_argument(
        "--format", dest="fmt", choices=sorted(FORMATTERS), default="table"
    )
    parser.add_argument(
        "--strategy",
        choices=["all", "environment", "dotenv"],
        default="all",
        help="Where to read MARVEL_PUBLIC_KEY / MARVEL_PRIVATE_KEY from",
    )
    parser.add_argument("--dotenv", default=None, help="Path to a .env file")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        credentials = load_credentials(args.strategy, dotenv_path=args.dotenv)
        with MarvelClient(credentials, ClientConfig.from_environment()) as client:
            if args.resource == "characters":
                rows = character_rows(client.fetch_characters(), top=args.top)
            else:
                rows = comic_rows(client.fetch_comics(), top=args.top)
    except MarvelFetchError as err:
        logger.error("%s", err)
        return 1

    print(FORMATTERS[args.fmt](rows))
    return 0


if __name__ == "__main__":
    sys.exit(main())
