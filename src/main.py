from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from config import config
from services.provident_client import FetchError, ParseError, ProvidentMetalsClient, SchemaError, SpotPriceError
from services.spot_summary import fetch_spot_summary

logger = logging.getLogger(__name__)

EXIT_CODES: dict[type[SpotPriceError], int] = {
    FetchError: 2,
    ParseError: 3,
    SchemaError: 4,
}


def positive_float(raw: str) -> float:
    try:
        value = float(raw)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid number: {raw!r}") from exc
    if not value > 0:
        raise argparse.ArgumentTypeError(f"must be > 0: {raw!r}")
    return value


def build_client(*, url: str | None, timeout: float | None) -> ProvidentMetalsClient:
    settings = config()
    return ProvidentMetalsClient(
        base_url=url or settings.provident_base_url,
        currency=settings.spot_currency,
        timeout=timeout if timeout is not None else settings.http_timeout,
    )


def run(client: ProvidentMetalsClient) -> int:
    try:
        line = fetch_spot_summary(client)
    except SpotPriceError as exc:
        logger.error("%s: %s (status=%s)", type(exc).__name__, exc, exc.status_code)
        return EXIT_CODES.get(type(exc), 1)

    print(line)
    return 0


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Print current gold and silver spot prices as JSON.")
    parser.add_argument("--url", default=None, help="Base URL of the spot summary service.")
    parser.add_argument("--timeout", type=positive_float, default=None, help="HTTP timeout in seconds.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log progress to stderr.")
    args = parser.parse_args(argv)

    level = logging.INFO if args.verbose else config().log_level.upper()
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s %(message)s", stream=sys.stderr)

    client = build_client(url=args.url, timeout=args.timeout)
    sys.exit(run(client))


if __name__ == "__main__":
    main()
