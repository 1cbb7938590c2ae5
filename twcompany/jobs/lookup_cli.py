"""CLI job to look up a company from the terminal."""

import argparse
import json
import logging
from typing import List, Optional

from twcompany.core.config import ConfigError, get_settings
from twcompany.core.lookup import CHAINS, THIRDPARTY, ProvidersExhausted, lookup

logger = logging.getLogger(__name__)


def run_lookup(keyword: str, source: str) -> str:
    result = lookup(source, keyword)
    logger.info("Lookup answered by %s with %d records", result.provider, result.count)
    payload = {
        "provider": result.provider,
        "count": result.count,
        "data": [record.to_dict() for record in result.records],
    }
    return json.dumps(payload, ensure_ascii=False, indent=2)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Look up Taiwanese company registration data")
    parser.add_argument("keyword", help="Company name or 8-digit 統一編號, e.g. '台積電' or '97176009'")
    parser.add_argument(
        "--source",
        dest="source",
        choices=sorted(CHAINS),
        default=THIRDPARTY,
        help="Provider chain to query",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s - %(message)s")
    args = build_parser().parse_args(argv)

    try:
        logging.getLogger().setLevel(get_settings().log_level)
        output = run_lookup(args.keyword, args.source)
    except ConfigError as exc:
        logger.error("Configuration error: %s", exc)
        raise SystemExit(2) from exc
    except ValueError as exc:
        logger.error("Invalid lookup: %s", exc)
        raise SystemExit(2) from exc
    except ProvidersExhausted as exc:
        logger.error("Lookup failed: %s (last error: %s)", exc, exc.last_error)
        raise SystemExit(1) from exc

    print(output)


if __name__ == "__main__":
    main()
