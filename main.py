"""
===========================================
NJ LOTTERY INSTANT GAMES - EV SCANNER
===========================================
Fetches the instant-game catalog and prints the expected value
of every active game, or only the best one.
"""

import argparse
import logging
import sys

from src.DataProviders.errors import CatalogDecodeError, CatalogFetchError
from src.DataProviders.njlottery import NJLotteryProvider
from src.EVEngine.ev_calculator import POLICIES
from src.Services.report import MODES, render_report
from src.Utils.settings import SettingsError, load_settings

logger = logging.getLogger("EVScanner")

EXIT_OK = 0
EXIT_FETCH_ERROR = 1
EXIT_DECODE_ERROR = 2
EXIT_CONFIG_ERROR = 3


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Expected value of NJ Lottery instant games.")
    parser.add_argument("--mode", choices=MODES, help="Print every active game (list) or only the best one (best).")
    parser.add_argument("--policy", choices=sorted(POLICIES), help="EV formula to use.")
    parser.add_argument("--config", help="Path to a config.toml (default: repo root config.toml).")
    parser.add_argument("--page-size", type=int, help="Override the catalog page size.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    return parser


def run(argv=None, session=None, out=None) -> int:
    args = build_parser().parse_args(argv)
    out = out or sys.stdout

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        settings = load_settings(args.config)
    except SettingsError as e:
        logger.error(str(e))
        return EXIT_CONFIG_ERROR

    mode = args.mode or settings.report.mode
    policy = args.policy or settings.report.policy
    fetch_config = settings.fetch
    if args.page_size is not None:
        if args.page_size <= 0:
            logger.error(f"Page size must be positive, got {args.page_size}")
            return EXIT_CONFIG_ERROR
        fetch_config = fetch_config.model_copy(update={"page_size": args.page_size})

    provider = NJLotteryProvider(fetch_config, session=session)
    try:
        catalog = provider.fetch_catalog()
    except CatalogFetchError as e:
        logger.error(str(e))
        return EXIT_FETCH_ERROR
    except CatalogDecodeError as e:
        logger.error(str(e))
        return EXIT_DECODE_ERROR

    out.write(render_report(catalog, policy=policy, mode=mode))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(run())
