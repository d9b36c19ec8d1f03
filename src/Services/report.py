from typing import List, Optional, Union
import logging

from src.DataProviders.models import Catalog, Game
from src.EVEngine.ev_calculator import EVPolicy, EVResult, expected_value
from src.EVEngine import config as ev_config

logger = logging.getLogger("EVReport")

MODE_LIST = "list"
MODE_BEST = "best"
MODES = (MODE_LIST, MODE_BEST)


def active_games(catalog: Catalog) -> List[Game]:
    """ACTIVE games, in catalog order."""
    return [game for game in catalog.games if game.is_active]


def evaluate_catalog(catalog: Catalog, policy: Union[str, EVPolicy] = ev_config.DEFAULT_POLICY) -> List[EVResult]:
    results = []
    for game in active_games(catalog):
        result = expected_value(game, policy)
        if not result.is_defined:
            logger.warning(f"EV undefined for '{game.name}': {result.reason}")
        else:
            logger.debug(str(result))
        results.append(result)
    return results


def select_best(results: List[EVResult]) -> Optional[EVResult]:
    """
    Highest defined EV. Ties keep the earliest game.
    Returns None if no result has a defined EV.
    """
    best = None
    for result in results:
        if not result.is_defined:
            continue
        if best is None or best.ev < result.ev:
            best = result
    return best


def _format_ev(result: EVResult) -> str:
    return f"{result.ev:.2f}" if result.is_defined else ev_config.UNDEFINED_LABEL


def format_listing_line(result: EVResult) -> str:
    return f"{result.game_name};{result.ticket_price:.2f};{_format_ev(result)}"


def format_best_block(result: EVResult) -> str:
    return (
        f"Contest: {result.game_name}\n"
        f"Ticket Price ($): {result.ticket_price:.2f}\n"
        f"Expected Value ($): {_format_ev(result)}\n\n"
    )


def render_report(catalog: Catalog, policy: Union[str, EVPolicy] = ev_config.DEFAULT_POLICY, mode: str = MODE_LIST) -> str:
    """
    Build the stdout text for a catalog.

    mode "list": one `name;price;ev` line per active game.
    mode "best": the block for the single best game, or "" if none qualifies.
    """
    if mode not in MODES:
        raise ValueError(f"Unknown report mode '{mode}'. Choose from: {', '.join(MODES)}")

    results = evaluate_catalog(catalog, policy)
    logger.info(f"Evaluated {len(results)} active games out of {len(catalog.games)}")

    if mode == MODE_LIST:
        return "".join(format_listing_line(r) + "\n" for r in results)

    best = select_best(results)
    if best is None:
        logger.warning("No active game with a defined EV")
        return ""
    return format_best_block(best)
