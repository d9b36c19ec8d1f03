import math
from abc import ABC, abstractmethod
from typing import Dict, Optional, Union
from pydantic import BaseModel, Field

from src.DataProviders.models import Game
from . import config

class EVResult(BaseModel):
    game_name: str = Field(..., description="Name of the evaluated game")
    policy: str = Field(..., description="Name of the EV policy used")
    ticket_price: float = Field(..., description="Ticket price in dollars")
    remaining_prize_value: float = Field(..., description="Unclaimed prize money in dollars")
    ev: Optional[float] = Field(None, description="Expected net return per ticket in dollars, None when undefined")
    is_value_bet: bool = Field(False, description="True if EV > 0")
    reason: Optional[str] = Field(None, description="Why EV is undefined")

    @property
    def is_defined(self) -> bool:
        return self.ev is not None

    def __str__(self):
        if not self.is_defined:
            return f"{self.game_name}: EV {config.UNDEFINED_LABEL} ({self.reason})"
        return f"{self.game_name}: EV ${self.ev:.2f} | Value: {self.is_value_bet} (Price: ${self.ticket_price:.2f}, {self.policy})"


def remaining_prize_cents(game: Game) -> int:
    """Sum of (winning - claimed) * prize over every tier."""
    return sum(tier.remaining_tickets * tier.prize_amount for tier in game.prize_tiers)


class EVPolicy(ABC):
    """A way of turning a game's prize table into an expected value per ticket."""
    name: str = ""

    @abstractmethod
    def remaining_tickets(self, game: Game) -> Optional[float]:
        """Number of tickets the remaining prizes are spread over, or None if unknown."""

    def calculate(self, game: Game) -> EVResult:
        """
        Calculate the Expected Value of buying one ticket of `game`.

        Formula: EV = remaining prize cents / (100 * remaining tickets) - price / 100

        A zero ticket count gives an undefined result (ev=None) instead of
        inf/NaN, so callers can report it explicitly.
        """
        remaining_cents = remaining_prize_cents(game)
        price = game.ticket_price_dollars
        base = dict(
            game_name=game.name,
            policy=self.name,
            ticket_price=price,
            remaining_prize_value=remaining_cents / 100,
        )

        tickets = self.remaining_tickets(game)
        if tickets is None or tickets == 0:
            return EVResult(**base, reason=self._undefined_reason(game))

        ev = remaining_cents / (100 * tickets) - price
        if not math.isfinite(ev):
            return EVResult(**base, reason="non-finite expected value")

        return EVResult(**base, ev=ev, is_value_bet=ev > 0)

    def _undefined_reason(self, game: Game) -> str:
        return "no tickets printed"


class SimpleEV(EVPolicy):
    """Assumes every printed ticket is still for sale."""
    name = config.POLICY_SIMPLE

    def remaining_tickets(self, game: Game) -> Optional[float]:
        return game.total_tickets_printed


class ClaimAdjustedEV(EVPolicy):
    """
    Estimates unsold tickets by assuming the share of prizes already claimed
    equals the share of tickets already sold.
    """
    name = config.POLICY_ADJUSTED

    def remaining_tickets(self, game: Game) -> Optional[float]:
        claimed = sum(tier.claimed_tickets for tier in game.prize_tiers)
        winning = sum(tier.winning_tickets for tier in game.prize_tiers)
        if winning == 0:
            return None

        percent_remaining = 1.0 - claimed / winning
        return percent_remaining * game.total_tickets_printed

    def _undefined_reason(self, game: Game) -> str:
        if sum(tier.winning_tickets for tier in game.prize_tiers) == 0:
            return "no winning tickets"
        if game.total_tickets_printed == 0:
            return "no tickets printed"
        return "all prizes claimed"


POLICIES: Dict[str, EVPolicy] = {
    SimpleEV.name: SimpleEV(),
    ClaimAdjustedEV.name: ClaimAdjustedEV(),
}


def get_policy(name: str) -> EVPolicy:
    """Look up a policy by name. Raises ValueError for unknown names."""
    try:
        return POLICIES[name]
    except KeyError:
        raise ValueError(f"Unknown EV policy '{name}'. Choose from: {', '.join(sorted(POLICIES))}")


def expected_value(game: Game, policy: Union[str, EVPolicy] = config.DEFAULT_POLICY) -> EVResult:
    """
    Calculate Expected Value (EV) for one ticket of a game.

    Args:
        game (Game): Parsed catalog entry.
        policy (str | EVPolicy): Policy name ("simple", "adjusted") or instance.

    Returns:
        EVResult: Object containing the EV, or ev=None when it is undefined.

    Raises:
        ValueError: If the policy name is unknown.
    """
    if isinstance(policy, str):
        policy = get_policy(policy)
    return policy.calculate(game)
