from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field

ACTIVE_STATUS = "ACTIVE"


class PrizeTier(BaseModel):
    """One payout bracket of a scratch-off game. Amounts are in cents."""
    winning_tickets: int = Field(..., alias="winningTickets")
    claimed_tickets: int = Field(0, alias="claimedTickets")
    prize_amount: int = Field(..., alias="prizeAmount", description="Prize in cents")

    paid_tickets: Optional[int] = Field(None, alias="paidTickets")
    prize_description: Optional[str] = Field(None, alias="prizeDescription")
    tier_number: Optional[int] = Field(None, alias="tierNumber")
    original_tier_number: Optional[int] = Field(None, alias="originalTierNumber")
    tier_type: Optional[int] = Field(None, alias="tierType")

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    @property
    def remaining_tickets(self) -> int:
        return self.winning_tickets - self.claimed_tickets


class Game(BaseModel):
    """A single instant game as listed by the lottery."""
    name: str = Field(..., alias="gameName")
    ticket_price: int = Field(..., alias="ticketPrice", description="Ticket price in cents")
    total_tickets_printed: int = Field(..., alias="totalTicketsPrinted")
    validation_status: str = Field(..., alias="validationStatus")
    prize_tiers: List[PrizeTier] = Field(default_factory=list, alias="prizeTiers")

    game_id: Optional[str] = Field(None, alias="gameId")
    # Epoch milliseconds
    start_distribution_date: Optional[int] = Field(None, alias="startDistributionDate")
    end_distribution_date: Optional[int] = Field(None, alias="endDistributionDate")
    disable_date: Optional[int] = Field(None, alias="disableDate")

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    @property
    def ticket_price_dollars(self) -> float:
        return self.ticket_price / 100

    @property
    def is_active(self) -> bool:
        return self.validation_status == ACTIVE_STATUS


class Catalog(BaseModel):
    """Top-level listing payload. Only `games` is consumed."""
    games: List[Game]
    next_page_url: Optional[str] = Field(None, alias="nextPageUrl")

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")
