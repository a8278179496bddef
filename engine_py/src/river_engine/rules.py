"""
Game rule configuration and validation.
"""

from pydantic import BaseModel, Field, field_validator

from .constants import MAX_PLAYERS, MIN_PLAYERS, max_cards_for_table
from .scoring import DEFAULT_POLICY, SCORING_POLICIES


class RuleConfig(BaseModel):
    """Configuration for game rules and settings."""

    min_players: int = Field(
        default=MIN_PLAYERS,
        ge=MIN_PLAYERS,
        le=MAX_PLAYERS,
        description="Minimum number of players required to start"
    )
    max_players: int = Field(
        default=MAX_PLAYERS,
        ge=MIN_PLAYERS,
        le=MAX_PLAYERS,
        description="Maximum number of players allowed"
    )
    dealer_hook: bool = Field(
        default=False,
        description="Forbid the last bidder from making total bids equal the cards dealt"
    )
    random_first_dealer: bool = Field(
        default=False,
        description="Pick the first round's dealer at random instead of seat 0"
    )
    scoring_policy: str = Field(
        default=DEFAULT_POLICY,
        description="Name of the scoring policy applied when a round is settled"
    )
    auto_play_bots: bool = Field(
        default=True,
        description="Let bot seats act automatically whenever it is their turn"
    )

    @field_validator('max_players')
    @classmethod
    def validate_max_players(cls, v, info):
        """Validate maximum players doesn't fall below minimum."""
        min_players = info.data.get('min_players', MIN_PLAYERS)
        if v < min_players:
            raise ValueError(f'max_players ({v}) must be >= min_players ({min_players})')
        return v

    @field_validator('scoring_policy')
    @classmethod
    def validate_scoring_policy(cls, v):
        if v not in SCORING_POLICIES:
            raise ValueError(f"Unknown scoring policy '{v}'; choose from {sorted(SCORING_POLICIES)}")
        return v

    def largest_max_cards(self) -> int:
        """Largest ceiling that can still be dealt at the smallest legal table."""
        return max_cards_for_table(self.min_players)


# Default configuration instance
default_rules = RuleConfig()


def create_rules(**overrides) -> RuleConfig:
    """Create a RuleConfig with optional overrides."""
    config_dict = default_rules.model_dump()
    config_dict.update(overrides)
    return RuleConfig(**config_dict)
