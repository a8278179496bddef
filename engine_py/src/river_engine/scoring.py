"""
Round scoring policies.

A policy maps ``(bid, tricks_won)`` to the points a player earns for a round.
Every policy must be deterministic, and an exact bid must always score
strictly more than any missed bid. The point values below are provisional
until confirmed with the product owner.
"""

from typing import Callable, Dict

SCORE_BASE = 10  # Base score for making exact bid

ScoringPolicy = Callable[[int, int], int]


def exact_bonus(bid: int, tricks_won: int) -> int:
    """10 + bid for an exact bid, nothing otherwise."""
    if tricks_won == bid:
        return SCORE_BASE + bid
    return 0


def exact_penalty(bid: int, tricks_won: int) -> int:
    """10 + bid for an exact bid, minus one point per trick missed by otherwise."""
    if tricks_won == bid:
        return SCORE_BASE + bid
    return -abs(bid - tricks_won)


SCORING_POLICIES: Dict[str, ScoringPolicy] = {
    "exact_bonus": exact_bonus,
    "exact_penalty": exact_penalty,
}

DEFAULT_POLICY = "exact_bonus"


def get_policy(name: str) -> ScoringPolicy:
    try:
        return SCORING_POLICIES[name]
    except KeyError:
        raise ValueError(f"Unknown scoring policy: {name}")


def register_policy(name: str, policy: ScoringPolicy) -> None:
    """Make a custom policy selectable through ``RuleConfig.scoring_policy``."""
    SCORING_POLICIES[name] = policy


def is_hit(bid: int, tricks_won: int) -> bool:
    return bid == tricks_won
