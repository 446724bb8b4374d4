"""
Strength Estimator Service Module

Maps a free-text team name to a synthetic strength score using the
reference tier table plus a random offset inside the tier's range.
"""

import random
from typing import Optional

from betting_agent.domain.constants import (
    TOP_TIER_TEAMS,
    GOOD_TIER_TEAMS,
    TOP_TIER_RANGE,
    GOOD_TIER_RANGE,
    DEFAULT_TIER_RANGE,
)
from betting_agent.domain.entities.entities import StrengthTier
from betting_agent.domain.value_objects.value_objects import StrengthRange, TeamTierTable


DEFAULT_TIER_TABLE = TeamTierTable(top=TOP_TIER_TEAMS, good=GOOD_TIER_TEAMS)

DEFAULT_TIER_RANGES = {
    StrengthTier.TOP: StrengthRange(*TOP_TIER_RANGE),
    StrengthTier.GOOD: StrengthRange(*GOOD_TIER_RANGE),
    StrengthTier.DEFAULT: StrengthRange(*DEFAULT_TIER_RANGE),
}


class StrengthEstimator:
    """
    Domain service estimating team strength from its name.
    
    The random source is injected so tests can pin the draw; by default
    each estimator gets its own unseeded random.Random.
    """
    
    def __init__(
        self,
        rng: Optional[random.Random] = None,
        tier_table: TeamTierTable = DEFAULT_TIER_TABLE,
        tier_ranges: Optional[dict] = None,
    ):
        self.rng = rng if rng is not None else random.Random()
        self.tier_table = tier_table
        self.tier_ranges = tier_ranges or DEFAULT_TIER_RANGES
    
    def classify(self, team_name: str) -> StrengthTier:
        """
        Find the tier of a team name.
        
        Case-insensitive substring match of each reference token against
        the name. Top tier is checked before good tier.
        """
        name = (team_name or "").lower()
        
        if any(token in name for token in self.tier_table.top_tokens):
            return StrengthTier.TOP
        if any(token in name for token in self.tier_table.good_tokens):
            return StrengthTier.GOOD
        return StrengthTier.DEFAULT
    
    def estimate(self, team_name: str) -> float:
        """Estimate strength for a team name (non-deterministic unless rng is seeded)."""
        tier = self.classify(team_name)
        return self.tier_ranges[tier].draw(self.rng)
