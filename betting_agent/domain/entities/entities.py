"""
Domain Entities Module

This module contains the core domain entities for the match analysis system.
All entities are built fresh per request and never mutated afterwards.
"""

from dataclasses import dataclass, field
from enum import Enum

from betting_agent.domain.exceptions import MatchValidationException
from betting_agent.domain.value_objects.value_objects import Odds, OutcomeProbabilities


class MatchOutcome(Enum):
    """Possible outcomes of a football match."""
    HOME_WIN = "home_win"
    DRAW = "draw"
    AWAY_WIN = "away_win"


class StrengthTier(Enum):
    """Reference tier a team name falls into."""
    TOP = "top"
    GOOD = "good"
    DEFAULT = "default"


class StrengthGap(Enum):
    """How far apart the two sides are, for the analysis paragraph."""
    CLOSE = "close"
    HOME_FAVORED = "home_favored"
    AWAY_FAVORED = "away_favored"


class Dominance(Enum):
    """Which side clearly dominates, for the key factor list."""
    HOME = "home"
    AWAY = "away"
    BALANCED = "balanced"


@dataclass(frozen=True)
class MatchRequest:
    """
    A request to analyze a fixture.
    
    Attributes:
        home_team: Home team name (required)
        away_team: Away team name (required)
        league: League or competition, free text
    """
    home_team: str
    away_team: str
    league: str = ""
    
    def __post_init__(self):
        if not self.home_team:
            raise MatchValidationException("Home team is required")
        if not self.away_team:
            raise MatchValidationException("Away team is required")


@dataclass(frozen=True)
class MatchInfo:
    """Fixture header shown with an analysis."""
    home_team: str
    away_team: str
    league: str
    date: str


@dataclass(frozen=True)
class AnalysisResult:
    """
    Complete output of a match analysis.
    
    Attributes:
        match: Fixture header
        prediction: Predicted outcome text (e.g. "Arsenal to win" or "Draw")
        outcome: Predicted outcome
        confidence: Winning probability as a percentage, capped at 85
        recommended_bet: Suggested bet with its price
        odds: Decimal odds for each outcome
        analysis: Narrative paragraph
        key_factors: Ordered list of supporting factors
        home_strength: Estimated home strength
        away_strength: Estimated away strength
        probabilities: Normalized outcome probabilities
    """
    match: MatchInfo
    prediction: str
    outcome: MatchOutcome
    confidence: int
    recommended_bet: str
    odds: Odds
    analysis: str
    key_factors: list[str] = field(default_factory=list)
    home_strength: float = 0.0
    away_strength: float = 0.0
    probabilities: OutcomeProbabilities | None = None
