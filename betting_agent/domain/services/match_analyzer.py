"""
Match Analyzer Service Module

Combines the two team strengths into outcome probabilities, prices
them as decimal odds, picks a prediction and assembles the narrative.

This is a pure domain service: given its random source and clock, the
same request always yields the same result.
"""

import math
from typing import Callable, Optional

from betting_agent.domain.constants import (
    HOME_ADVANTAGE,
    DRAW_BIAS,
    BOOKMAKER_MARGIN,
    CONFIDENCE_CAP,
)
from betting_agent.domain.entities.entities import (
    AnalysisResult,
    MatchInfo,
    MatchOutcome,
    MatchRequest,
)
from betting_agent.domain.services.narrative_service import (
    build_analysis_text,
    build_key_factors,
    classify_strength_gap,
)
from betting_agent.domain.services.strength_estimator import StrengthEstimator
from betting_agent.domain.value_objects.value_objects import Odds, OutcomeProbabilities
from betting_agent.utils.time_utils import get_match_date_str


class MatchAnalyzer:
    """
    Domain service producing a full analysis for a fixture.
    
    Args:
        estimator: Strength estimator (owns the random source)
        date_provider: Returns the display date stamped on the result
    """
    
    def __init__(
        self,
        estimator: Optional[StrengthEstimator] = None,
        date_provider: Callable[[], str] = get_match_date_str,
    ):
        self.estimator = estimator or StrengthEstimator()
        self.date_provider = date_provider
    
    def calculate_raw_probabilities(
        self,
        home_strength: float,
        away_strength: float,
    ) -> OutcomeProbabilities:
        """
        Raw outcome estimates before normalization.
        
        The draw estimate carries a flat +0.1 bias on top of whatever
        the home and away shares leave over.
        """
        total_strength = home_strength + HOME_ADVANTAGE + away_strength
        
        home_probability = (home_strength + HOME_ADVANTAGE) / total_strength
        away_probability = away_strength / total_strength
        draw_probability = 1 - home_probability - away_probability + DRAW_BIAS
        
        return OutcomeProbabilities(
            home=home_probability,
            draw=draw_probability,
            away=away_probability,
        )
    
    def select_outcome(self, probabilities: OutcomeProbabilities) -> MatchOutcome:
        """
        Pick the outcome with the strictly greatest probability.
        
        Home is checked first, then away; anything else is a draw.
        """
        if probabilities.home > probabilities.away and probabilities.home > probabilities.draw:
            return MatchOutcome.HOME_WIN
        elif probabilities.away > probabilities.home and probabilities.away > probabilities.draw:
            return MatchOutcome.AWAY_WIN
        return MatchOutcome.DRAW
    
    def calculate_confidence(self, probability: float) -> int:
        """Rounded percentage (half up), capped at 85."""
        confidence = int(math.floor(probability * 100 + 0.5))
        return min(confidence, CONFIDENCE_CAP)
    
    def analyze_strengths(
        self,
        request: MatchRequest,
        home_strength: float,
        away_strength: float,
    ) -> AnalysisResult:
        """
        Build the analysis from already estimated strengths.
        
        Args:
            request: The validated match request
            home_strength: Home team strength
            away_strength: Away team strength
            
        Returns:
            Complete AnalysisResult
        """
        home_team = request.home_team
        away_team = request.away_team
        league = request.league
        
        probabilities = self.calculate_raw_probabilities(home_strength, away_strength).normalized()
        odds = Odds.from_probabilities(probabilities, BOOKMAKER_MARGIN)
        
        outcome = self.select_outcome(probabilities)
        if outcome == MatchOutcome.HOME_WIN:
            prediction = f"{home_team} to win"
            recommended_bet = f"Back {home_team} at {odds.home:.2f}"
            winning_probability = probabilities.home
        elif outcome == MatchOutcome.AWAY_WIN:
            prediction = f"{away_team} to win"
            recommended_bet = f"Back {away_team} at {odds.away:.2f}"
            winning_probability = probabilities.away
        else:
            prediction = "Draw"
            recommended_bet = f"Back Draw at {odds.draw:.2f}"
            winning_probability = probabilities.draw
        
        gap = classify_strength_gap(home_strength, away_strength)
        
        return AnalysisResult(
            match=MatchInfo(
                home_team=home_team,
                away_team=away_team,
                league=league,
                date=self.date_provider(),
            ),
            prediction=prediction,
            outcome=outcome,
            confidence=self.calculate_confidence(winning_probability),
            recommended_bet=recommended_bet,
            odds=odds,
            analysis=build_analysis_text(gap, home_team, away_team, league),
            key_factors=build_key_factors(home_team, away_team, home_strength, away_strength),
            home_strength=home_strength,
            away_strength=away_strength,
            probabilities=probabilities,
        )
    
    def analyze(self, request: MatchRequest) -> AnalysisResult:
        """Estimate both strengths (home first) and analyze the match."""
        home_strength = self.estimator.estimate(request.home_team)
        away_strength = self.estimator.estimate(request.away_team)
        return self.analyze_strengths(request, home_strength, away_strength)
