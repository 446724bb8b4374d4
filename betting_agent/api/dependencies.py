"""
API Dependencies Module

Provides dependency injection for FastAPI routes.
Contains factory functions for creating services and use cases.
"""

from functools import lru_cache

from fastapi import Depends

from betting_agent import config
from betting_agent.domain.services.strength_estimator import StrengthEstimator
from betting_agent.domain.services.match_analyzer import MatchAnalyzer
from betting_agent.application.use_cases.use_cases import AnalyzeMatchUseCase, GetLeaguesUseCase


@lru_cache()
def get_strength_estimator() -> StrengthEstimator:
    """Get strength estimator (cached)."""
    return StrengthEstimator()


@lru_cache()
def get_match_analyzer() -> MatchAnalyzer:
    """Get match analyzer (cached)."""
    return MatchAnalyzer(estimator=get_strength_estimator())


def get_analyze_match_use_case(
    analyzer: MatchAnalyzer = Depends(get_match_analyzer),
) -> AnalyzeMatchUseCase:
    """Get analyze-match use case with the currently configured delay."""
    return AnalyzeMatchUseCase(analyzer, delay_seconds=config.ANALYSIS_DELAY_SECONDS)


def get_leagues_use_case() -> GetLeaguesUseCase:
    """Get leagues use case."""
    return GetLeaguesUseCase()
