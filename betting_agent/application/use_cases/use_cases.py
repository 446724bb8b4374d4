"""
Application Use Cases Module

Use cases represent application-specific business rules and orchestrate
the flow of data between the domain layer and the API layer.
"""

import asyncio
import logging

from betting_agent.domain.constants import LEAGUES_METADATA, DEFAULT_LEAGUE_ID
from betting_agent.domain.entities.entities import AnalysisResult, MatchRequest
from betting_agent.domain.exceptions import MatchValidationException
from betting_agent.domain.services.match_analyzer import MatchAnalyzer
from betting_agent.application.dtos.dtos import (
    AnalyzeMatchRequestDTO,
    AnalysisResponseDTO,
    LeagueDTO,
    LeaguesResponseDTO,
    MatchInfoDTO,
    OddsDTO,
)


logger = logging.getLogger(__name__)


class AnalyzeMatchUseCase:
    """Use case for analyzing a single fixture."""
    
    def __init__(self, analyzer: MatchAnalyzer, delay_seconds: float = 0.0):
        self.analyzer = analyzer
        self.delay_seconds = delay_seconds
    
    async def execute(self, request: AnalyzeMatchRequestDTO) -> AnalysisResponseDTO:
        """
        Validate the request, pause for the configured delay and analyze.
        
        Raises:
            MatchValidationException: If either team name is missing
        """
        try:
            match_request = MatchRequest(
                home_team=request.home_team or "",
                away_team=request.away_team or "",
                league=request.league or "",
            )
        except MatchValidationException as e:
            logger.warning(f"Rejected analysis request: {e}")
            raise
        
        if self.delay_seconds > 0:
            await asyncio.sleep(self.delay_seconds)
        
        result = self.analyzer.analyze(match_request)
        logger.info(
            f"Analyzed {match_request.home_team} vs {match_request.away_team} "
            f"({match_request.league or 'no league'}): {result.prediction} @ {result.confidence}%"
        )
        return self._to_dto(result)
    
    @staticmethod
    def _to_dto(result: AnalysisResult) -> AnalysisResponseDTO:
        return AnalysisResponseDTO(
            match=MatchInfoDTO(
                home_team=result.match.home_team,
                away_team=result.match.away_team,
                league=result.match.league,
                date=result.match.date,
            ),
            prediction=result.prediction,
            confidence=result.confidence,
            recommended_bet=result.recommended_bet,
            odds=OddsDTO(
                home=result.odds.home,
                draw=result.odds.draw,
                away=result.odds.away,
            ),
            analysis=result.analysis,
            key_factors=list(result.key_factors),
        )


class GetLeaguesUseCase:
    """Use case for listing the leagues offered by the analysis form."""
    
    async def execute(self) -> LeaguesResponseDTO:
        leagues = [
            LeagueDTO(id=league_id, name=meta["name"], country=meta["country"])
            for league_id, meta in LEAGUES_METADATA.items()
        ]
        return LeaguesResponseDTO(
            leagues=leagues,
            default_league=LEAGUES_METADATA[DEFAULT_LEAGUE_ID]["name"],
            total_leagues=len(leagues),
        )
