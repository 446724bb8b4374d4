"""
Data Transfer Objects (DTOs) Module

DTOs are used to transfer data between layers and to/from the API.
They use Pydantic for validation and serialization. Wire names are
camelCase to match the page that consumes them.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field


# ============================================================
# Request DTOs
# ============================================================

class AnalyzeMatchRequestDTO(BaseModel):
    """
    Request for a match analysis.
    
    Team names are optional at the schema level so a missing name is
    reported by the use case as a validation error, not a schema error.
    """
    home_team: Optional[str] = Field(default=None, alias="homeTeam", description="Home team name")
    away_team: Optional[str] = Field(default=None, alias="awayTeam", description="Away team name")
    league: Optional[str] = Field(default=None, description="League or competition (free text)")
    
    class Config:
        populate_by_name = True


# ============================================================
# Response DTOs
# ============================================================

class MatchInfoDTO(BaseModel):
    """Fixture header."""
    home_team: str = Field(..., alias="homeTeam")
    away_team: str = Field(..., alias="awayTeam")
    league: str
    date: str
    
    class Config:
        populate_by_name = True


class OddsDTO(BaseModel):
    """Decimal odds for each outcome."""
    home: float = Field(..., gt=1)
    draw: float = Field(..., gt=1)
    away: float = Field(..., gt=1)


class AnalysisResponseDTO(BaseModel):
    """Match analysis returned to the page."""
    match: MatchInfoDTO
    prediction: str
    confidence: int = Field(..., ge=0, le=85)
    recommended_bet: str = Field(..., alias="recommendedBet")
    odds: OddsDTO
    analysis: str
    key_factors: list[str] = Field(default_factory=list, alias="keyFactors")
    
    class Config:
        populate_by_name = True


class LeagueDTO(BaseModel):
    """League data transfer object."""
    id: str
    name: str
    country: str


class LeaguesResponseDTO(BaseModel):
    """Leagues offered by the analysis form."""
    leagues: list[LeagueDTO]
    default_league: str
    total_leagues: int


class HealthResponseDTO(BaseModel):
    """Health check response."""
    status: str = "healthy"
    version: str = "1.0.0"
    timestamp: datetime = Field(default_factory=datetime.utcnow)


class ErrorResponseDTO(BaseModel):
    """Error response."""
    error: str
    message: str
    details: Optional[dict] = None
