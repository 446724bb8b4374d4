"""
Leagues Router

API endpoints for the leagues offered by the analysis form.
"""

from fastapi import APIRouter, Depends, HTTPException

from betting_agent.api.dependencies import get_leagues_use_case
from betting_agent.application.dtos.dtos import LeagueDTO, LeaguesResponseDTO, ErrorResponseDTO
from betting_agent.application.use_cases.use_cases import GetLeaguesUseCase
from betting_agent.domain.constants import LEAGUES_METADATA


router = APIRouter(prefix="/leagues", tags=["Leagues"])


@router.get(
    "",
    response_model=LeaguesResponseDTO,
    summary="Get available leagues",
    description="Returns the leagues offered by the analysis form.",
)
async def get_leagues(
    use_case: GetLeaguesUseCase = Depends(get_leagues_use_case),
) -> LeaguesResponseDTO:
    """Get all available leagues."""
    return await use_case.execute()


@router.get(
    "/{league_id}",
    response_model=LeagueDTO,
    responses={
        404: {"model": ErrorResponseDTO, "description": "League not found"},
    },
    summary="Get league details",
    description="Get details for a specific league by ID.",
)
async def get_league(league_id: str) -> LeagueDTO:
    """Get details for a specific league."""
    if league_id not in LEAGUES_METADATA:
        raise HTTPException(status_code=404, detail=f"League not found: {league_id}")
    
    meta = LEAGUES_METADATA[league_id]
    return LeagueDTO(
        id=league_id,
        name=meta["name"],
        country=meta["country"],
    )
