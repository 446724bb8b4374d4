"""
Analysis Router

API endpoint for analyzing a match.
"""

import logging
from fastapi import APIRouter, Depends

from betting_agent.api.dependencies import get_analyze_match_use_case
from betting_agent.application.dtos.dtos import (
    AnalyzeMatchRequestDTO,
    AnalysisResponseDTO,
    ErrorResponseDTO,
)
from betting_agent.application.use_cases.use_cases import AnalyzeMatchUseCase
from betting_agent.domain.exceptions import AnalysisException, MatchValidationException


logger = logging.getLogger(__name__)

router = APIRouter(tags=["Analysis"])


@router.post(
    "/analyze",
    response_model=AnalysisResponseDTO,
    responses={
        400: {"model": ErrorResponseDTO, "description": "Missing team name"},
        500: {"model": ErrorResponseDTO, "description": "Internal server error"},
    },
    summary="Analyze a match",
    description="Returns win probabilities as odds, a prediction with confidence, a narrative and key factors.",
)
async def analyze_match(
    request: AnalyzeMatchRequestDTO,
    use_case: AnalyzeMatchUseCase = Depends(get_analyze_match_use_case),
) -> AnalysisResponseDTO:
    """Analyze a single fixture."""
    try:
        return await use_case.execute(request)
    except MatchValidationException:
        raise
    except Exception as e:
        logger.error(f"Analysis error: {e}", exc_info=True)
        raise AnalysisException("Failed to analyze match") from e
