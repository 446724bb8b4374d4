"""
Shared fixtures for the test suite.
"""

import pytest
from fastapi.testclient import TestClient

from betting_agent import config
from betting_agent.api.dependencies import get_match_analyzer
from betting_agent.api.main import app
from betting_agent.domain.services.match_analyzer import MatchAnalyzer
from betting_agent.domain.services.strength_estimator import StrengthEstimator


FIXED_DATE = "1/15/2024"


class MidpointRandom:
    """Random source whose draw always lands in the middle of a range."""
    
    def random(self) -> float:
        return 0.5


class SequenceRandom:
    """Random source replaying a fixed list of draws."""
    
    def __init__(self, values):
        self.values = list(values)
    
    def random(self) -> float:
        return self.values.pop(0)


@pytest.fixture
def midpoint_estimator():
    """Estimator pinned to the midpoint of each tier range."""
    return StrengthEstimator(rng=MidpointRandom())


@pytest.fixture
def analyzer(midpoint_estimator):
    """Deterministic analyzer (midpoint strengths, fixed date)."""
    return MatchAnalyzer(estimator=midpoint_estimator, date_provider=lambda: FIXED_DATE)


@pytest.fixture
def client(analyzer, monkeypatch):
    """Test client wired to the deterministic analyzer, without the artificial delay."""
    monkeypatch.setattr(config, "ANALYSIS_DELAY_SECONDS", 0.0)
    app.dependency_overrides[get_match_analyzer] = lambda: analyzer
    yield TestClient(app)
    app.dependency_overrides.clear()
