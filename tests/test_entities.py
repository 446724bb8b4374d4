"""
Unit Tests for Domain Entities and Value Objects

Tests validation logic and immutability.
"""

import dataclasses

import pytest

from betting_agent.domain.entities.entities import MatchRequest
from betting_agent.domain.exceptions import AnalysisException, MatchValidationException
from betting_agent.domain.value_objects.value_objects import (
    Odds,
    OutcomeProbabilities,
    StrengthRange,
    TeamTierTable,
)
from betting_agent.utils.time_utils import format_match_date
from datetime import datetime


class TestMatchRequest:
    """Tests for MatchRequest entity."""
    
    def test_create_valid(self):
        request = MatchRequest(home_team="Arsenal", away_team="Chelsea", league="Premier League")
        assert request.home_team == "Arsenal"
        assert request.away_team == "Chelsea"
        assert request.league == "Premier League"
    
    def test_league_is_optional(self):
        assert MatchRequest("Arsenal", "Chelsea").league == ""
    
    def test_is_frozen(self):
        request = MatchRequest("Arsenal", "Chelsea")
        with pytest.raises(dataclasses.FrozenInstanceError):
            request.home_team = "Spurs"
    
    @pytest.mark.parametrize("home,away", [("", "Chelsea"), ("Arsenal", ""), (None, "Chelsea")])
    def test_blank_team_raises(self, home, away):
        with pytest.raises(MatchValidationException):
            MatchRequest(home, away)
    
    def test_whitespace_name_is_accepted(self):
        """Only absent or empty names are rejected; whitespace is still a name."""
        request = MatchRequest("  ", "Chelsea")
        assert request.home_team == "  "
    
    def test_validation_error_is_analysis_exception(self):
        assert issubclass(MatchValidationException, AnalysisException)


class TestStrengthRange:
    """Tests for StrengthRange value object."""
    
    def test_midpoint(self):
        assert StrengthRange(0.4, 0.6).midpoint == pytest.approx(0.5)
    
    def test_invalid_range_raises(self):
        with pytest.raises(ValueError):
            StrengthRange(0.7, 0.7)


class TestTeamTierTable:
    """Tests for TeamTierTable value object."""
    
    def test_first_tokens_keep_order(self):
        table = TeamTierTable(top=("manchester city", "liverpool"), good=("west ham", "psg"))
        
        assert table.top_tokens == ("manchester", "liverpool")
        assert table.good_tokens == ("west", "psg")


class TestOutcomeProbabilities:
    """Tests for OutcomeProbabilities value object."""
    
    def test_normalized_sums_to_one(self):
        probs = OutcomeProbabilities(0.6, 0.1, 0.4).normalized()
        
        assert probs.total == pytest.approx(1.0, abs=1e-9)
        assert probs.home == pytest.approx(0.6 / 1.1)
    
    def test_negative_raises(self):
        with pytest.raises(ValueError):
            OutcomeProbabilities(-0.1, 0.5, 0.6)


class TestOdds:
    """Tests for Odds value object."""
    
    def test_from_probabilities(self):
        odds = Odds.from_probabilities(OutcomeProbabilities(0.5, 0.25, 0.25), 1.08)
        
        assert odds.home == pytest.approx(2.16)
        assert odds.draw == pytest.approx(4.32)
        assert odds.away == pytest.approx(4.32)
    
    def test_odds_must_exceed_one(self):
        with pytest.raises(ValueError):
            Odds(home=1.0, draw=3.0, away=4.0)


class TestTimeUtils:
    """Tests for match date formatting."""
    
    def test_format_match_date(self):
        assert format_match_date(datetime(2024, 1, 5, 20, 45)) == "1/5/2024"
        assert format_match_date(datetime(2025, 11, 23)) == "11/23/2025"
