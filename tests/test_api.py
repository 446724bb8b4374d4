"""
Unit Tests for API Endpoints

Tests the FastAPI routes and responses.
"""

import pytest
from fastapi.testclient import TestClient

from betting_agent.api.dependencies import get_match_analyzer
from betting_agent.api.main import app
from tests.conftest import FIXED_DATE


class TestHealthEndpoint:
    """Tests for health check endpoint."""
    
    def test_health_check(self, client):
        """Test health check returns healthy status."""
        response = client.get("/health")
        assert response.status_code == 200
        
        data = response.json()
        assert data["status"] == "healthy"
        assert "version" in data
        assert "timestamp" in data


class TestPageEndpoints:
    """Tests for the HTML page and API info."""
    
    def test_page_served_at_root(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert "/api/analyze" in response.text
        assert "Please bet responsibly" in response.text
    
    def test_api_info(self, client):
        response = client.get("/api")
        assert response.status_code == 200
        
        data = response.json()
        assert "name" in data
        assert "version" in data
        assert data["endpoints"]["analyze"] == "/api/analyze"


class TestAnalyzeEndpoint:
    """Tests for POST /api/analyze."""
    
    def test_analyze_success(self, client):
        response = client.post(
            "/api/analyze",
            json={"homeTeam": "Manchester City", "awayTeam": "Random FC", "league": "Premier League"},
        )
        assert response.status_code == 200
        
        data = response.json()
        assert data["match"] == {
            "homeTeam": "Manchester City",
            "awayTeam": "Random FC",
            "league": "Premier League",
            "date": FIXED_DATE,
        }
        assert data["prediction"] == "Manchester City to win"
        assert data["recommendedBet"] == "Back Manchester City at 1.83"
        assert data["confidence"] == 59
        assert data["odds"]["home"] == pytest.approx(1.8301622, abs=1e-6)
        assert data["odds"]["draw"] > 1.0
        assert data["odds"]["away"] > 1.0
        assert data["analysis"].startswith("This Premier League fixture between Manchester City and Random FC")
        assert len(data["keyFactors"]) >= 5
    
    def test_analyze_is_reproducible_with_fixed_random_source(self, client):
        body = {"homeTeam": "Arsenal", "awayTeam": "Brighton", "league": "Premier League"}
        
        first = client.post("/api/analyze", json=body)
        second = client.post("/api/analyze", json=body)
        
        assert first.content == second.content
    
    def test_analyze_without_league(self, client):
        response = client.post("/api/analyze", json={"homeTeam": "Arsenal", "awayTeam": "Chelsea"})
        assert response.status_code == 200
        assert response.json()["match"]["league"] == ""
    
    @pytest.mark.parametrize("body", [
        {"awayTeam": "Chelsea", "league": "Premier League"},
        {"homeTeam": "Arsenal", "league": "Premier League"},
        {"homeTeam": "", "awayTeam": "Chelsea"},
        {"homeTeam": "Arsenal", "awayTeam": ""},
        {},
    ])
    def test_missing_team_is_client_error(self, client, body):
        response = client.post("/api/analyze", json=body)
        assert response.status_code == 400
        
        data = response.json()
        assert data["error"] == "validation_error"
        assert data["message"]
    
    def test_whitespace_team_name_is_analyzed(self, client):
        """A whitespace-only name is present, so it falls into the default tier."""
        response = client.post(
            "/api/analyze",
            json={"homeTeam": "  ", "awayTeam": "Chelsea", "league": "Premier League"},
        )
        assert response.status_code == 200

        data = response.json()
        assert data["match"]["homeTeam"] == "  "
        assert data["prediction"] == "Chelsea to win"

    def test_malformed_body_is_client_error(self, client):
        response = client.post(
            "/api/analyze",
            content="not json",
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 400
        assert response.json()["error"] == "validation_error"
    
    def test_internal_failure_is_generic_server_error(self, client):
        class BrokenAnalyzer:
            def analyze(self, request):
                raise RuntimeError("secret internal detail")
        
        app.dependency_overrides[get_match_analyzer] = lambda: BrokenAnalyzer()
        response = TestClient(app, raise_server_exceptions=False).post(
            "/api/analyze",
            json={"homeTeam": "Arsenal", "awayTeam": "Chelsea"},
        )
        
        assert response.status_code == 500
        data = response.json()
        assert data["error"] == "internal_server_error"
        assert "secret" not in response.text


class TestLeaguesEndpoints:
    """Tests for leagues endpoints."""
    
    def test_get_leagues(self, client):
        response = client.get("/api/leagues")
        assert response.status_code == 200
        
        data = response.json()
        assert data["total_leagues"] == len(data["leagues"])
        assert data["default_league"] == "Premier League"
    
    def test_get_league_by_id_valid(self, client):
        response = client.get("/api/leagues/E0")
        assert response.status_code == 200
        
        data = response.json()
        assert data["id"] == "E0"
        assert data["name"] == "Premier League"
        assert data["country"] == "England"
    
    def test_get_league_by_id_invalid(self, client):
        response = client.get("/api/leagues/INVALID")
        assert response.status_code == 404


class TestCORS:
    """Tests for CORS configuration."""
    
    def test_cors_headers(self, client):
        response = client.options(
            "/api/analyze",
            headers={
                "Origin": "http://localhost:3000",
                "Access-Control-Request-Method": "POST",
            },
        )
        
        assert response.headers.get("access-control-allow-origin") in [
            "http://localhost:3000",
            "*",
        ]


class TestErrorHandling:
    """Tests for error handling."""
    
    def test_404_on_unknown_route(self, client):
        response = client.get("/api/unknown")
        assert response.status_code == 404
