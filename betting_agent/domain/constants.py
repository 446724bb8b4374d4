"""
Domain Constants

This module contains constant definitions valid across the domain layer.
"""

# Reference names used by the strength heuristic.
# Only the first word of each name is matched against the team.
TOP_TIER_TEAMS = (
    "manchester city",
    "liverpool",
    "arsenal",
    "chelsea",
    "manchester united",
    "tottenham",
)

GOOD_TIER_TEAMS = (
    "newcastle",
    "brighton",
    "aston villa",
    "west ham",
    "real madrid",
    "barcelona",
    "bayern",
    "psg",
)

# Strength ranges per tier: [low, high)
TOP_TIER_RANGE = (0.70, 0.85)
GOOD_TIER_RANGE = (0.55, 0.70)
DEFAULT_TIER_RANGE = (0.40, 0.60)

# Match model
HOME_ADVANTAGE = 0.15
DRAW_BIAS = 0.1
BOOKMAKER_MARGIN = 1.08
CONFIDENCE_CAP = 85

# Narrative thresholds
CLOSE_CONTEST_THRESHOLD = 0.1
DOMINANCE_MARGIN = 0.15

# Leagues offered by the analysis form
LEAGUES_METADATA = {
    "E0": {"name": "Premier League", "country": "England"},
    "SP1": {"name": "La Liga", "country": "Spain"},
    "I1": {"name": "Serie A", "country": "Italy"},
    "D1": {"name": "Bundesliga", "country": "Germany"},
    "F1": {"name": "Ligue 1", "country": "France"},
    "UCL": {"name": "Champions League", "country": "International"},
    "UEL": {"name": "Europa League", "country": "International"},
}

DEFAULT_LEAGUE_ID = "E0"
