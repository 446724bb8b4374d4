"""
Narrative Service Module

Turns the strength comparison into readable text: one analysis
paragraph and an ordered list of key factors. Classification and
templates are kept apart so each can be checked on its own.
"""

from betting_agent.domain.constants import CLOSE_CONTEST_THRESHOLD, DOMINANCE_MARGIN
from betting_agent.domain.entities.entities import Dominance, StrengthGap


def classify_strength_gap(home_strength: float, away_strength: float) -> StrengthGap:
    """
    Bucket the home-minus-away strength difference.
    
    |diff| < 0.1 is close, diff > 0.1 favors home, anything else
    (including exactly 0.1) favors away.
    """
    strength_diff = home_strength - away_strength
    
    if abs(strength_diff) < CLOSE_CONTEST_THRESHOLD:
        return StrengthGap.CLOSE
    elif strength_diff > CLOSE_CONTEST_THRESHOLD:
        return StrengthGap.HOME_FAVORED
    return StrengthGap.AWAY_FAVORED


def classify_dominance(home_strength: float, away_strength: float) -> Dominance:
    """A side dominates when it is stronger by more than the dominance margin."""
    if home_strength > away_strength + DOMINANCE_MARGIN:
        return Dominance.HOME
    elif away_strength > home_strength + DOMINANCE_MARGIN:
        return Dominance.AWAY
    return Dominance.BALANCED


def _fixture_intro(home_team: str, away_team: str, league: str) -> str:
    subject = " ".join(part for part in ("This", league, "fixture") if part)
    return f"{subject} between {home_team} and {away_team} promises to be "


def build_analysis_text(gap: StrengthGap, home_team: str, away_team: str, league: str) -> str:
    """Render the analysis paragraph for a strength gap bucket."""
    intro = _fixture_intro(home_team, away_team, league)
    
    if gap == StrengthGap.CLOSE:
        body = (
            "a closely contested match. Both teams are evenly matched, with similar form and quality. "
            "The home advantage could be decisive in such a tight encounter. "
            "Expect a tactical battle with both teams looking to exploit any weaknesses."
        )
    elif gap == StrengthGap.HOME_FAVORED:
        body = (
            f"a favorable opportunity for {home_team}. The home side has been showing strong form "
            f"and possesses a tactical advantage over {away_team}. "
            "The home crowd support combined with their recent performances suggests they should control the match. "
            f"However, football is unpredictable and {away_team} will be looking to upset the odds."
        )
    else:
        body = (
            f"a challenging fixture for the home side. {away_team} comes into this match with strong momentum "
            "and a quality squad capable of getting results away from home. "
            f"{home_team} will need to leverage their home advantage and defensive organization to contain the visitors. "
            "This could be a high-scoring affair if both teams commit to attacking play."
        )
    
    return intro + body


def build_dominance_factors(dominance: Dominance, home_team: str, away_team: str) -> list[str]:
    """The pair of factors describing which side has the edge."""
    if dominance == Dominance.HOME:
        return [
            f"{home_team}'s attacking prowess has been exceptional in recent matches",
            f"{away_team} may struggle defensively against {home_team}'s pressing style",
        ]
    if dominance == Dominance.AWAY:
        return [
            f"{away_team}'s away record has been impressive this season",
            f"{home_team} has shown vulnerability in defensive transitions",
        ]
    return [
        "Both teams have similar goal-scoring records this season",
        "Tactical matchup favors a cautious approach from both managers",
    ]


def build_key_factors(
    home_team: str,
    away_team: str,
    home_strength: float,
    away_strength: float,
) -> list[str]:
    """
    Ordered key factors: three fixed notes, the dominance pair, then conditions.
    """
    in_form = home_team if home_strength > away_strength else away_team
    
    factors = [
        f"Home advantage for {home_team} - statistically worth 0.3-0.5 goals",
        f"Recent form indicators suggest {in_form} has momentum",
        "Head-to-head history shows competitive fixtures between these teams",
    ]
    factors.extend(
        build_dominance_factors(classify_dominance(home_strength, away_strength), home_team, away_team)
    )
    factors.append("Weather and pitch conditions expected to be favorable for open play")
    
    return factors
