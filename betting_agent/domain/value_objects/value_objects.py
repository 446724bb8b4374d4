"""
Domain Value Objects Module

Value objects are immutable objects that are defined by their attributes rather than identity.
They encapsulate validation logic and provide type safety.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class StrengthRange:
    """
    Half-open interval [low, high) a team strength is drawn from.
    """
    low: float
    high: float

    def __post_init__(self):
        if not self.low < self.high:
            raise ValueError(f"Invalid strength range: [{self.low}, {self.high})")

    @property
    def midpoint(self) -> float:
        return (self.low + self.high) / 2

    def draw(self, rng) -> float:
        """
        Draw a strength from the range.

        Args:
            rng: Any object with a random() method returning a float in [0, 1)
        """
        return self.low + rng.random() * (self.high - self.low)


@dataclass(frozen=True)
class TeamTierTable:
    """
    Reference team names for the top and good tiers, in lookup order.

    Only the first whitespace-delimited word of each name is used when
    matching a team, so "manchester united" matches on "manchester".
    """
    top: tuple[str, ...]
    good: tuple[str, ...]

    @staticmethod
    def _first_tokens(names: tuple[str, ...]) -> tuple[str, ...]:
        return tuple(name.split(" ")[0] for name in names)

    @property
    def top_tokens(self) -> tuple[str, ...]:
        return self._first_tokens(self.top)

    @property
    def good_tokens(self) -> tuple[str, ...]:
        return self._first_tokens(self.good)


@dataclass(frozen=True)
class OutcomeProbabilities:
    """
    Home / draw / away probability estimates.

    Raw estimates may not sum to 1; use normalized() before pricing.
    """
    home: float
    draw: float
    away: float

    def __post_init__(self):
        if self.home < 0 or self.draw < 0 or self.away < 0:
            raise ValueError("Probabilities cannot be negative")

    @property
    def total(self) -> float:
        return self.home + self.draw + self.away

    def normalized(self) -> "OutcomeProbabilities":
        """Scale all three so they sum to 1."""
        total = self.total
        return OutcomeProbabilities(
            home=self.home / total,
            draw=self.draw / total,
            away=self.away / total,
        )


@dataclass(frozen=True)
class Odds:
    """
    Represents betting odds for a match.
    
    Stores decimal odds for home win, draw, and away win.
    """
    home: float
    draw: float
    away: float
    
    def __post_init__(self):
        if self.home <= 1.0 or self.draw <= 1.0 or self.away <= 1.0:
            raise ValueError("Odds must be > 1.0")

    @classmethod
    def from_probabilities(cls, probabilities: OutcomeProbabilities, margin: float) -> "Odds":
        """
        Price normalized probabilities as decimal odds with a bookmaker margin.

        odds = (1 / probability) * margin
        """
        return cls(
            home=(1 / probabilities.home) * margin,
            draw=(1 / probabilities.draw) * margin,
            away=(1 / probabilities.away) * margin,
        )
