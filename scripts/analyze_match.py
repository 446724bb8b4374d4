#!/usr/bin/env python3
"""
Match Analysis Script
Runs a single analysis from the command line, without the HTTP layer.

Usage:
    python scripts/analyze_match.py "Manchester City" "Brighton" --league "Premier League"
    python scripts/analyze_match.py Arsenal Chelsea --seed 7 --json
"""
import sys
import os
import argparse
import asyncio
import json
import logging
import random

# Add parent directory to path to import from betting_agent
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from betting_agent import config
from betting_agent.application.dtos.dtos import AnalyzeMatchRequestDTO
from betting_agent.application.use_cases.use_cases import AnalyzeMatchUseCase
from betting_agent.domain.exceptions import MatchValidationException
from betting_agent.domain.services.match_analyzer import MatchAnalyzer
from betting_agent.domain.services.strength_estimator import StrengthEstimator


logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)
logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Analyze a football match")
    parser.add_argument("home_team", help="Home team name")
    parser.add_argument("away_team", help="Away team name")
    parser.add_argument("--league", default="Premier League", help="League or competition")
    parser.add_argument("--seed", type=int, default=None, help="Seed the strength draw for a reproducible run")
    parser.add_argument("--json", action="store_true", help="Print the API response body instead of a summary")
    return parser


def print_summary(result: dict):
    match = result["match"]
    odds = result["odds"]
    print("=" * 60)
    print(f"{match['homeTeam']} vs {match['awayTeam']}  ({match['league']}, {match['date']})")
    print("=" * 60)
    print(f"Odds: home {odds['home']:.2f} | draw {odds['draw']:.2f} | away {odds['away']:.2f}")
    print(f"Prediction: {result['prediction']} (confidence {result['confidence']}%)")
    print(f"Recommended: {result['recommendedBet']}")
    print()
    print(result["analysis"])
    print()
    print("Key factors:")
    for factor in result["keyFactors"]:
        print(f"  - {factor}")


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    estimator = StrengthEstimator(rng=random.Random(args.seed))
    use_case = AnalyzeMatchUseCase(MatchAnalyzer(estimator=estimator))
    request = AnalyzeMatchRequestDTO(home_team=args.home_team, away_team=args.away_team, league=args.league)

    try:
        response = asyncio.run(use_case.execute(request))
    except MatchValidationException as e:
        logger.error(f"❌ {e}")
        return 2

    body = response.model_dump(by_alias=True)
    if args.json:
        print(json.dumps(body, indent=2))
    else:
        print_summary(body)
    return 0


if __name__ == "__main__":
    sys.exit(main())
