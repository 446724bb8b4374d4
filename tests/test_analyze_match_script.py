"""
Tests for the command line analysis script.
"""

import json

from scripts.analyze_match import main


def test_json_output_is_reproducible_with_seed(capsys):
    assert main(["Arsenal", "Brighton", "--seed", "3", "--json"]) == 0
    first = json.loads(capsys.readouterr().out)
    
    assert main(["Arsenal", "Brighton", "--seed", "3", "--json"]) == 0
    second = json.loads(capsys.readouterr().out)
    
    assert first == second
    assert first["match"]["homeTeam"] == "Arsenal"
    assert first["match"]["league"] == "Premier League"
    assert len(first["keyFactors"]) == 6


def test_summary_output(capsys):
    assert main(["Manchester City", "Random FC", "--league", "Serie A"]) == 0
    out = capsys.readouterr().out
    
    assert "Manchester City vs Random FC  (Serie A" in out
    assert "Prediction: Manchester City to win" in out
    assert "Key factors:" in out


def test_blank_team_exits_with_error():
    assert main(["", "Chelsea"]) == 2
