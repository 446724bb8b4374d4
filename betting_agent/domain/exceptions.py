"""
Domain exceptions for the match analysis system.
"""

class AnalysisException(Exception):
    """Base exception for analysis-related errors."""
    pass

class MatchValidationException(AnalysisException):
    """Exception raised when a match request is missing a required team name."""
    pass
