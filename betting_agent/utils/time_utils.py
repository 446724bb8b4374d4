from datetime import datetime
from pytz import timezone

from betting_agent import config


def get_timezone():
    """Get the configured application timezone."""
    return timezone(config.APP_TIMEZONE)

def get_current_time() -> datetime:
    """Get current time in the application timezone."""
    return datetime.now(get_timezone())

def format_match_date(moment: datetime) -> str:
    """Short display date for a match card (M/D/YYYY)."""
    return f"{moment.month}/{moment.day}/{moment.year}"

def get_match_date_str() -> str:
    """Today's display date in the application timezone."""
    return format_match_date(get_current_time())
