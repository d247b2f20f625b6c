"""Duration formatting helpers"""


def format_duration(seconds: int) -> str:
    """
    Format a total duration for analytics cards.

    Returns:
        str: "1h 5m" when at least an hour, otherwise "5m"
    """
    hours = seconds // 3600
    minutes = (seconds % 3600) // 60
    return f"{hours}h {minutes}m" if hours > 0 else f"{minutes}m"


def format_clock(seconds: int) -> str:
    """Format remaining seconds as MM:SS"""
    return f"{seconds // 60:02d}:{seconds % 60:02d}"
