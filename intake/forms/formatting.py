import datetime as dt


def format_display_date(date: dt.date) -> str:
    """Convert ``date(2024, 1, 20)`` → ``20/01/2024`` for list display."""
    return date.strftime("%d/%m/%Y")


def format_display_time(time: dt.time) -> str:
    """Convert ``time(9, 0)`` → ``09:00``."""
    return time.strftime("%H:%M")
