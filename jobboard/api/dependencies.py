"""
Shared FastAPI dependencies.

The clock is injected rather than read inside services, so tests can
pin "today" with app.dependency_overrides.
"""

from datetime import date, datetime


def get_today() -> date:
    return date.today()


def get_now() -> datetime:
    return datetime.now()
