"""
University Job Board - Student Dashboard
Relevance ranking and deadline tracking for the student-facing dashboard.

Architecture:
- PostgreSQL: Structured data (users, jobs, profiles, applications, saved jobs)
- Services: Pure in-memory ranking / deadline logic (no I/O)
- FastAPI: Thin HTTP layer that loads data and renders service output
"""

__version__ = "1.0.0"
