"""
Job Filter Service

Browse-side filtering for the dashboard's "All Jobs", "For You" and
"Saved" tabs. Pure functions over in-memory postings.
"""

from datetime import date, datetime, timedelta
from typing import List, Optional, Iterable

from jobboard.schemas.schemas import JobPosting, JobType, LocationMode

NEW_JOB_HOURS = 48


def active_postings(jobs: List[JobPosting], today: date) -> List[JobPosting]:
    """Drop postings whose deadline has passed. No deadline means still open."""
    return [job for job in jobs if job.deadline is None or job.deadline >= today]


def _matches_search(job: JobPosting, search: str, fields: Iterable[str]) -> bool:
    needle = search.lower()
    for field in fields:
        value = getattr(job, field) or ""
        if needle in value.lower():
            return True
    return False


def _matches_location(job: JobPosting, mode: LocationMode) -> bool:
    if mode == LocationMode.all:
        return True
    is_remote = "remote" in (job.location or "").lower()
    return is_remote if mode == LocationMode.remote else not is_remote


def filter_postings(
    jobs: List[JobPosting],
    search: Optional[str] = None,
    job_types: Optional[List[JobType]] = None,
    industry: Optional[str] = None,
    location: LocationMode = LocationMode.all,
    search_fields: Iterable[str] = ("title", "company", "description", "location")
) -> List[JobPosting]:
    """
    Apply the dashboard filters. Every filter left empty matches everything.

    Args:
        search: Case-insensitive substring over search_fields
        job_types: Any of these job types
        industry: Exact industry
        location: all / remote / on-site
    """
    result = []
    for job in jobs:
        if search and not _matches_search(job, search, search_fields):
            continue
        if job_types and job.job_type not in job_types:
            continue
        if industry and job.industry != industry:
            continue
        if not _matches_location(job, location):
            continue
        result.append(job)
    return result


def available_industries(jobs: List[JobPosting]) -> List[str]:
    """Distinct industries for the filter dropdown, sorted."""
    return sorted({job.industry for job in jobs if job.industry})


def new_postings_count(jobs: List[JobPosting], now: datetime, hours: int = NEW_JOB_HOURS) -> int:
    """Postings created within the last `hours` hours."""
    cutoff = now - timedelta(hours=hours)
    count = 0
    for job in jobs:
        created = job.created_at
        if created is None:
            continue
        # Compare in the caller's frame when one side is naive
        if (created.tzinfo is None) != (cutoff.tzinfo is None):
            created = created.replace(tzinfo=cutoff.tzinfo)
        if created >= cutoff:
            count += 1
    return count
