"""
Dashboard Service - the numbers on the student dashboard's stat cards
and the rows of the applications tab.
"""

from datetime import date, datetime
from typing import List, Optional

from jobboard.schemas.schemas import (
    JobPosting, Application, ApplicationStatus, SavedPosting, ScoredPosting,
    DeadlineEntry, DashboardSummary, ApplicationResponse
)
from jobboard.services.deadline_service import urgent_deadlines, days_until_deadline
from jobboard.services.job_filter_service import new_postings_count

STATUS_LABELS = {
    ApplicationStatus.applied: "Applied",
    ApplicationStatus.viewed: "Viewed by Employer",
    ApplicationStatus.interview: "Interview Scheduled",
    ApplicationStatus.hired: "Hired!",
    ApplicationStatus.rejected: "Not Selected",
}


def build_dashboard_summary(
    jobs: List[JobPosting],
    applications: List[Application],
    saved: List[SavedPosting],
    recommendations: List[ScoredPosting],
    deadlines: List[DeadlineEntry],
    now: datetime
) -> DashboardSummary:
    return DashboardSummary(
        applications=len(applications),
        saved_jobs=len(saved),
        upcoming_deadlines=len(deadlines),
        urgent_deadlines=len(urgent_deadlines(deadlines)),
        recommendations=len(recommendations),
        new_jobs=new_postings_count(jobs, now),
    )


def status_label(status: Optional[ApplicationStatus]) -> str:
    return STATUS_LABELS.get(status, "Unknown")


def application_views(applications: List[Application], today: date) -> List[ApplicationResponse]:
    """
    Applications as shown on the applications tab, in the order given.

    The deadline countdown is only filled in when the applied posting
    still exists and has a deadline; it goes negative once it has passed.
    """
    views = []
    for app in applications:
        days_left = None
        if app.job is not None and app.job.deadline is not None:
            days_left = days_until_deadline(app.job.deadline, today)

        views.append(ApplicationResponse(
            id=app.id,
            job_id=app.job_id,
            status=app.status,
            status_label=status_label(app.status),
            applied_at=app.applied_at,
            job=app.job,
            days_until_deadline=days_left,
        ))
    return views
