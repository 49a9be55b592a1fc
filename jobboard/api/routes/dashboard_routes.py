"""
Student Dashboard Routes

GET /dashboard/summary - Stat-card counts
GET /dashboard/recommendations - Ranked "For You" postings
GET /dashboard/recommendations/{job_id}/explanation - Why a posting was recommended
GET /dashboard/jobs - Active postings with filters
GET /dashboard/jobs/industries - Industries for the filter dropdown
GET /dashboard/saved - Saved postings with filters
GET /dashboard/applications - Applications with status labels
GET /dashboard/deadlines - Upcoming deadlines, optionally for one calendar day
GET /dashboard/calendar - 5-week deadline calendar
"""

from datetime import date, datetime
from fastapi import APIRouter, HTTPException, Depends, Query
from typing import List, Optional

from jobboard.api.dependencies import get_today, get_now
from jobboard.core.auth import get_current_student
from jobboard.services.storage_service import DashboardDataService, get_dashboard_data_service
from jobboard.services.recommendation_service import (
    rank, explain, match_percentage, find_recommendation
)
from jobboard.services.deadline_service import (
    upcoming_deadlines, filter_by_date, is_selectable, build_calendar_days, deadline_label
)
from jobboard.services.job_filter_service import (
    active_postings, filter_postings, available_industries
)
from jobboard.services.dashboard_service import build_dashboard_summary, application_views
from jobboard.schemas.schemas import (
    JobType, LocationMode, DashboardSummary, MatchExplanation,
    RecommendationResponse, RecommendationListResponse, JobListResponse,
    SavedJobListResponse, ApplicationListResponse, DeadlineResponse, DeadlineListResponse,
    CalendarResponse
)

router = APIRouter(prefix="/dashboard", tags=["Student Dashboard"])


def _recommendations_for(store: DashboardDataService, student_id: str, today: date):
    jobs = active_postings(store.get_open_jobs(), today)
    profile = store.get_student_profile(student_id)
    applications = store.get_applications(student_id)
    return rank(jobs, profile, applications), profile


@router.get("/summary", response_model=DashboardSummary)
async def get_summary(
    student: dict = Depends(get_current_student),
    store: DashboardDataService = Depends(get_dashboard_data_service),
    today: date = Depends(get_today),
    now: datetime = Depends(get_now)
):
    """Counts shown on the dashboard's overview cards."""
    student_id = student["student_id"]
    jobs = active_postings(store.get_open_jobs(), today)
    applications = store.get_applications(student_id)
    saved = store.get_saved_postings(student_id)
    recommendations = rank(jobs, store.get_student_profile(student_id), applications)

    return build_dashboard_summary(
        jobs=jobs,
        applications=applications,
        saved=saved,
        recommendations=recommendations,
        deadlines=upcoming_deadlines(saved, today),
        now=now
    )


@router.get("/recommendations", response_model=RecommendationListResponse)
async def get_recommendations(
    student: dict = Depends(get_current_student),
    store: DashboardDataService = Depends(get_dashboard_data_service),
    today: date = Depends(get_today)
):
    """
    Postings ranked against the student's profile.

    Score weights: job type 5, industry 4, each skill 3, each interest 2.
    Jobs already applied to are never included. Top 20 only.
    """
    ranked, _ = _recommendations_for(store, student["student_id"], today)

    recs = [
        RecommendationResponse(
            job=s.job,
            match_score=s.match_score,
            match_percentage=match_percentage(s.match_score),
            job_type_matched=s.job_type_matched,
            industry_matched=s.industry_matched,
            matched_skills=s.matched_skills,
            matched_interests=s.matched_interests
        ) for s in ranked
    ]
    return RecommendationListResponse(recommendations=recs, total=len(recs))


@router.get("/recommendations/{job_id}/explanation", response_model=MatchExplanation)
async def get_explanation(
    job_id: str,
    student: dict = Depends(get_current_student),
    store: DashboardDataService = Depends(get_dashboard_data_service),
    today: date = Depends(get_today)
):
    """Which profile preferences a recommended posting matched."""
    ranked, profile = _recommendations_for(store, student["student_id"], today)

    scored = find_recommendation(ranked, job_id)
    if not scored:
        raise HTTPException(status_code=404, detail="Job is not among your recommendations")

    return explain(scored, profile)


@router.get("/jobs", response_model=JobListResponse)
async def list_jobs(
    search: Optional[str] = Query(None, description="Search title, company, description, location"),
    job_type: List[JobType] = Query([], description="Repeat to allow several job types"),
    industry: Optional[str] = Query(None),
    location: LocationMode = Query(LocationMode.all),
    student: dict = Depends(get_current_student),
    store: DashboardDataService = Depends(get_dashboard_data_service),
    today: date = Depends(get_today)
):
    """Active postings (deadline not passed) with the sidebar filters applied."""
    jobs = active_postings(store.get_open_jobs(), today)
    jobs = filter_postings(jobs, search=search, job_types=job_type, industry=industry, location=location)
    return JobListResponse(jobs=jobs, total=len(jobs))


@router.get("/jobs/industries", response_model=List[str])
async def list_industries(
    student: dict = Depends(get_current_student),
    store: DashboardDataService = Depends(get_dashboard_data_service),
    today: date = Depends(get_today)
):
    """Distinct industries among active postings."""
    return available_industries(active_postings(store.get_open_jobs(), today))


@router.get("/saved", response_model=SavedJobListResponse)
async def list_saved(
    search: Optional[str] = Query(None, description="Search title and company"),
    job_type: List[JobType] = Query([]),
    industry: Optional[str] = Query(None),
    student: dict = Depends(get_current_student),
    store: DashboardDataService = Depends(get_dashboard_data_service),
    today: date = Depends(get_today)
):
    """Saved postings that have not expired, with the search/type/industry filters."""
    saved = store.get_saved_postings(student["student_id"])
    visible = {
        job.id for job in filter_postings(
            active_postings([s.job for s in saved], today),
            search=search, job_types=job_type, industry=industry,
            search_fields=("title", "company")
        )
    }
    saved = [s for s in saved if s.job.id in visible]
    return SavedJobListResponse(saved_jobs=saved, total=len(saved))


@router.get("/applications", response_model=ApplicationListResponse)
async def list_applications(
    student: dict = Depends(get_current_student),
    store: DashboardDataService = Depends(get_dashboard_data_service),
    today: date = Depends(get_today)
):
    """The student's applications, newest first, with status labels and deadlines."""
    views = application_views(store.get_applications(student["student_id"]), today)
    return ApplicationListResponse(applications=views, total=len(views))


@router.get("/deadlines", response_model=DeadlineListResponse)
async def list_deadlines(
    selected_date: Optional[date] = Query(None, description="Only deadlines on this day"),
    student: dict = Depends(get_current_student),
    store: DashboardDataService = Depends(get_dashboard_data_service),
    today: date = Depends(get_today)
):
    """
    Saved postings due within the next 7 days, soonest first.

    A selected date must be a calendar day that is not in the past
    and has at least one deadline.
    """
    entries = upcoming_deadlines(store.get_saved_postings(student["student_id"]), today)

    if selected_date is not None and not is_selectable(entries, selected_date, today):
        raise HTTPException(status_code=400, detail="No upcoming deadlines on the selected date")

    entries = filter_by_date(entries, selected_date)
    return DeadlineListResponse(
        deadlines=[
            DeadlineResponse(
                job=e.job,
                days_until_deadline=e.days_until_deadline,
                label=deadline_label(e.days_until_deadline)
            ) for e in entries
        ],
        total=len(entries),
        selected_date=selected_date
    )


@router.get("/calendar", response_model=CalendarResponse)
async def get_calendar(
    selected_date: Optional[date] = Query(None),
    student: dict = Depends(get_current_student),
    store: DashboardDataService = Depends(get_dashboard_data_service),
    today: date = Depends(get_today)
):
    """The 35-day deadline calendar starting on this week's Sunday."""
    entries = upcoming_deadlines(store.get_saved_postings(student["student_id"]), today)
    return CalendarResponse(
        today=today,
        selected_date=selected_date,
        days=build_calendar_days(entries, today, selected_date)
    )
