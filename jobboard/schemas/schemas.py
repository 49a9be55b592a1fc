"""
Pydantic Schemas - Domain entities and Request/Response Validation

All schemas in one file for simplicity. The domain entities are lenient:
rows coming from storage with nulls, unknown job types or missing
deadlines are normalized to "empty" instead of being rejected, so the
ranking and deadline services never see malformed input.
"""

from pydantic import BaseModel, Field, field_validator
from typing import Optional, List
from datetime import date, datetime
from enum import Enum


# ============================================================
# ENUMS
# ============================================================

class UserRole(str, Enum):
    student = "student"
    faculty = "faculty"
    company_rep = "company_rep"
    admin = "admin"


class JobType(str, Enum):
    internship = "Internship"
    part_time = "Part-Time"
    full_time = "Full-Time"


class ApplicationStatus(str, Enum):
    applied = "applied"
    viewed = "viewed"
    interview = "interview"
    hired = "hired"
    rejected = "rejected"


class LocationMode(str, Enum):
    all = "all"
    remote = "remote"
    on_site = "on-site"


def parse_job_type(value) -> Optional[JobType]:
    """
    Map the spellings found in storage ("Full-Time", "full_time",
    "FullTime", ...) onto JobType. Unknown values become None.
    """
    if value is None or isinstance(value, JobType):
        return value
    key = "".join(ch for ch in str(value).lower() if ch.isalnum())
    for job_type in JobType:
        if job_type.value.lower().replace("-", "") == key:
            return job_type
    return None


def _as_list(value) -> list:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    return list(value)


def _text_items(value) -> List[str]:
    # Non-string items are stringified; blanks are dropped
    items = []
    for item in _as_list(value):
        if item is None:
            continue
        text = str(item).strip()
        if text:
            items.append(text)
    return items


# ============================================================
# DOMAIN ENTITIES
# ============================================================

class JobPosting(BaseModel):
    id: str
    title: str = ""
    company: str = ""
    job_type: Optional[JobType] = None
    industry: str = ""
    description: str = ""
    skills: List[str] = []
    deadline: Optional[date] = None
    created_at: Optional[datetime] = None
    status: str = "active"
    location: Optional[str] = None
    salary_range: Optional[str] = None

    @field_validator("id", mode="before")
    @classmethod
    def _id_as_text(cls, v):
        return str(v)

    @field_validator("title", "company", "industry", "description", "status", mode="before")
    @classmethod
    def _none_as_empty(cls, v):
        return "" if v is None else v

    @field_validator("job_type", mode="before")
    @classmethod
    def _normalize_job_type(cls, v):
        return parse_job_type(v)

    @field_validator("skills", mode="before")
    @classmethod
    def _skills_list(cls, v):
        return _text_items(v)

    @field_validator("deadline", mode="before")
    @classmethod
    def _deadline_date(cls, v):
        # Timestamps are truncated to their calendar day; unparseable values are dropped
        if isinstance(v, datetime):
            return v.date()
        if isinstance(v, str):
            try:
                return datetime.fromisoformat(v.replace("Z", "+00:00")).date()
            except ValueError:
                return None
        if isinstance(v, date):
            return v
        return None


class StudentProfile(BaseModel):
    """A student's declared preferences. Every list may be empty."""
    preferred_job_types: List[JobType] = []
    preferred_industries: List[str] = []
    skills: List[str] = []
    interests: List[str] = []

    @field_validator("preferred_job_types", mode="before")
    @classmethod
    def _job_types(cls, v):
        parsed = [parse_job_type(item) for item in _as_list(v)]
        return [jt for jt in parsed if jt is not None]

    @field_validator("preferred_industries", "skills", "interests", mode="before")
    @classmethod
    def _text_lists(cls, v):
        return _text_items(v)


class Application(BaseModel):
    id: Optional[str] = None
    job_id: str
    status: Optional[ApplicationStatus] = None
    applied_at: Optional[datetime] = None
    job: Optional[JobPosting] = None

    @field_validator("id", "job_id", mode="before")
    @classmethod
    def _ids_as_text(cls, v):
        return None if v is None else str(v)

    @field_validator("status", mode="before")
    @classmethod
    def _known_status(cls, v):
        if v is None or isinstance(v, ApplicationStatus):
            return v
        try:
            return ApplicationStatus(str(v).lower())
        except ValueError:
            return None


class SavedPosting(BaseModel):
    id: Optional[str] = None
    job: JobPosting
    saved_at: Optional[datetime] = None
    reminder_set: bool = False
    reminder_date: Optional[datetime] = None

    @field_validator("id", mode="before")
    @classmethod
    def _id_as_text(cls, v):
        return None if v is None else str(v)


# ============================================================
# DERIVED (never persisted)
# ============================================================

class ScoredPosting(BaseModel):
    job: JobPosting
    match_score: int
    job_type_matched: bool = False
    industry_matched: bool = False
    matched_skills: List[str] = []
    matched_interests: List[str] = []


class MatchExplanation(BaseModel):
    job_type_matched: bool
    industry_matched: bool
    matched_skills: List[str] = []


class DeadlineEntry(BaseModel):
    job: JobPosting
    days_until_deadline: int


class CalendarDay(BaseModel):
    day: date
    deadline_count: int = 0
    is_past: bool = False
    is_today: bool = False
    is_selectable: bool = False
    is_selected: bool = False


class DashboardSummary(BaseModel):
    applications: int = 0
    saved_jobs: int = 0
    upcoming_deadlines: int = 0
    urgent_deadlines: int = 0
    recommendations: int = 0
    new_jobs: int = 0


# ============================================================
# RESPONSE SCHEMAS
# ============================================================

class RecommendationResponse(BaseModel):
    job: JobPosting
    match_score: int
    match_percentage: int = Field(..., ge=0, le=100)
    job_type_matched: bool
    industry_matched: bool
    matched_skills: List[str] = []
    matched_interests: List[str] = []

class RecommendationListResponse(BaseModel):
    recommendations: List[RecommendationResponse]
    total: int

class JobListResponse(BaseModel):
    jobs: List[JobPosting]
    total: int

class SavedJobListResponse(BaseModel):
    saved_jobs: List[SavedPosting]
    total: int

class ApplicationResponse(BaseModel):
    id: Optional[str] = None
    job_id: str
    status: Optional[ApplicationStatus] = None
    status_label: str
    applied_at: Optional[datetime] = None
    job: Optional[JobPosting] = None
    days_until_deadline: Optional[int] = None

class ApplicationListResponse(BaseModel):
    applications: List[ApplicationResponse]
    total: int

class DeadlineResponse(BaseModel):
    job: JobPosting
    days_until_deadline: int
    label: str

class DeadlineListResponse(BaseModel):
    deadlines: List[DeadlineResponse]
    total: int
    selected_date: Optional[date] = None

class CalendarResponse(BaseModel):
    today: date
    selected_date: Optional[date] = None
    days: List[CalendarDay]

