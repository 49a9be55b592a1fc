"""
Sample postings and profiles shared by the test scripts.
"""
from datetime import date, datetime

from jobboard.schemas.schemas import (
    JobPosting, StudentProfile, Application, SavedPosting, JobType
)


def make_job(job_id, **fields) -> JobPosting:
    defaults = {
        "title": f"Job {job_id}",
        "company": "Acme",
        "job_type": JobType.full_time,
        "industry": "Technology",
        "description": "",
        "skills": [],
        "created_at": datetime(2024, 3, 1, 9, 0),
    }
    defaults.update(fields)
    return JobPosting(id=job_id, **defaults)


def make_saved(job_id, deadline, **fields) -> SavedPosting:
    return SavedPosting(
        id=f"saved-{job_id}",
        job=make_job(job_id, deadline=deadline, **fields),
        saved_at=datetime(2024, 3, 1, 10, 0),
    )


def backend_profile() -> StudentProfile:
    return StudentProfile(
        preferred_job_types=[JobType.full_time],
        preferred_industries=["Technology"],
        skills=["python"],
        interests=[],
    )


def backend_job() -> JobPosting:
    return make_job(
        "A",
        title="Backend Engineer",
        job_type=JobType.full_time,
        industry="Technology",
        skills=["python", "sql"],
        description="Build APIs for the registrar's office.",
    )


def healthcare_internship() -> JobPosting:
    return make_job(
        "B",
        title="Clinic Assistant",
        job_type=JobType.internship,
        industry="Healthcare",
        skills=[],
        description="Front desk support.",
    )


def applied(job_id, status="applied", **fields) -> Application:
    return Application(id=f"app-{job_id}", job_id=job_id, status=status, **fields)


TODAY = date(2024, 3, 10)
