"""
Storage Service - read side of the student dashboard.

Tables read here (PostgreSQL):
1. jobs               - postings; skills is a TEXT[] column
2. student_profiles   - preferences; one row per student, optional
3. applications       - student -> job, joined with the posting
4. saved_jobs         - student bookmarks with save time and reminder

Writes (posting CRUD, applying, saving) belong to other workflows.
Rows are converted into the pydantic domain entities, which take care
of nulls and unexpected values.
"""

from typing import List

from jobboard.core.logging import get_logger
from jobboard.db.postgres import execute_raw_sql
from jobboard.schemas.schemas import JobPosting, StudentProfile, Application, SavedPosting

log = get_logger(__name__)

JOB_COLUMNS = """
    j.id, j.title, j.company, j.job_type, j.industry, j.description, j.skills,
    j.deadline, j.created_at, j.status, j.location, j.salary_range
"""


def _job_from_row(row: dict) -> JobPosting:
    return JobPosting(**{
        field: row[field] for field in JobPosting.model_fields if field in row
    })


class DashboardDataService:
    """
    Loads everything the student dashboard needs for one student.
    """

    def get_open_jobs(self) -> List[JobPosting]:
        """All active postings, newest first."""
        rows = execute_raw_sql(f"""
            SELECT {JOB_COLUMNS}
            FROM jobs j
            WHERE j.status = 'active'
            ORDER BY j.created_at DESC
        """)
        return [_job_from_row(r) for r in rows]

    def get_student_profile(self, student_id: str) -> StudentProfile:
        """
        Student preferences. A student who never edited their profile
        gets the empty defaults.
        """
        rows = execute_raw_sql("""
            SELECT preferred_job_types, preferred_industries, skills, interests
            FROM student_profiles
            WHERE id = :id
        """, {"id": student_id})

        if not rows:
            log.info("No profile row for student %s, using empty defaults", student_id)
            return StudentProfile()
        return StudentProfile(**rows[0])

    def get_applications(self, student_id: str) -> List[Application]:
        """Applications newest first, with the posting when it still exists."""
        rows = execute_raw_sql(f"""
            SELECT a.id AS application_id, a.job_id, a.status AS application_status,
                   a.applied_at, {JOB_COLUMNS}
            FROM applications a
            LEFT JOIN jobs j ON a.job_id = j.id
            WHERE a.student_id = :id
            ORDER BY a.applied_at DESC
        """, {"id": student_id})

        return [
            Application(
                id=r["application_id"],
                job_id=r["job_id"],
                status=r["application_status"],
                applied_at=r["applied_at"],
                job=_job_from_row(r) if r["id"] is not None else None,
            ) for r in rows
        ]

    def get_saved_postings(self, student_id: str) -> List[SavedPosting]:
        rows = execute_raw_sql(f"""
            SELECT s.id AS saved_id, s.saved_at, s.reminder_set, s.reminder_date,
                   {JOB_COLUMNS}
            FROM saved_jobs s
            JOIN jobs j ON s.job_id = j.id
            WHERE s.student_id = :id
            ORDER BY s.saved_at DESC
        """, {"id": student_id})

        return [
            SavedPosting(
                id=r["saved_id"],
                job=_job_from_row(r),
                saved_at=r["saved_at"],
                reminder_set=bool(r["reminder_set"]),
                reminder_date=r["reminder_date"],
            ) for r in rows
        ]


# ============================================================
# CONVENIENCE FUNCTIONS
# ============================================================

def get_dashboard_data_service() -> DashboardDataService:
    """Get storage service instance (FastAPI dependency)."""
    return DashboardDataService()
