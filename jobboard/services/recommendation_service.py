"""
Recommendation Service

PURPOSE:
Rank open job postings for a student using the preferences declared
on their profile, and explain why a posting was recommended.

HOW IT WORKS:
1. Drop postings the student has already applied to
2. Score each remaining posting with fixed weights:
   - preferred job type ........ +5
   - preferred industry ........ +4
   - each matching skill ....... +3  (case-insensitive, exact token)
   - each matching interest .... +2  (case-insensitive substring of
                                       title + description + industry)
3. Drop postings that scored 0
4. Sort by score (ties: newest posting first) and keep the top 20

Everything here is a pure function of its inputs: no database access,
no clock, no shared state.
"""

from typing import List, Iterable, Optional

from jobboard.core.logging import get_logger
from jobboard.schemas.schemas import (
    JobPosting, StudentProfile, Application, ScoredPosting, MatchExplanation
)

log = get_logger(__name__)

JOB_TYPE_WEIGHT = 5
INDUSTRY_WEIGHT = 4
SKILL_WEIGHT = 3
INTEREST_WEIGHT = 2

MAX_RECOMMENDATIONS = 20

# Score that maps to 100% on recommendation cards
FULL_MATCH_SCORE = 20


# ============================================================
# MATCHING RULES
# ============================================================

def match_skills(job_skills: Iterable[str], profile_skills: Iterable[str]) -> List[str]:
    """
    Return the job's skills that the student also lists.

    Case-insensitive exact token match: "SQL" matches "sql" but not
    "PostgreSQL". Surrounding whitespace is ignored on both sides, so
    " python" still matches "python". The job's own spelling is kept.
    """
    known = {s.strip().lower() for s in profile_skills if s and s.strip()}
    return [skill for skill in job_skills if skill and skill.strip().lower() in known]


def match_interests(job: JobPosting, interests: Iterable[str]) -> List[str]:
    """Return the interests that appear anywhere in the posting's text."""
    job_text = f"{job.title} {job.description} {job.industry}".lower()
    matched = []
    for interest in interests:
        token = (interest or "").strip().lower()
        if token and token in job_text:
            matched.append(interest)
    return matched


def explain(scored: ScoredPosting, profile: Optional[StudentProfile]) -> MatchExplanation:
    """
    Recompute the structured match signals (job type, industry, skills)
    for display. Uses the same rules as score_posting so the explanation
    always agrees with the score.
    """
    profile = profile or StudentProfile()
    job = scored.job
    return MatchExplanation(
        job_type_matched=job.job_type is not None and job.job_type in profile.preferred_job_types,
        industry_matched=bool(job.industry) and job.industry in profile.preferred_industries,
        matched_skills=match_skills(job.skills, profile.skills),
    )


def score_posting(job: JobPosting, profile: StudentProfile) -> ScoredPosting:
    """Score a single posting against a profile."""
    unscored = ScoredPosting(job=job, match_score=0)
    signals = explain(unscored, profile)
    interests = match_interests(job, profile.interests)

    score = 0
    if signals.job_type_matched:
        score += JOB_TYPE_WEIGHT
    if signals.industry_matched:
        score += INDUSTRY_WEIGHT
    score += SKILL_WEIGHT * len(signals.matched_skills)
    score += INTEREST_WEIGHT * len(interests)

    return ScoredPosting(
        job=job,
        match_score=score,
        job_type_matched=signals.job_type_matched,
        industry_matched=signals.industry_matched,
        matched_skills=signals.matched_skills,
        matched_interests=interests,
    )


def match_percentage(score: int) -> int:
    """
    Convert a raw score to the 0-100 figure shown on recommendation cards.
    """
    if score <= 0:
        return 0
    return min(round(score / FULL_MATCH_SCORE * 100), 100)


# ============================================================
# RANKING
# ============================================================

def _created_sort_key(scored: ScoredPosting) -> float:
    created = scored.job.created_at
    return created.timestamp() if created else float("-inf")


def rank(
    jobs: List[JobPosting],
    profile: Optional[StudentProfile],
    applications: List[Application]
) -> List[ScoredPosting]:
    """
    Rank postings for a student.

    Args:
        jobs: Catalog of open postings
        profile: Student's declared preferences (None == empty profile)
        applications: Student's applications; those jobs are never recommended

    Returns:
        At most 20 ScoredPosting, score >= 1, sorted by score descending.
        Equal scores are ordered newest posting first, then catalog order.
    """
    profile = profile or StudentProfile()
    applied_ids = {app.job_id for app in applications or []}

    seen = set()
    scored = []
    for job in jobs or []:
        if job.id in applied_ids or job.id in seen:
            continue
        seen.add(job.id)

        result = score_posting(job, profile)
        if result.match_score > 0:
            scored.append(result)

    # Two stable sorts: secondary key first, then primary
    scored.sort(key=_created_sort_key, reverse=True)
    scored.sort(key=lambda s: s.match_score, reverse=True)
    ranked = scored[:MAX_RECOMMENDATIONS]

    log.debug(
        "Ranked %d jobs (%d applied) -> %d scored, returning %d",
        len(jobs or []), len(applied_ids), len(scored), len(ranked)
    )
    return ranked


def find_recommendation(ranked: List[ScoredPosting], job_id: str) -> Optional[ScoredPosting]:
    """Look up a posting among ranked results by id."""
    for scored in ranked:
        if scored.job.id == str(job_id):
            return scored
    return None
