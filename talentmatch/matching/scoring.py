"""
Deterministic candidate scoring against a single job.

Four independent sub-scores (skills, experience, location, salary), each an
integer in [0, 100], are combined into one weighted overall score. Every
function here is pure: identical inputs always give identical scores.
"""
from decimal import ROUND_HALF_UP, Decimal
from typing import List, NamedTuple, Sequence

from .models import MatchFactors, MatchResult
from .skills import DEFAULT_VOCABULARY, SkillVocabulary, extract_skills, skills_match
from ..profiles.models import (
    EXPERIENCE_LEVELS,
    CandidateProfile,
    JobPosting,
    RemotePolicy,
    RemotePreference,
    experience_index,
)

SKILLS_WEIGHT = 0.40
EXPERIENCE_WEIGHT = 0.25
LOCATION_WEIGHT = 0.20
SALARY_WEIGHT = 0.15

MATCH_WEIGHTS = {
    "skills": SKILLS_WEIGHT,
    "experience": EXPERIENCE_WEIGHT,
    "location": LOCATION_WEIGHT,
    "salary": SALARY_WEIGHT,
}

# Reputation thresholds mapped to ladder buckets; tunable heuristics
REPUTATION_BUCKETS = ((80, 5), (60, 4), (40, 3), (20, 2))
REPUTATION_FLOOR_BUCKET = 1
BROAD_SKILL_COUNT = 10

EXPERIENCE_DISTANCE_SCORES = (100, 70, 40)
EXPERIENCE_FAR_SCORE = 20
EXPERIENCE_UNSPECIFIED_SCORE = 60


class SkillMatch(NamedTuple):
    """Skill sub-score with the job skills split into covered and missing"""
    score: int
    matching: List[str]
    missing: List[str]


def round_score(value: float) -> int:
    """Round half up to an integer"""
    return int(Decimal(str(value)).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def job_skill_union(job: JobPosting) -> List[str]:
    """Required then preferred skills, each distinct string counted once"""
    seen = set()
    union: List[str] = []
    for skill in list(job.required_skills) + list(job.preferred_skills):
        if skill in seen:
            continue
        seen.add(skill)
        union.append(skill)
    return union


def score_skills(candidate_skills: Sequence[str], job: JobPosting) -> SkillMatch:
    all_job_skills = job_skill_union(job)
    if not all_job_skills:
        return SkillMatch(70 if candidate_skills else 50, [], [])

    matching: List[str] = []
    missing: List[str] = []
    for job_skill in all_job_skills:
        if any(skills_match(candidate_skill, job_skill) for candidate_skill in candidate_skills):
            matching.append(job_skill)
        else:
            missing.append(job_skill)

    score = round_score(100 * len(matching) / max(len(all_job_skills), 1))
    return SkillMatch(score, matching, missing)


def _same(a, b) -> bool:
    return bool(a) and bool(b) and a.strip().lower() == b.strip().lower()


def score_location(candidate: CandidateProfile, job: JobPosting) -> int:
    """Tiered location compatibility; tiers only ever raise the score"""
    cand, place = candidate.location, job.location
    job_remote = job.remote_policy == RemotePolicy.REMOTE
    cand_remote = candidate.remote_preference == RemotePreference.REMOTE

    score = 0
    if job_remote or cand_remote:
        score = max(score, 80)
    if job_remote and cand_remote:
        score = max(score, 100)
    if _same(cand.city, place.city) and _same(cand.state, place.state):
        score = max(score, 100)
    if _same(cand.state, place.state):
        score = max(score, 70)
    if _same(cand.country, place.country):
        score = max(score, 40)
    if not cand.city and not cand.state:
        score = max(score, 50)
    return score


def score_salary(candidate: CandidateProfile, job: JobPosting) -> int:
    """Compensation overlap between desired and offered ranges"""
    desired = candidate.desired_salary_range
    offered = job.salary_range
    cand_min = desired.min_cents if desired else None
    cand_max = desired.max_cents if desired else None
    job_min = offered.min_cents if offered else None
    job_max = offered.max_cents if offered else None

    if None not in (cand_min, cand_max, job_min, job_max):
        overlap_start = max(cand_min, job_min)
        overlap_end = min(cand_max, job_max)
        if overlap_start <= overlap_end:
            candidate_width = max(cand_max - cand_min, 1)
            return min(100, round_score(100 * (overlap_end - overlap_start) / candidate_width))
        gap = overlap_start - overlap_end
        avg_width = max(((cand_max - cand_min) + (job_max - job_min)) / 2, 1)
        return max(0, round_score(50 * (1 - gap / avg_width)))

    if cand_min is not None and job_max is not None:
        return 80 if cand_min <= job_max else 20
    if cand_max is not None and job_min is not None:
        return 80 if cand_max >= job_min else 20
    return 50


def infer_experience_level(candidate: CandidateProfile, skill_count: int) -> int:
    """
    Estimate a candidate's ladder position.

    There is no first-class level on a profile, so the reputation score is
    bucketed and a broad skill set bumps the estimate by one level.
    """
    level = REPUTATION_FLOOR_BUCKET
    for threshold, bucket in REPUTATION_BUCKETS:
        if candidate.reputation_score >= threshold:
            level = bucket
            break
    if skill_count >= BROAD_SKILL_COUNT:
        level = min(level + 1, len(EXPERIENCE_LEVELS) - 1)
    return level


def score_experience(candidate: CandidateProfile, skill_count: int, job: JobPosting) -> int:
    job_level = experience_index(job.experience_level)
    if job_level is None:
        return EXPERIENCE_UNSPECIFIED_SCORE

    diff = abs(infer_experience_level(candidate, skill_count) - job_level)
    if diff < len(EXPERIENCE_DISTANCE_SCORES):
        return EXPERIENCE_DISTANCE_SCORES[diff]
    return EXPERIENCE_FAR_SCORE


def compose(factors: MatchFactors) -> int:
    """Weighted overall score"""
    total = (
        Decimal(str(SKILLS_WEIGHT)) * factors.skills
        + Decimal(str(EXPERIENCE_WEIGHT)) * factors.experience
        + Decimal(str(LOCATION_WEIGHT)) * factors.location
        + Decimal(str(SALARY_WEIGHT)) * factors.salary
    )
    return int(total.quantize(Decimal(1), rounding=ROUND_HALF_UP))


def calculate_match(
    candidate: CandidateProfile,
    job: JobPosting,
    vocabulary: SkillVocabulary = DEFAULT_VOCABULARY,
) -> MatchResult:
    """Score one candidate against one job"""
    candidate_skills = extract_skills(candidate, vocabulary)
    skill_match = score_skills(candidate_skills, job)

    factors = MatchFactors(
        skills=skill_match.score,
        experience=score_experience(candidate, len(candidate_skills), job),
        location=score_location(candidate, job),
        salary=score_salary(candidate, job),
    )

    return MatchResult(
        candidate_id=candidate.candidate_id,
        candidate=candidate,
        candidate_skills=candidate_skills,
        overall=compose(factors),
        factors=factors,
        matching_skills=skill_match.matching,
        missing_skills=skill_match.missing,
    )
