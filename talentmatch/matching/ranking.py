"""Filtering, ordering and summarising of scored matches"""
from datetime import datetime, timezone
from typing import Iterable, List, Optional

from .models import MatchFilters, MatchResult, MatchSummary, SortKey
from .scoring import round_score
from .skills import skills_match
from ..profiles.models import CandidateProfile

HIGH_MATCH_THRESHOLD = 80
MEDIUM_MATCH_THRESHOLD = 60
ALL = "all"

_OLDEST = datetime.min.replace(tzinfo=timezone.utc)


def is_unset(value: Optional[str]) -> bool:
    """True for empty filters and the "all" sentinel"""
    return value is None or not value.strip() or value.strip().lower() == ALL


def parse_skills_filter(raw: Optional[str]) -> List[str]:
    """Split a comma separated skills filter into terms"""
    if not raw:
        return []
    return [part.strip() for part in raw.split(",") if part.strip()]


def match_tier(score: int) -> str:
    if score >= HIGH_MATCH_THRESHOLD:
        return "high"
    if score >= MEDIUM_MATCH_THRESHOLD:
        return "medium"
    return "low"


def filter_by_availability(candidates: Iterable[CandidateProfile], status: Optional[str]) -> List[CandidateProfile]:
    """Keep candidates whose availability equals status (case-insensitive)"""
    if is_unset(status):
        return list(candidates)
    wanted = status.strip().lower()
    return [c for c in candidates if (c.availability_status or "").strip().lower() == wanted]


def _created_at(result: MatchResult) -> datetime:
    created = result.candidate.created_at
    if created is None:
        return _OLDEST
    if created.tzinfo is None:
        return created.replace(tzinfo=timezone.utc)
    return created


def rank(
    results: Iterable[MatchResult],
    filters: Optional[MatchFilters] = None,
    sort_by: Optional[SortKey] = None,
) -> List[MatchResult]:
    """
    Filter and order scored matches.

    Filters run in order: minimum overall score, ad-hoc required skills,
    free-text location. Sorting is stable, so ties keep their input order.

    Args:
        results: Scored matches for one job
        filters: Optional filter configuration
        sort_by: Overrides filters.sort_by when given

    Returns:
        A new list; the input is never modified
    """
    filters = filters or MatchFilters()
    sort_by = SortKey(sort_by or filters.sort_by)
    matches = list(results)

    if filters.min_score > 0:
        matches = [m for m in matches if m.overall >= filters.min_score]

    if filters.required_skills:
        matches = [
            m for m in matches
            if all(any(skills_match(ms, req) for ms in m.matching_skills) for req in filters.required_skills)
        ]

    if not is_unset(filters.location):
        needle = filters.location.strip().lower()
        matches = [m for m in matches if needle in m.candidate.display_location.lower()]

    if sort_by == SortKey.MATCH:
        matches.sort(key=lambda m: m.overall, reverse=True)
    elif sort_by == SortKey.EXPERIENCE:
        matches.sort(key=lambda m: m.factors.experience, reverse=True)
    elif sort_by == SortKey.RECENCY:
        matches.sort(key=_created_at, reverse=True)

    return matches


def summarize(results: List[MatchResult]) -> MatchSummary:
    """Average score and tier counts for a result list"""
    if not results:
        return MatchSummary()

    tiers = [match_tier(r.overall) for r in results]
    return MatchSummary(
        total=len(results),
        average_score=round_score(sum(r.overall for r in results) / len(results)),
        high_matches=tiers.count("high"),
        medium_matches=tiers.count("medium"),
        low_matches=tiers.count("low"),
    )
