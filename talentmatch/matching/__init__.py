"""Matching package"""
from .matcher import CandidateMatcher
from .models import MatchFactors, MatchFilters, MatchOutput, MatchResult, MatchSummary, SortKey
from .ranking import match_tier, parse_skills_filter, rank, summarize
from .scoring import MATCH_WEIGHTS, calculate_match, compose
from .skills import DEFAULT_VOCABULARY, SkillVocabulary, extract_skills
from .store import ProfileStore, StoreError

__all__ = [
    "CandidateMatcher",
    "MatchFactors",
    "MatchFilters",
    "MatchOutput",
    "MatchResult",
    "MatchSummary",
    "SortKey",
    "match_tier",
    "parse_skills_filter",
    "rank",
    "summarize",
    "MATCH_WEIGHTS",
    "calculate_match",
    "compose",
    "DEFAULT_VOCABULARY",
    "SkillVocabulary",
    "extract_skills",
    "ProfileStore",
    "StoreError",
]
