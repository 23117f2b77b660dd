"""Matching models"""
from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, Field

from ..profiles.models import CandidateProfile


class SortKey(str, Enum):
    """Ordering applied by the ranker"""
    MATCH = "match"
    EXPERIENCE = "experience"
    RECENCY = "recency"


class MatchFactors(BaseModel):
    """Detailed matching factors with scores"""
    skills: int = Field(..., ge=0, le=100, description="Job skill coverage")
    experience: int = Field(..., ge=0, le=100, description="Experience level proximity")
    location: int = Field(..., ge=0, le=100, description="Location and remote compatibility")
    salary: int = Field(..., ge=0, le=100, description="Compensation overlap")


class MatchResult(BaseModel):
    """Single candidate match for one job"""
    candidate_id: str
    candidate: CandidateProfile
    candidate_skills: List[str] = Field(default_factory=list, description="Skills extracted from the profile")
    overall: int = Field(..., ge=0, le=100, description="Overall weighted match score")
    factors: MatchFactors
    matching_skills: List[str] = Field(default_factory=list, description="Job skills the candidate covers")
    missing_skills: List[str] = Field(default_factory=list, description="Job skills the candidate lacks")


class MatchFilters(BaseModel):
    """Caller-supplied filter and sort configuration"""
    min_score: int = Field(0, ge=0)
    required_skills: List[str] = Field(default_factory=list, description="Ad-hoc skills every result must match")
    location: Optional[str] = Field(None, description="Free-text city/state filter")
    availability_status: Optional[str] = Field(None, description="Candidate availability pre-filter")
    sort_by: SortKey = SortKey.MATCH


class MatchSummary(BaseModel):
    """Aggregate figures over a ranked result list"""
    total: int = 0
    average_score: int = 0
    high_matches: int = 0
    medium_matches: int = 0
    low_matches: int = 0


class MatchOutput(BaseModel):
    """Complete matching output for one job"""
    job_id: str
    job_title: str
    results: List[MatchResult]
    summary: MatchSummary
