"""Data models for job postings and candidate profiles"""
from datetime import datetime
from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, Field

EXPERIENCE_LEVELS = ["internship", "entry", "junior", "mid", "senior", "lead", "principal", "executive"]


def experience_index(level: Optional[str]) -> Optional[int]:
    """Position of a level label on the ladder, None when unspecified or unknown"""
    if not level:
        return None
    label = level.strip().lower()
    if label not in EXPERIENCE_LEVELS:
        return None
    return EXPERIENCE_LEVELS.index(label)


class RemotePolicy(str, Enum):
    """Job remote policy"""
    REMOTE = "remote"
    HYBRID = "hybrid"
    ONSITE = "onsite"
    UNSPECIFIED = "unspecified"


class RemotePreference(str, Enum):
    """Candidate remote preference"""
    REMOTE = "remote"
    HYBRID = "hybrid"
    ONSITE = "onsite"
    NO_PREFERENCE = "no_preference"


class Location(BaseModel):
    """Location information"""
    city: Optional[str] = Field(None, description="City name")
    state: Optional[str] = Field(None, description="State or province")
    country: Optional[str] = Field(None, description="Country name or code")


class SalaryRange(BaseModel):
    """Salary range in cents"""
    min_cents: Optional[int] = Field(None, ge=0, description="Lower bound in cents")
    max_cents: Optional[int] = Field(None, ge=0, description="Upper bound in cents")

    @property
    def is_complete(self) -> bool:
        return self.min_cents is not None and self.max_cents is not None


def format_salary(cents: Optional[int]) -> str:
    """Render cents as whole US dollars"""
    if cents is None:
        return ""
    return f"${(cents + 50) // 100:,}"


class JobPosting(BaseModel):
    """Job posting supplied by the jobs service"""
    job_id: str
    title: str
    company: Optional[str] = None
    required_skills: List[str] = Field(default_factory=list, description="Must-have skills")
    preferred_skills: List[str] = Field(default_factory=list, description="Nice-to-have skills")
    experience_level: Optional[str] = Field(None, description="One of EXPERIENCE_LEVELS")
    location: Location = Field(default_factory=Location)
    remote_policy: RemotePolicy = RemotePolicy.UNSPECIFIED
    salary_range: Optional[SalaryRange] = None


class CandidateProfile(BaseModel):
    """Candidate profile supplied by the talent service"""
    candidate_id: str
    headline: Optional[str] = Field(None, description="Profile headline")
    summary: Optional[str] = Field(None, description="Free-text profile summary")
    location: Location = Field(default_factory=Location)
    remote_preference: RemotePreference = RemotePreference.NO_PREFERENCE
    desired_salary_range: Optional[SalaryRange] = None
    reputation_score: float = Field(0.0, ge=0.0, le=100.0, description="Externally maintained reliability signal")
    availability_status: Optional[str] = Field(None, description="e.g. available, open_to_offers, not_looking")
    created_at: Optional[datetime] = Field(None, description="Profile creation timestamp")

    @property
    def display_location(self) -> str:
        """City and state joined for display and free-text filtering"""
        return ", ".join(part for part in (self.location.city, self.location.state) if part)

    class Config:
        json_schema_extra = {
            "example": {
                "candidate_id": "cand_001",
                "headline": "Senior React and TypeScript engineer",
                "summary": "Builds design systems with Next.js and GraphQL.",
                "location": {"city": "San Francisco", "state": "CA", "country": "US"},
                "remote_preference": "hybrid",
                "desired_salary_range": {"min_cents": 13000000, "max_cents": 16000000},
                "reputation_score": 85,
                "availability_status": "available",
                "created_at": "2024-03-01T12:00:00Z"
            }
        }
