"""Profile models package"""
from .models import (
    EXPERIENCE_LEVELS,
    CandidateProfile,
    JobPosting,
    Location,
    RemotePolicy,
    RemotePreference,
    SalaryRange,
    experience_index,
    format_salary,
)

__all__ = [
    "EXPERIENCE_LEVELS",
    "CandidateProfile",
    "JobPosting",
    "Location",
    "RemotePolicy",
    "RemotePreference",
    "SalaryRange",
    "experience_index",
    "format_salary",
]
