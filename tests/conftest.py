"""
Pytest configuration and shared fixtures.
"""

import pytest
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List

import yaml

from talentmatch.profiles.models import CandidateProfile, JobPosting

from .factories import make_candidate, make_job


@pytest.fixture
def senior_react_job() -> JobPosting:
    """Senior React job in California."""
    return make_job(
        job_id="job_react",
        title="Senior Frontend Engineer",
        required_skills=["React", "TypeScript"],
        experience_level="senior",
        location={"state": "CA"},
        salary_range={"min_cents": 12000000, "max_cents": 18000000},
    )


@pytest.fixture
def react_candidate() -> CandidateProfile:
    """React candidate in California with a strong reputation."""
    return make_candidate(
        "cand_react",
        headline="React and TypeScript engineer",
        location={"state": "CA"},
        desired_salary_range={"min_cents": 13000000, "max_cents": 16000000},
        reputation_score=85,
    )


@pytest.fixture
def candidate_pool() -> List[CandidateProfile]:
    """Small mixed pool for end to end matching."""
    return [
        make_candidate(
            "cand_strong",
            headline="React and TypeScript engineer",
            location={"city": "San Francisco", "state": "CA"},
            desired_salary_range={"min_cents": 13000000, "max_cents": 16000000},
            reputation_score=65,
            availability_status="available",
            created_at=datetime(2024, 1, 10, tzinfo=timezone.utc),
        ),
        make_candidate(
            "cand_partial",
            headline="Frontend developer",
            summary="React, CSS and HTML",
            location={"city": "Austin", "state": "TX"},
            desired_salary_range={"min_cents": 9000000, "max_cents": 11000000},
            reputation_score=30,
            availability_status="open_to_offers",
            created_at=datetime(2024, 6, 1, tzinfo=timezone.utc),
        ),
        make_candidate(
            "cand_none",
            headline="Accountant",
            summary="Finance and Accounting",
            location={"city": "Boston", "state": "MA"},
            reputation_score=10,
            availability_status="available",
            created_at=datetime(2023, 2, 1, tzinfo=timezone.utc),
        ),
    ]


@pytest.fixture
def pool_data() -> Dict[str, Any]:
    """Raw store document."""
    return {
        "jobs": [
            {
                "job_id": "job_001",
                "title": "Senior Frontend Engineer",
                "required_skills": ["React", "TypeScript"],
                "experience_level": "senior",
                "location": {"state": "CA"},
                "salary_range": {"min_cents": 12000000, "max_cents": 18000000},
            },
            {"job_id": "job_002", "title": "Generalist"},
        ],
        "candidates": [
            {
                "candidate_id": "cand_001",
                "headline": "React and TypeScript engineer",
                "location": {"state": "CA"},
                "reputation_score": 65,
                "availability_status": "available",
                "created_at": "2024-03-01T12:00:00Z",
            },
            {
                "candidate_id": "cand_002",
                "headline": "Python developer",
                "reputation_score": 40,
                "availability_status": "not_looking",
            },
            {
                "candidate_id": "cand_003",
                "headline": "Go and Rust engineer",
                "availability_status": "Available",
            },
        ],
    }


@pytest.fixture
def pool_file(tmp_path, pool_data) -> Path:
    """Store document written as YAML."""
    path = tmp_path / "pool.yaml"
    path.write_text(yaml.safe_dump(pool_data))
    return path
