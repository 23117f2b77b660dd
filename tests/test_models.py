"""
Tests for profile models and helpers.
"""

import pytest
from pydantic import ValidationError

from talentmatch.profiles.models import (
    CandidateProfile,
    RemotePolicy,
    SalaryRange,
    experience_index,
    format_salary,
)

from .factories import make_candidate, make_job


class TestProfileModels:
    """Test model defaults and validation."""

    def test_job_defaults(self):
        job = make_job()
        assert job.required_skills == []
        assert job.remote_policy == RemotePolicy.UNSPECIFIED
        assert job.salary_range is None

    def test_reputation_bounds(self):
        with pytest.raises(ValidationError):
            CandidateProfile(candidate_id="c", reputation_score=101)

    def test_display_location(self):
        assert make_candidate(location={"city": "Austin", "state": "TX"}).display_location == "Austin, TX"
        assert make_candidate(location={"state": "TX"}).display_location == "TX"
        assert make_candidate().display_location == ""

    def test_salary_range_completeness(self):
        assert SalaryRange(min_cents=1, max_cents=2).is_complete
        assert not SalaryRange(min_cents=1).is_complete


class TestHelpers:
    """Test ladder lookup and salary formatting."""

    @pytest.mark.parametrize("level, expected", [
        ("internship", 0),
        ("Senior", 4),
        (" executive ", 7),
        ("wizard", None),
        (None, None),
    ])
    def test_experience_index(self, level, expected):
        assert experience_index(level) == expected

    @pytest.mark.parametrize("cents, expected", [
        (12000000, "$120,000"),
        (99, "$1"),
        (0, "$0"),
        (None, ""),
    ])
    def test_format_salary(self, cents, expected):
        assert format_salary(cents) == expected
