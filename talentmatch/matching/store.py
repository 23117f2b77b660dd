"""File-backed job and candidate lookup"""
import json
from pathlib import Path
from typing import Dict, List, Optional, Union

import yaml
from pydantic import ValidationError

from .ranking import filter_by_availability
from ..profiles.models import CandidateProfile, JobPosting
from ..utils import logger


class StoreError(Exception):
    """Raised when the profile data cannot be loaded"""
    pass


class ProfileStore:
    """
    Read-only store of job postings and candidate profiles.

    Loads a YAML or JSON document shaped as {"jobs": [...], "candidates": [...]}.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        self._jobs: Dict[str, JobPosting] = {}
        self._candidates: List[CandidateProfile] = []
        self._load()

    def _read(self) -> dict:
        if not self.path.exists():
            raise StoreError(f"Profile data not found: {self.path}")
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                if self.path.suffix.lower() == ".json":
                    data = json.load(f)
                else:
                    data = yaml.safe_load(f)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise StoreError(f"Could not parse {self.path}: {e}") from e
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise StoreError(f"Expected a mapping at the top of {self.path}")
        return data

    def _load(self):
        data = self._read()
        try:
            jobs = [JobPosting.model_validate(item) for item in data.get("jobs") or []]
            self._candidates = [CandidateProfile.model_validate(item) for item in data.get("candidates") or []]
        except ValidationError as e:
            raise StoreError(f"Invalid profile data in {self.path}: {e}") from e

        self._jobs = {job.job_id: job for job in jobs}
        logger.info(f"Loaded {len(self._jobs)} jobs and {len(self._candidates)} candidates from {self.path}")

    @property
    def jobs(self) -> List[JobPosting]:
        return list(self._jobs.values())

    def get_job(self, job_id: str) -> Optional[JobPosting]:
        """Look up a job posting by id"""
        return self._jobs.get(job_id)

    def list_candidates(
        self,
        availability_status: Optional[str] = None,
        limit: Optional[int] = None
    ) -> List[CandidateProfile]:
        """List candidates, optionally filtered by availability and capped at limit"""
        candidates = filter_by_availability(self._candidates, availability_status)
        if limit is not None:
            candidates = candidates[:limit]
        return candidates
