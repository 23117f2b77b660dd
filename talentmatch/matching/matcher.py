"""Candidate matching workflow with LangGraph"""
from typing import List, Dict, Optional
from typing_extensions import TypedDict
from langgraph.graph import StateGraph, END

from .models import MatchFilters, MatchOutput, MatchResult
from .ranking import filter_by_availability, rank, summarize
from .scoring import calculate_match
from .skills import DEFAULT_VOCABULARY, SkillVocabulary
from ..profiles.models import CandidateProfile, JobPosting
from ..utils import config, logger


# --- State Definition ---

class MatchingState(TypedDict):
    """State for matching graph"""
    job: JobPosting
    candidates: List[CandidateProfile]
    filters: MatchFilters
    vocabulary: SkillVocabulary
    max_pool_size: Optional[int]
    pool: List[CandidateProfile]
    scored: List[MatchResult]
    ranked: List[MatchResult]


# --- Nodes ---

def select_pool_node(state: MatchingState) -> Dict:
    """Apply the availability pre-filter and cap the pool size"""
    pool = filter_by_availability(state["candidates"], state["filters"].availability_status)
    if len(pool) < len(state["candidates"]):
        logger.debug(f"Availability filter kept {len(pool)}/{len(state['candidates'])} candidates")

    limit = state.get("max_pool_size")
    if limit is not None and len(pool) > limit:
        logger.warning(f"Candidate pool of {len(pool)} exceeds max_pool_size={limit}, truncating")
        pool = pool[:limit]

    return {"pool": pool}


def score_node(state: MatchingState) -> Dict:
    """Score every candidate in the pool against the job"""
    job = state["job"]
    vocabulary = state["vocabulary"]
    scored = [calculate_match(candidate, job, vocabulary) for candidate in state["pool"]]
    logger.debug(f"Scored {len(scored)} candidates for job {job.job_id}")
    return {"scored": scored}


def rank_node(state: MatchingState) -> Dict:
    """Filter and order the scored matches"""
    ranked = rank(state["scored"], state["filters"])
    if len(ranked) < len(state["scored"]):
        logger.debug(f"Filters kept {len(ranked)}/{len(state['scored'])} matches")
    return {"ranked": ranked}


# --- Graph Construction ---

def build_matching_graph():
    """Build matching workflow graph"""
    workflow = StateGraph(MatchingState)

    workflow.add_node("select_pool", select_pool_node)
    workflow.add_node("score", score_node)
    workflow.add_node("rank", rank_node)

    workflow.set_entry_point("select_pool")
    workflow.add_edge("select_pool", "score")
    workflow.add_edge("score", "rank")
    workflow.add_edge("rank", END)

    return workflow.compile()


def default_vocabulary() -> SkillVocabulary:
    """Vocabulary from configuration, or the built-in one"""
    terms = config.skill_vocabulary
    if terms:
        return SkillVocabulary.from_terms(terms)
    return DEFAULT_VOCABULARY


# --- Public API ---

class CandidateMatcher:
    """Candidate matching API"""

    def __init__(
        self,
        vocabulary: Optional[SkillVocabulary] = None,
        max_pool_size: Optional[int] = None
    ):
        self.vocabulary = vocabulary or default_vocabulary()
        self.max_pool_size = max_pool_size if max_pool_size is not None else config.max_pool_size
        self.graph = build_matching_graph()

    def match(
        self,
        job: JobPosting,
        candidates: List[CandidateProfile],
        filters: Optional[MatchFilters] = None
    ) -> MatchOutput:
        """
        Score a candidate pool against a job and return ranked matches

        Args:
            job: Materialized job posting
            candidates: Candidate pool; may be empty
            filters: Optional filter and sort configuration

        Returns:
            MatchOutput with ranked results and a summary
        """
        filters = filters or MatchFilters()
        initial_state = {
            "job": job,
            "candidates": list(candidates),
            "filters": filters,
            "vocabulary": self.vocabulary,
            "max_pool_size": self.max_pool_size,
            "pool": [],
            "scored": [],
            "ranked": []
        }

        logger.info(f"Matching {len(initial_state['candidates'])} candidates to job {job.job_id}")

        final_state = self.graph.invoke(initial_state)
        ranked = final_state["ranked"]

        logger.info(
            f"Ranked {len(ranked)} candidates for {job.job_id} by {filters.sort_by.value}. "
            f"Top match score: {ranked[0].overall if ranked else 0}"
        )

        return MatchOutput(
            job_id=job.job_id,
            job_title=job.title,
            results=ranked,
            summary=summarize(ranked)
        )
