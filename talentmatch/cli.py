"""Command line ranking of candidates for a job"""
import argparse
import sys

from .matching import (
    CandidateMatcher,
    MatchFilters,
    ProfileStore,
    SortKey,
    StoreError,
    parse_skills_filter,
)
from .utils import config, logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Rank candidates for a job")
    parser.add_argument("--data", default=config.data_path, help="YAML or JSON file with jobs and candidates")
    parser.add_argument("--job-id", required=True, help="Job ID")
    parser.add_argument("--min-score", type=int, default=0, help="Drop matches scoring below this")
    parser.add_argument("--skills", help="Comma separated skills every match must cover")
    parser.add_argument("--location", help="City or state substring")
    parser.add_argument("--availability", help="Candidate availability status")
    parser.add_argument(
        "--sort-by",
        choices=[key.value for key in SortKey],
        default=config.default_sort,
        help="Result ordering"
    )
    parser.add_argument("--output", help="Output JSON file")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    try:
        store = ProfileStore(args.data)
    except StoreError as e:
        logger.error(str(e))
        return 1

    job = store.get_job(args.job_id)
    if job is None:
        logger.error(f"Job not found: {args.job_id}")
        return 1

    filters = MatchFilters(
        min_score=args.min_score,
        required_skills=parse_skills_filter(args.skills),
        location=args.location,
        availability_status=args.availability,
        sort_by=args.sort_by
    )

    matcher = CandidateMatcher()
    candidates = store.list_candidates(
        availability_status=filters.availability_status,
        limit=matcher.max_pool_size
    )
    output = matcher.match(job, candidates, filters)
    json_output = output.model_dump_json(indent=2)

    if args.output:
        with open(args.output, 'w') as f:
            f.write(json_output)
        logger.info(f"✓ Saved {len(output.results)} matches to {args.output}")
    else:
        print(json_output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
