#!/usr/bin/env python3
"""Main entry point for the candidate matching engine"""
import sys
from rich.console import Console
from rich.table import Table

from talentmatch.matching import CandidateMatcher, MatchFilters, ProfileStore, StoreError, match_tier
from talentmatch.profiles import format_salary
from talentmatch.utils import logger, config, monitor

console = Console()

TIER_STYLES = {"high": "green", "medium": "yellow", "low": "red"}


def display_matches(output):
    """Display ranked matches in a table"""
    table = Table(title=f"Candidate Matches for {output.job_title}")
    table.add_column("Rank", style="cyan", width=6)
    table.add_column("Candidate", style="magenta")
    table.add_column("Location")
    table.add_column("Desired Min", justify="right")
    table.add_column("Match", width=8)
    table.add_column("Skills", width=8)
    table.add_column("Experience", width=10)
    table.add_column("Location", width=8)
    table.add_column("Salary", width=8)
    table.add_column("Tier", width=8)

    for i, match in enumerate(output.results, 1):
        style = TIER_STYLES[match_tier(match.overall)]
        desired = match.candidate.desired_salary_range
        table.add_row(
            str(i),
            match.candidate.headline or "Untitled Profile",
            match.candidate.display_location,
            format_salary(desired.min_cents if desired else None),
            f"[{style}]{match.overall}[/{style}]",
            str(match.factors.skills),
            str(match.factors.experience),
            str(match.factors.location),
            str(match.factors.salary),
            f"[{style}]{match_tier(match.overall)}[/{style}]"
        )

    console.print(table)
    summary = output.summary
    console.print(
        f"Average score [bold]{summary.average_score}[/bold] | "
        f"[green]{summary.high_matches} high[/green] | "
        f"[yellow]{summary.medium_matches} medium[/yellow] | "
        f"[red]{summary.low_matches} low[/red]"
    )


def main():
    """Main workflow"""
    console.print("[bold blue]Candidate Matching Engine[/bold blue]\n")

    try:
        store = ProfileStore(config.data_path)
    except StoreError as e:
        logger.error(str(e))
        return 1

    if not store.jobs:
        logger.error(f"No jobs found in {config.data_path}")
        return 1

    matcher = CandidateMatcher()
    match = monitor.measure(matcher.match)

    for job in store.jobs:
        candidates = store.list_candidates(limit=matcher.max_pool_size)
        output = match(job, candidates, MatchFilters(sort_by=config.default_sort))
        display_matches(output)

    logger.info(f"Performance: {monitor.get_report()}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
