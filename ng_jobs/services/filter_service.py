"""Filter and order job records. No UI logic; used by app layer."""

from datetime import datetime
from typing import Iterable, List, Optional, Set

from schemas.filter_spec import FilterSpec
from schemas.job_record import JobRecord
from utils.date_parser import parse_extract_date
from utils.logger import get_logger

logger = get_logger(__name__)

# Ordinal scale for degree ceiling comparison; unknown labels rank as no degree
DEGREE_RANKS = {
    "none": 0,
    "Bachelor": 1,
    "Master": 2,
    "PhD": 3,
}


def matches_search(job: JobRecord, search: str) -> bool:
    """Case-insensitive substring over title, company, location and job family."""
    if not search:
        return True
    haystack = " ".join(
        [job.title or "", job.company or "", job.location or "", job.job_family or ""]
    ).lower()
    return search.lower() in haystack


def matches_exact(value: Optional[str], selected: Optional[str]) -> bool:
    """Case-sensitive equality; None selection is unconstrained."""
    if selected is None:
        return True
    return value == selected


def matches_job_family(job: JobRecord, families: Iterable[str]) -> bool:
    """Passes if the job family contains any selection, ignoring case."""
    families = list(families)
    if not families:
        return True
    family = (job.job_family or "").lower()
    return any(f.lower() in family for f in families)


def effective_min_years(job: JobRecord) -> float:
    """Required minimum years; absent counts as 0 (preferred years are not consulted)."""
    years = job.min_years_required
    return years if isinstance(years, (int, float)) else 0


def matches_experience(job: JobRecord, max_years: Optional[int]) -> bool:
    """Ceiling: jobs requiring no more than max_years."""
    if max_years is None:
        return True
    return effective_min_years(job) <= max_years


def job_skills(job: JobRecord) -> Set[str]:
    """Union of required and preferred skill labels."""
    skills: Set[str] = set()
    for group in (job.skills_required, job.skills_preferred):
        if isinstance(group, list):
            skills.update(s for s in group if isinstance(s, str))
    return skills


def matches_skills(job: JobRecord, selected: Iterable[str]) -> bool:
    """At least one selected skill appears in the job (exact label match)."""
    selected = set(selected)
    if not selected:
        return True
    return not job_skills(job).isdisjoint(selected)


def degree_rank(label: Optional[str]) -> int:
    return DEGREE_RANKS.get(label, 0) if label else 0


def effective_degree(job: JobRecord) -> Optional[str]:
    """Required degree, falling back to preferred."""
    return job.degree_required or job.degree_preferred or None


def matches_degree(job: JobRecord, degree: Optional[str]) -> bool:
    """
    Ceiling: the job's degree must rank at or below the user's degree.
    Jobs that state no degree at all always pass, whatever the selection.
    """
    if degree is None:
        return True
    job_degree = effective_degree(job)
    if job_degree is None:
        return True
    return degree_rank(job_degree) <= degree_rank(degree)


def job_matches(job: JobRecord, spec: FilterSpec) -> bool:
    """True if the job passes every active criterion in spec."""
    return (
        matches_search(job, spec.search)
        and matches_exact(job.company, spec.company)
        and matches_exact(job.country, spec.country)
        and matches_exact(job.location, spec.location)
        and matches_job_family(job, spec.job_families)
        and matches_experience(job, spec.max_years)
        and matches_skills(job, spec.skills)
        and matches_degree(job, spec.degree)
    )


def filter_jobs(jobs: List[JobRecord], spec: FilterSpec) -> List[JobRecord]:
    """
    Return jobs passing every active criterion of spec. Does not mutate the input list;
    input order is preserved (use sort_by_extract_date for display order).
    An unconstrained spec returns all jobs.
    """
    if spec.is_unconstrained:
        return list(jobs)
    result = [j for j in jobs if job_matches(j, spec)]
    logger.debug(
        "Filtered %s jobs to %s (%s active criteria)",
        len(jobs),
        len(result),
        spec.active_criteria_count,
    )
    return result


def sort_by_extract_date(jobs: List[JobRecord]) -> List[JobRecord]:
    """
    Newest first by info_extract_date. Stable: equal timestamps keep input order.
    Jobs with a missing or unparsable date go last, in input order.
    """
    dated: List[tuple[datetime, JobRecord]] = []
    undated: List[JobRecord] = []
    for j in jobs:
        parsed = parse_extract_date(j.info_extract_date)
        if parsed is None:
            undated.append(j)
        else:
            dated.append((parsed, j))
    dated.sort(key=lambda item: item[0], reverse=True)
    return [j for _, j in dated] + undated
