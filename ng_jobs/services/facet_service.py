"""Derive facet option lists (distinct sorted values) from a job dataset."""

from enum import Enum
from typing import Callable, Dict, Iterable, List, Optional

from schemas.facets import FacetOptionSet
from schemas.job_record import JobRecord


class Facet(str, Enum):
    COMPANY = "company"
    LOCATION = "location"
    JOB_FAMILY = "job_family"
    COUNTRY = "country"


_FACET_ACCESSORS: Dict[Facet, Callable[[JobRecord], Optional[str]]] = {
    Facet.COMPANY: lambda j: j.company,
    Facet.LOCATION: lambda j: j.location,
    Facet.JOB_FAMILY: lambda j: j.job_family,
    Facet.COUNTRY: lambda j: j.country,
}


def _sorted_distinct(values: Iterable[object]) -> List[str]:
    """Non-empty strings only, deduplicated, ascending."""
    return sorted({v for v in values if isinstance(v, str) and v})


def unique_values(jobs: List[JobRecord], facet: Facet) -> List[str]:
    """
    Distinct values of one facet across all jobs, sorted ascending.
    Absent, empty and non-string values are skipped.
    """
    accessor = _FACET_ACCESSORS[Facet(facet)]
    return _sorted_distinct(accessor(j) for j in jobs)


def unique_skills(jobs: List[JobRecord]) -> List[str]:
    """Union of required and preferred skills across all jobs, each once, sorted."""
    return _sorted_distinct(
        skill
        for j in jobs
        for skills in (j.skills_required, j.skills_preferred)
        if isinstance(skills, list)
        for skill in skills
    )


def unique_companies(jobs: List[JobRecord]) -> List[str]:
    return unique_values(jobs, Facet.COMPANY)


def unique_locations(jobs: List[JobRecord]) -> List[str]:
    return unique_values(jobs, Facet.LOCATION)


def unique_job_families(jobs: List[JobRecord]) -> List[str]:
    return unique_values(jobs, Facet.JOB_FAMILY)


def unique_countries(jobs: List[JobRecord]) -> List[str]:
    return unique_values(jobs, Facet.COUNTRY)


def build_facet_options(jobs: List[JobRecord]) -> FacetOptionSet:
    """All facet lists for populating filter widgets. Recompute when the dataset changes."""
    return FacetOptionSet(
        companies=unique_companies(jobs),
        locations=unique_locations(jobs),
        job_families=unique_job_families(jobs),
        skills=unique_skills(jobs),
        countries=unique_countries(jobs),
    )
