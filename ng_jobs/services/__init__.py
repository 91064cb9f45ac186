"""Service exports."""

from .facet_service import Facet, build_facet_options, unique_skills, unique_values
from .filter_service import filter_jobs, job_matches, sort_by_extract_date
from .job_api import fetch_jobs, load_jobs

__all__ = [
    "Facet",
    "unique_values",
    "unique_skills",
    "build_facet_options",
    "filter_jobs",
    "job_matches",
    "sort_by_extract_date",
    "fetch_jobs",
    "load_jobs",
]
