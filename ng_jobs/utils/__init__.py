"""Utility exports."""

from .date_parser import format_extract_date, parse_extract_date
from .helpers import (
    deduplicate_jobs,
    export_csv,
    format_degree,
    format_min_years,
    format_years_range,
    listed_on,
    skill_preview,
)
from .logger import get_logger

__all__ = [
    "get_logger",
    "parse_extract_date",
    "format_extract_date",
    "deduplicate_jobs",
    "export_csv",
    "format_degree",
    "format_min_years",
    "format_years_range",
    "listed_on",
    "skill_preview",
]
