"""Helper utilities for the NG Jobs catalog."""

import csv
import io
from typing import List, Optional

from schemas.job_record import JobRecord
from utils.date_parser import format_extract_date

NOT_SPECIFIED = "Not specified"

CSV_HEADERS = [
    "id", "title", "company", "location", "country", "job_family",
    "degree_required", "degree_preferred",
    "min_years_required", "max_years_required", "min_years_preferred", "max_years_preferred",
    "skills_required", "skills_preferred", "info_extract_date", "url",
]


def _years(value: Optional[float]) -> str:
    """5.0 -> "5", 2.5 -> "2.5"."""
    return f"{value:g}"


def format_min_years(min_years: Optional[float]) -> str:
    """Card summary: "3+ years"; zero or missing counts as not specified."""
    if not min_years:
        return NOT_SPECIFIED
    return f"{_years(min_years)}+ years"


def format_years_range(min_years: Optional[float], max_years: Optional[float]) -> str:
    """Detail view: "3 - 5 years" or "3 - any years" when there is no upper bound."""
    if not min_years:
        return NOT_SPECIFIED
    upper = _years(max_years) if max_years else "any"
    return f"{_years(min_years)} - {upper} years"


def format_degree(job: JobRecord) -> str:
    """Required degree wins over preferred."""
    if job.degree_required:
        return f"Required: {job.degree_required}"
    if job.degree_preferred:
        return f"Preferred: {job.degree_preferred}"
    return NOT_SPECIFIED


def skill_preview(skills: List[str], limit: int = 3) -> tuple[List[str], int]:
    """First `limit` skills and how many were left out."""
    return skills[:limit], max(0, len(skills) - limit)


def deduplicate_jobs(jobs: List[JobRecord]) -> List[JobRecord]:
    """Remove duplicate records by id, keeping the first occurrence."""
    seen: set[str] = set()
    result: List[JobRecord] = []
    for j in jobs:
        if j.id not in seen:
            seen.add(j.id)
            result.append(j)
    return result


def export_csv(jobs: List[JobRecord]) -> bytes:
    """Export jobs to CSV bytes; skill lists are joined with "; "."""
    out = io.StringIO()
    writer = csv.writer(out)
    writer.writerow(CSV_HEADERS)
    for j in jobs:
        row = []
        for name in CSV_HEADERS:
            value = getattr(j, name)
            if isinstance(value, list):
                value = "; ".join(value)
            elif isinstance(value, float):
                value = _years(value)
            row.append("" if value is None else value)
        writer.writerow(row)
    return out.getvalue().encode("utf-8")


def listed_on(job: JobRecord) -> str:
    return format_extract_date(job.info_extract_date)
