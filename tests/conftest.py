"""
Pytest configuration and shared fixtures.
"""

from typing import Any, Callable, Dict, List

import pytest

from schemas.job_record import JobRecord


@pytest.fixture
def job_payload() -> Dict[str, Any]:
    """One listJobs entry as returned by the upstream API."""
    return {
        "id": "job-1",
        "company": "Acme",
        "job_title": "Software Engineer",
        "job_location": "San Francisco, CA",
        "job_family": "Engineering",
        "degree_fields": ["Computer Science"],
        "degree_required": "Bachelor",
        "degree_preferred": "Master",
        "min_years_required": 2,
        "max_years_required": 4,
        "min_years_preferred": None,
        "max_years_preferred": None,
        "skills_required": ["Python", "Go"],
        "skills_preferred": ["Kubernetes"],
        "title": "Software Engineer - Acme Careers",
        "url": "https://acme.example/jobs/1",
        "info_extract_date": "2025-03-02T10:00:00Z",
        "extracted": "Build backend services.",
    }


@pytest.fixture
def make_job() -> Callable[..., JobRecord]:
    """Factory for JobRecords with only the fields a test cares about."""
    counter = {"n": 0}

    def _make(**fields: Any) -> JobRecord:
        counter["n"] += 1
        fields.setdefault("id", f"job-{counter['n']}")
        fields.setdefault("title", f"Job {counter['n']}")
        return JobRecord(**fields)

    return _make


@pytest.fixture
def sample_jobs(make_job) -> List[JobRecord]:
    """Small mixed dataset."""
    return [
        make_job(
            title="Backend Engineer",
            company="Acme",
            location="New York, NY",
            country="US",
            job_family="Software Engineering",
            min_years_required=0,
            skills_required=["Go"],
            degree_required="Bachelor",
            info_extract_date="2025-01-10T08:00:00Z",
        ),
        make_job(
            title="Data Scientist",
            company="Beta",
            location="Remote",
            country="US",
            job_family="Data Science",
            min_years_required=3,
            skills_required=["Python"],
            skills_preferred=["SQL", "Go"],
            degree_required="PhD",
            info_extract_date="2025-02-01T08:00:00Z",
        ),
        make_job(
            title="Product Manager",
            company="Acme",
            location="London",
            country="GB",
            job_family="Product",
            min_years_required=5,
            info_extract_date="2024-12-25",
        ),
        make_job(
            title="Research Intern",
            company="Gamma",
            location="Remote",
            job_family="Research",
            degree_preferred="Master",
            skills_preferred=["PyTorch"],
        ),
    ]
