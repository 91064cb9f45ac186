"""
Tests for facet option derivation.
"""

from services.facet_service import (
    Facet,
    build_facet_options,
    unique_companies,
    unique_skills,
    unique_values,
)


class TestUniqueValues:

    def test_sorted_and_distinct(self, sample_jobs):
        assert unique_values(sample_jobs, Facet.COMPANY) == ["Acme", "Beta", "Gamma"]
        assert unique_values(sample_jobs, Facet.LOCATION) == ["London", "New York, NY", "Remote"]

    def test_skips_missing_and_empty(self, make_job):
        jobs = [make_job(job_family=""), make_job(), make_job(job_family="Product")]
        assert unique_values(jobs, Facet.JOB_FAMILY) == ["Product"]

    def test_accepts_facet_name(self, sample_jobs):
        assert unique_values(sample_jobs, "country") == ["GB", "US"]

    def test_lexical_order_is_case_sensitive(self, make_job):
        jobs = [make_job(company="beta"), make_job(company="Acme"), make_job(company="Zeta")]
        assert unique_companies(jobs) == ["Acme", "Zeta", "beta"]

    def test_empty_dataset(self):
        assert unique_values([], Facet.COMPANY) == []


class TestUniqueSkills:

    def test_union_of_required_and_preferred(self, sample_jobs):
        assert unique_skills(sample_jobs) == ["Go", "PyTorch", "Python", "SQL"]

    def test_skill_counted_once_across_lists_and_jobs(self, make_job):
        jobs = [
            make_job(skills_required=["Go", "Go"], skills_preferred=["Go"]),
            make_job(skills_preferred=["Go"]),
        ]
        assert unique_skills(jobs) == ["Go"]

    def test_malformed_skill_lists_are_ignored(self, make_job):
        job = make_job(skills_required="Go", skills_preferred=[None, "", "Rust", 3])
        assert unique_skills([job]) == ["Rust"]


class TestBuildFacetOptions:

    def test_all_lists(self, sample_jobs):
        facets = build_facet_options(sample_jobs)
        assert facets.companies == ["Acme", "Beta", "Gamma"]
        assert facets.job_families == ["Data Science", "Product", "Research", "Software Engineering"]
        assert facets.skills == ["Go", "PyTorch", "Python", "SQL"]
        assert facets.countries == ["GB", "US"]

    def test_serializable(self, sample_jobs):
        dumped = build_facet_options(sample_jobs).model_dump()
        assert set(dumped) == {"companies", "locations", "job_families", "skills", "countries"}
