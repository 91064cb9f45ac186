"""
NG Jobs – Streamlit frontend for browsing job listings.
No business logic in layout; fetching, facets and filtering live in services.
"""

from typing import List

import streamlit as st

from config import (
    ALL_OPTION,
    ANY_DEGREE,
    COUNTRY_LABELS,
    DEFAULT_EXPERIENCE,
    DEGREE_OPTIONS,
    EXPERIENCE_OPTIONS,
)
from schemas.facets import FacetOptionSet
from schemas.fetch_result import JobFetchResult
from schemas.filter_spec import FilterSpec
from schemas.job_record import JobRecord
from services.facet_service import build_facet_options
from services.filter_service import filter_jobs, sort_by_extract_date
from services.job_api import load_jobs
from utils.helpers import (
    export_csv,
    format_degree,
    format_min_years,
    format_years_range,
    listed_on,
    skill_preview,
)
from utils.logger import get_logger

logger = get_logger(__name__)

# Widget key -> reset value
FILTER_DEFAULTS = {
    "search": "",
    "country": ALL_OPTION,
    "company": ALL_OPTION,
    "location": ALL_OPTION,
    "experience": DEFAULT_EXPERIENCE,
    "degree": ANY_DEGREE,
    "job_families": [],
    "skills": [],
}


def _reset_filters() -> None:
    for key, value in FILTER_DEFAULTS.items():
        st.session_state[key] = list(value) if isinstance(value, list) else value


def _filters_changed() -> bool:
    return any(st.session_state.get(k, v) != v for k, v in FILTER_DEFAULTS.items())


def _load_dataset() -> None:
    """Fetch jobs once per session (or on reload) and derive facet options."""
    with st.spinner("Loading job listings…"):
        result: JobFetchResult = load_jobs()
    st.session_state["jobs_result"] = result
    st.session_state["facets"] = build_facet_options(result.jobs)
    _reset_filters()
    if not result.ok:
        logger.error("Job fetch failed: %s", result.error)


def _country_options(facets: FacetOptionSet) -> List[str]:
    codes = set(COUNTRY_LABELS) - {ALL_OPTION}
    return [ALL_OPTION] + sorted(codes | set(facets.countries))


def _build_spec() -> FilterSpec:
    """New FilterSpec from current widget values; never mutated afterwards."""
    return FilterSpec(
        search=st.session_state.get("search", ""),
        country=st.session_state.get("country"),
        company=st.session_state.get("company"),
        location=st.session_state.get("location"),
        max_years=st.session_state.get("experience"),
        degree=st.session_state.get("degree"),
        job_families=st.session_state.get("job_families") or [],
        skills=st.session_state.get("skills") or [],
    )


def render_filters(facets: FacetOptionSet) -> FilterSpec:
    """Filter widgets populated from the dataset's facet options."""
    with st.container():
        col1, col2, col3, col4 = st.columns([3, 1, 1, 1])
        with col1:
            st.text_input("Search", placeholder="Search jobs, companies, locations…", key="search")
        with col2:
            st.selectbox(
                "Country",
                options=_country_options(facets),
                format_func=lambda c: COUNTRY_LABELS.get(c, c),
                key="country",
            )
        with col3:
            st.selectbox(
                "Experience",
                options=list(EXPERIENCE_OPTIONS),
                format_func=EXPERIENCE_OPTIONS.get,
                key="experience",
            )
        with col4:
            st.selectbox(
                "Your Degree",
                options=list(DEGREE_OPTIONS),
                format_func=DEGREE_OPTIONS.get,
                key="degree",
            )

        col5, col6 = st.columns(2)
        with col5:
            st.selectbox(
                "Company",
                options=[ALL_OPTION] + facets.companies,
                format_func=lambda c: "All Companies" if c == ALL_OPTION else c,
                key="company",
            )
        with col6:
            st.selectbox(
                "Location",
                options=[ALL_OPTION] + facets.locations,
                format_func=lambda c: "All Locations" if c == ALL_OPTION else c,
                key="location",
            )

        st.multiselect("Job Family", options=facets.job_families, key="job_families")
        st.multiselect(
            "Skills",
            options=facets.skills,
            key="skills",
            help="Choose skills to filter job listings. A job matches if it lists any of them.",
        )
        if _filters_changed():
            st.button("Clear Filters", on_click=_reset_filters, key="clear_filters")
    return _build_spec()


def render_job(job: JobRecord) -> None:
    st.markdown("---")
    col_a, col_b = st.columns([3, 1])
    with col_a:
        st.markdown(f"### {job.title}")
        st.caption(f"**{job.company or '—'}** · {job.location or '—'}")
        st.caption(f"Expected experience: {format_min_years(job.min_years_required)}")
        shown, hidden = skill_preview(job.skills_required)
        if shown:
            badges = " ".join(f"`{s}`" for s in shown)
            st.markdown(badges + (f" +{hidden}" if hidden else ""))
    with col_b:
        st.caption(listed_on(job))
        if job.url:
            st.link_button("Apply", url=job.url, type="primary")

    with st.expander("Details"):
        st.markdown("#### Job Details")
        st.markdown(f"**Job Family:** {job.job_family or 'Not specified'}")
        st.markdown(
            f"**Experience Required:** {format_years_range(job.min_years_required, job.max_years_required)}"
        )
        st.markdown(
            f"**Experience Preferred:** {format_years_range(job.min_years_preferred, job.max_years_preferred)}"
        )
        st.markdown(f"**Degree:** {format_degree(job)}")
        if job.degree_fields:
            st.markdown(f"**Fields of Study:** {', '.join(job.degree_fields)}")

        st.markdown("#### Skills")
        required = " ".join(f"`{s}`" for s in job.skills_required) or "None specified"
        preferred = " ".join(f"`{s}`" for s in job.skills_preferred) or "None specified"
        st.markdown(f"**Required Skills:** {required}")
        st.markdown(f"**Preferred Skills:** {preferred}")

        st.markdown("#### Additional Information")
        st.caption(f"Listed: {listed_on(job)}")
        if job.extracted:
            st.markdown(job.extracted)
        if job.url:
            st.markdown(f"[Apply on Company Website]({job.url})")


def render_layout() -> None:
    """Streamlit page layout; filters and display use services layer."""
    st.set_page_config(page_title="NG Jobs", layout="wide")
    st.title("NG Jobs")
    st.markdown("*Filter and browse available job listings.*")

    if st.button("Reload jobs", key="reload_btn") or "jobs_result" not in st.session_state:
        _load_dataset()

    result: JobFetchResult = st.session_state["jobs_result"]
    facets: FacetOptionSet = st.session_state["facets"]
    jobs = result.jobs

    st.divider()
    st.subheader("Filters")
    spec = render_filters(facets)
    st.divider()

    if not result.ok:
        st.error("Failed to fetch jobs. Please try again later.")
        return

    filtered = sort_by_extract_date(filter_jobs(jobs, spec))

    if not filtered:
        st.info("No job listings found matching your criteria")
    else:
        st.download_button(
            "Export to CSV",
            data=export_csv(filtered),
            file_name="ng_jobs.csv",
            mime="text/csv",
            key="export_csv",
        )
        for job in filtered:
            render_job(job)

    st.caption(f"Showing {len(filtered)} of {len(jobs)} job listings")


if __name__ == "__main__":
    render_layout()
