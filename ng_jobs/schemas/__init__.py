"""Schema exports."""

from .facets import FacetOptionSet
from .fetch_result import JobFetchResult
from .filter_spec import FilterSpec
from .job_record import JobRecord

__all__ = ["JobRecord", "FilterSpec", "FacetOptionSet", "JobFetchResult"]
