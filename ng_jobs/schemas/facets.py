"""Facet option lists derived from a job dataset."""

from typing import List

from pydantic import BaseModel, Field


class FacetOptionSet(BaseModel):
    """Sorted distinct values used to populate filter widgets."""

    companies: List[str] = Field(default_factory=list)
    locations: List[str] = Field(default_factory=list)
    job_families: List[str] = Field(default_factory=list)
    skills: List[str] = Field(default_factory=list, description="Union of required and preferred skills")
    countries: List[str] = Field(default_factory=list)
