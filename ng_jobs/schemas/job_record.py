"""Job record schema as served by the upstream listJobs query."""

import math
from typing import Any, List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator


class JobRecord(BaseModel):
    """
    Read-only snapshot of one job posting.
    Malformed optional values are normalized to None / [] instead of failing validation;
    only a missing id or title rejects the record.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str = Field(..., min_length=1, description="Upstream identifier")
    title: str = Field(
        ...,
        min_length=1,
        validation_alias=AliasChoices("job_title", "title"),
        description="Job title",
    )
    company: Optional[str] = Field(default=None, description="Company name")
    location: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("job_location", "location"),
        description="Free-text job location",
    )
    country: Optional[str] = Field(default=None, description="ISO country code")
    job_family: Optional[str] = Field(default=None, description="Job family label, e.g. Engineering")
    degree_fields: List[str] = Field(default_factory=list, description="Accepted fields of study")
    degree_required: Optional[str] = Field(default=None, description="Required degree label")
    degree_preferred: Optional[str] = Field(default=None, description="Preferred degree label")
    min_years_required: Optional[float] = Field(default=None)
    max_years_required: Optional[float] = Field(default=None)
    min_years_preferred: Optional[float] = Field(default=None)
    max_years_preferred: Optional[float] = Field(default=None)
    skills_required: List[str] = Field(default_factory=list)
    skills_preferred: List[str] = Field(default_factory=list)
    extracted: Optional[str] = Field(default=None, description="Extracted posting summary")
    info_extract_date: Optional[str] = Field(default=None, description="ISO 8601 extraction timestamp")
    url: Optional[str] = Field(default=None, description="External application URL")

    @model_validator(mode="before")
    @classmethod
    def _fallback_to_page_title(cls, data: Any) -> Any:
        """Use `title` when `job_title` is present but null or blank."""
        if isinstance(data, dict) and "job_title" in data:
            job_title = data["job_title"]
            if not (isinstance(job_title, str) and job_title.strip()):
                data = {k: v for k, v in data.items() if k != "job_title"}
        return data

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: Any) -> Any:
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator(
        "company",
        "location",
        "country",
        "job_family",
        "degree_required",
        "degree_preferred",
        "extracted",
        "info_extract_date",
        "url",
        mode="before",
    )
    @classmethod
    def _coerce_optional_str(cls, value: Any) -> Optional[str]:
        return value if isinstance(value, str) else None

    @field_validator(
        "min_years_required",
        "max_years_required",
        "min_years_preferred",
        "max_years_preferred",
        mode="before",
    )
    @classmethod
    def _coerce_years(cls, value: Any) -> Optional[float]:
        if isinstance(value, bool):
            return None
        if isinstance(value, str):
            try:
                value = float(value.strip())
            except ValueError:
                return None
        if isinstance(value, int):
            return value
        if isinstance(value, float):
            # NaN and infinities count as absent
            return value if math.isfinite(value) else None
        return None

    @field_validator("skills_required", "skills_preferred", "degree_fields", mode="before")
    @classmethod
    def _coerce_str_list(cls, value: Any) -> List[str]:
        if not isinstance(value, (list, tuple)):
            return []
        return [v for v in value if isinstance(v, str) and v]
