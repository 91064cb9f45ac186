"""Outcome of fetching the job dataset."""

from typing import List, Optional

from pydantic import BaseModel, Field

from schemas.job_record import JobRecord


class JobFetchResult(BaseModel):
    """Jobs returned by the provider; error is set when the fetch failed (jobs is then empty)."""

    jobs: List[JobRecord] = Field(default_factory=list)
    error: Optional[str] = Field(default=None, description="Failure reason, None on success")

    @property
    def ok(self) -> bool:
        return self.error is None
