"""GraphQL client for the upstream job listing API (one-shot fetch of the full dataset)."""

import asyncio
from typing import Any, List, Optional

import httpx
from pydantic import ValidationError

from config import HTTP_BACKOFF_SECONDS, HTTP_MAX_RETRIES, HTTP_TIMEOUT_SECONDS, JOBS_API_URL
from schemas.fetch_result import JobFetchResult
from schemas.job_record import JobRecord
from utils.helpers import deduplicate_jobs
from utils.logger import get_logger

logger = get_logger(__name__)

LIST_JOBS_QUERY = """query {
  listJobs {
    id
    company
    job_title
    job_location
    job_family
    degree_fields
    degree_preferred
    degree_required
    min_years_preferred
    max_years_preferred
    min_years_required
    max_years_required
    skills_preferred
    skills_required
    title
    url
    info_extract_date
    extracted
  }
}"""


class JobApiError(Exception):
    """Upstream returned a response that does not carry a job list."""


def _parse_records(items: List[Any]) -> List[JobRecord]:
    """Validate payload items into JobRecords; items without id/title are skipped."""
    jobs: List[JobRecord] = []
    for item in items:
        if not isinstance(item, dict):
            logger.warning("Skipping non-object job entry: %r", item)
            continue
        try:
            jobs.append(JobRecord.model_validate(item))
        except ValidationError as e:
            logger.warning("Skipping invalid job %s: %s", item.get("id"), e)
    return deduplicate_jobs(jobs)


def _extract_job_list(payload: Any) -> List[Any]:
    """Pull data.listJobs out of a GraphQL response body."""
    if not isinstance(payload, dict):
        raise JobApiError("Response body is not a JSON object")
    data = payload.get("data")
    jobs = data.get("listJobs") if isinstance(data, dict) else None
    if jobs is None and payload.get("errors"):
        messages = "; ".join(
            str(e.get("message", e)) if isinstance(e, dict) else str(e) for e in payload["errors"]
        )
        raise JobApiError(f"GraphQL errors: {messages}")
    if not isinstance(jobs, list):
        raise JobApiError("Response has no listJobs array")
    return jobs


async def fetch_jobs(
    api_url: str = JOBS_API_URL,
    max_retries: int = HTTP_MAX_RETRIES,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> JobFetchResult:
    """
    Fetch the full job list. Never raises: on failure returns an empty job list with error set.
    Retries on timeouts, connection failures and 5xx responses; 4xx responses are not retried.
    """
    last_error: Optional[str] = None
    attempts = max(1, max_retries)
    for attempt in range(attempts):
        try:
            async with httpx.AsyncClient(timeout=HTTP_TIMEOUT_SECONDS, transport=transport) as client:
                response = await client.post(
                    api_url,
                    json={"query": LIST_JOBS_QUERY},
                    headers={"Content-Type": "application/json"},
                )
                response.raise_for_status()
                items = _extract_job_list(response.json())
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.warning("Jobs API HTTP error %s (attempt %s): %s", status, attempt + 1, e.response.text[:200])
            last_error = f"Jobs API returned HTTP {status}"
            if 400 <= status < 500:
                break  # Don't retry client errors
        except (httpx.TimeoutException, httpx.ConnectError) as e:
            last_error = f"Jobs API unreachable: {e}"
            logger.warning("Jobs API request failed (attempt %s): %s", attempt + 1, e)
        except JobApiError as e:
            logger.error("Unexpected jobs API response: %s", e)
            return JobFetchResult(error=str(e))
        except ValueError as e:
            logger.error("Jobs API returned invalid JSON: %s", e)
            return JobFetchResult(error="Jobs API returned invalid JSON")
        except httpx.HTTPError as e:
            logger.exception("Jobs API request failed: %s", e)
            return JobFetchResult(error=f"Jobs API request failed: {e}")
        else:
            jobs = _parse_records(items)
            logger.info("Fetched %s jobs (%s entries in payload)", len(jobs), len(items))
            return JobFetchResult(jobs=jobs)

        if attempt + 1 < attempts:
            await asyncio.sleep(HTTP_BACKOFF_SECONDS * (attempt + 1))  # Backoff

    logger.error("Failed to fetch jobs after %s attempts: %s", attempt + 1, last_error)
    return JobFetchResult(error=last_error or "Failed to fetch jobs")


def load_jobs(api_url: str = JOBS_API_URL) -> JobFetchResult:
    """Synchronous wrapper for the Streamlit app."""
    loop = asyncio.new_event_loop()
    asyncio.set_event_loop(loop)
    try:
        return loop.run_until_complete(fetch_jobs(api_url))
    finally:
        loop.close()
