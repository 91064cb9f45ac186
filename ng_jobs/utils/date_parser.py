"""Parse and display job extraction timestamps (ISO 8601)."""

from datetime import datetime, timezone
from typing import Any, Optional


def parse_extract_date(raw: Any) -> Optional[datetime]:
    """
    Parse an ISO 8601 timestamp such as "2025-03-02T14:05:00Z" or "2025-03-02".
    Naive values are taken as UTC. Returns None for missing or unparsable input.
    """
    if not isinstance(raw, str) or not raw.strip():
        return None
    text = raw.strip()
    # fromisoformat on older interpreters rejects the "Z" suffix
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def format_extract_date(raw: Any) -> str:
    """Display form "Mar 2, 2025"; "N/A" when missing, "Invalid date" when unparsable."""
    if not raw:
        return "N/A"
    parsed = parse_extract_date(raw)
    if parsed is None:
        return "Invalid date"
    return f"{parsed:%b} {parsed.day}, {parsed.year}"
