"""Configuration loaded from environment variables."""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env: try package dir then project root
_base = Path(__file__).resolve().parent
for _env_path in (_base / ".env", _base.parent / ".env"):
    if load_dotenv(_env_path):
        break
load_dotenv()  # also allow process env

# Upstream GraphQL endpoint serving listJobs
JOBS_API_URL: str = os.getenv("JOBS_API_URL", "https://api.airyvibe.com/graphql")

# HTTP / fetch settings
HTTP_TIMEOUT_SECONDS: float = float(os.getenv("HTTP_TIMEOUT_SECONDS", "30"))
HTTP_MAX_RETRIES: int = int(os.getenv("HTTP_MAX_RETRIES", "3"))
HTTP_BACKOFF_SECONDS: float = 1.0

LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

# Sentinels used by select boxes; FilterSpec treats them as "no constraint"
ALL_OPTION = "all"
ANY_DEGREE = "any"

# Country codes shown in the country select box (codes found in the data are added)
COUNTRY_LABELS: dict = {
    ALL_OPTION: "All Countries",
    "US": "United States",
}

# Experience ceiling options: value -> label
EXPERIENCE_OPTIONS: dict = {
    ALL_OPTION: "Any Experience",
    "0": "0 Years",
    "1": "≤ 1 Year",
    "2": "≤ 2 Years",
    "3": "≤ 3 Years",
    "5": "≤ 5 Years",
    "7": "≤ 7 Years",
    "10": "≤ 10 Years",
}
# New-grad focus: start with jobs that require no prior experience
DEFAULT_EXPERIENCE = "0"

# Degree ceiling options: value -> label ("Your Degree")
DEGREE_OPTIONS: dict = {
    ANY_DEGREE: "No Degree Required",
    "Bachelor": "Bachelor's Degree",
    "Master": "Master's Degree",
    "PhD": "PhD Degree",
}
