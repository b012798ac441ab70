"""Application settings."""

import os
from pathlib import Path

# Storage
STORE_BACKEND = os.getenv("SDSA_STORE_BACKEND", "duckdb")
DB_PATH = os.getenv("SDSA_DB_PATH", "sdsa.duckdb")

# Keys
CACHE_NAMESPACE = os.getenv("SDSA_CACHE_NAMESPACE", "@sdsa_cache_")
VERSION_KEY = "@sdsa_content_version"
JOURNEY_KEY = "@sdsa_journey"

# Logging
LOG_DIR = Path(os.getenv("SDSA_LOG_DIR", "logs"))
LOG_LEVEL = os.getenv("SDSA_LOG_LEVEL", "INFO")

# API
CONTENT_BASE_URL = os.getenv(
    "SDSA_CONTENT_BASE_URL",
    "https://raw.githubusercontent.com/eugene-taran/sdsa.team/main",
)
API_TIMEOUT = float(os.getenv("SDSA_API_TIMEOUT", "15"))
MAX_ATTEMPTS = 3
BACKOFF_BASE = float(os.getenv("SDSA_BACKOFF_BASE", "0.5"))
MAX_CONCURRENT = 10

# Cache TTL per entity type (seconds)
HOUR = 60 * 60
DAY = 24 * HOUR
TTL_POLICY = {
    "categories": DAY,
    "questionnaires": DAY,
    "questionnaire": DAY,
    "knowledge_block": 7 * DAY,
    "resource": 7 * DAY,
}

# Updates
UPDATE_CHECK_DELAY = float(os.getenv("SDSA_UPDATE_CHECK_DELAY", "5"))
AUTO_APPLY_UPDATES = os.getenv("SDSA_AUTO_APPLY_UPDATES", "false").lower() in ("1", "true", "yes")
