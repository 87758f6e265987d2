"""API configuration settings."""

import os

# API Base URL - the versioned root is appended by the client
BASE_URL = os.environ.get("GITLAB_URL", "https://gitlab.com")
API_VERSION = os.environ.get("GITLAB_API_VERSION", "v4")

# Personal/project access token; OAuth tokens go through Client(token_type=...)
ACCESS_TOKEN = os.environ.get("GITLAB_TOKEN")

USER_AGENT = "gitlab-status-checks"

# Transport settings
REQUEST_TIMEOUT = float(os.environ.get("GITLAB_TIMEOUT", "30"))
MAX_RETRIES = int(os.environ.get("GITLAB_MAX_RETRIES", "3"))
RETRY_BACKOFF = 0.5  # Base delay in seconds, doubled on each attempt
MAX_RETRY_WAIT = 30.0
REQUESTS_PER_SECOND = int(os.environ.get("GITLAB_REQUESTS_PER_SECOND", "10"))

# Pagination settings
MAX_PER_PAGE = 100
DEFAULT_PER_PAGE = min(int(os.environ.get("GITLAB_PER_PAGE", "20")), MAX_PER_PAGE)

LOG_LEVEL = os.environ.get("GITLAB_LOG_LEVEL", "WARNING")
