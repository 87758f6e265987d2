"""Constants for the GitLab external status checks client."""

import yaml
from pathlib import Path

# Get the directory where this constants.py file is located
_CONFIG_DIR = Path(__file__).parent

def _load_yaml_file(filename):
    """Load a YAML file from the config directory."""
    file_path = _CONFIG_DIR / filename
    try:
        with open(file_path, 'r', encoding='utf-8') as file:
            return yaml.safe_load(file)
    except FileNotFoundError:
        raise FileNotFoundError(f"Configuration file not found: {file_path}")
    except yaml.YAMLError as e:
        raise ValueError(f"Error parsing YAML file {file_path}: {e}")

def _load_status_values():
    """Load the known status check result values from YAML file."""
    data = _load_yaml_file('status_checks.yaml') or {}
    return [str(status) for status in data.get('statuses', [])]

STATUS_VALUES = _load_status_values()

# Pagination headers
HEADER_TOTAL = 'X-Total'
HEADER_TOTAL_PAGES = 'X-Total-Pages'
HEADER_PER_PAGE = 'X-Per-Page'
HEADER_PAGE = 'X-Page'
HEADER_NEXT_PAGE = 'X-Next-Page'
HEADER_PREV_PAGE = 'X-Prev-Page'

# Rate limit headers
HEADER_RATE_LIMIT = 'RateLimit-Limit'
HEADER_RATE_REMAINING = 'RateLimit-Remaining'
HEADER_RATE_RESET = 'RateLimit-Reset'
HEADER_RETRY_AFTER = 'Retry-After'

# Auth headers
HEADER_PRIVATE_TOKEN = 'PRIVATE-TOKEN'
HEADER_JOB_TOKEN = 'JOB-TOKEN'
HEADER_AUTHORIZATION = 'Authorization'
HEADER_SUDO = 'Sudo'

TOKEN_PRIVATE = 'private'
TOKEN_OAUTH = 'oauth'
TOKEN_JOB = 'job'
