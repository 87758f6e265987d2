"""Authentication headers for the GitLab API."""

from config.settings import USER_AGENT
from config.constants import (
    HEADER_PRIVATE_TOKEN, HEADER_JOB_TOKEN, HEADER_AUTHORIZATION,
    TOKEN_PRIVATE, TOKEN_OAUTH, TOKEN_JOB,
)
from core.errors import InvalidArgumentError


def auth_header(token_type, token):
    """Return the (name, value) header pair that carries ``token``."""
    if token_type == TOKEN_PRIVATE:
        return HEADER_PRIVATE_TOKEN, token
    if token_type == TOKEN_OAUTH:
        return HEADER_AUTHORIZATION, f'Bearer {token}'
    if token_type == TOKEN_JOB:
        return HEADER_JOB_TOKEN, token
    raise InvalidArgumentError(f"unknown token type: {token_type!r}")


class AuthManager:
    """Holds the access token and builds the default request headers."""

    def __init__(self, token, token_type=TOKEN_PRIVATE):
        if not token:
            raise InvalidArgumentError("an access token is required to call the API")
        # Validate early so a bad token type fails at construction
        auth_header(token_type, token)
        self.token = token
        self.token_type = token_type

    @property
    def headers(self):
        """Default headers for API requests."""
        name, value = auth_header(self.token_type, self.token)
        return {
            name: value,
            'Accept': 'application/json',
            'User-Agent': USER_AGENT,
        }
