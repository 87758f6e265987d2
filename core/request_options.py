"""Per-request option functions.

Each function returns a callable that receives the ``requests.Request`` before
it is prepared and may adjust its headers or query parameters.
"""

from config.constants import HEADER_SUDO, HEADER_PRIVATE_TOKEN, HEADER_JOB_TOKEN, HEADER_AUTHORIZATION
from core.auth import auth_header


def with_header(name, value):
    """Set a single header on the request."""
    def apply(request):
        request.headers[name] = value
    return apply


def with_headers(headers):
    """Set several headers on the request."""
    def apply(request):
        request.headers.update(headers)
    return apply


def with_sudo(uid):
    """Perform the request as another user (admin tokens only)."""
    return with_header(HEADER_SUDO, str(uid))


def with_token(token_type, token):
    """Authenticate this request with a different token."""
    name, value = auth_header(token_type, token)

    def apply(request):
        for header in (HEADER_PRIVATE_TOKEN, HEADER_JOB_TOKEN, HEADER_AUTHORIZATION):
            request.headers.pop(header, None)
        request.headers[name] = value
    return apply


def with_page(page):
    """Request a specific page, overriding any page set in the options."""
    def apply(request):
        params = [(key, value) for key, value in (request.params or []) if key != 'page']
        params.append(('page', str(page)))
        request.params = params
    return apply
