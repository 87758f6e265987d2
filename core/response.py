"""Response metadata returned alongside decoded results."""

from config.constants import (
    HEADER_TOTAL, HEADER_TOTAL_PAGES, HEADER_PER_PAGE, HEADER_PAGE,
    HEADER_NEXT_PAGE, HEADER_PREV_PAGE, HEADER_RATE_LIMIT,
    HEADER_RATE_REMAINING, HEADER_RATE_RESET,
)


def _int_header(headers, name):
    value = headers.get(name)
    if not value:
        return 0
    try:
        return int(value)
    except ValueError:
        return 0


class Response:
    """Wraps a ``requests.Response`` and exposes paging and rate limit values.

    Page numbers are ``0`` when the server did not send the header, which is
    also what GitLab does on the last page for ``X-Next-Page``.
    """

    def __init__(self, raw):
        self.raw = raw
        headers = raw.headers

        self.total_items = _int_header(headers, HEADER_TOTAL)
        self.total_pages = _int_header(headers, HEADER_TOTAL_PAGES)
        self.items_per_page = _int_header(headers, HEADER_PER_PAGE)
        self.current_page = _int_header(headers, HEADER_PAGE)
        self.next_page = _int_header(headers, HEADER_NEXT_PAGE)
        self.previous_page = _int_header(headers, HEADER_PREV_PAGE)

        self.rate_limit = _int_header(headers, HEADER_RATE_LIMIT)
        self.rate_remaining = _int_header(headers, HEADER_RATE_REMAINING)
        self.rate_reset = _int_header(headers, HEADER_RATE_RESET)

        # Keyset pagination links
        links = raw.links or {}
        self.next_link = links.get('next', {}).get('url', '')
        self.previous_link = links.get('prev', {}).get('url', '')
        self.first_link = links.get('first', {}).get('url', '')
        self.last_link = links.get('last', {}).get('url', '')

    @property
    def status_code(self):
        return self.raw.status_code

    @property
    def headers(self):
        return self.raw.headers

    @property
    def ok(self):
        return 200 <= self.raw.status_code < 300

    def __repr__(self):
        return f"<Response [{self.status_code}]>"
