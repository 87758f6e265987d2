"""HTTP client for the GitLab REST API."""

import logging
import time
from datetime import datetime, timezone

import requests
from pydantic import ValidationError

from config.settings import (
    BASE_URL, API_VERSION, REQUEST_TIMEOUT, MAX_RETRIES, RETRY_BACKOFF,
    MAX_RETRY_WAIT, REQUESTS_PER_SECOND,
)
from config.constants import HEADER_RETRY_AFTER, HEADER_RATE_RESET, TOKEN_PRIVATE
from core.auth import AuthManager
from core.codec import encode_query, encode_body
from core.errors import RequestConstructionError, TransportError, ErrorResponse
from core.response import Response
from services.external_status_checks import ExternalStatusChecksService
from utils.rate_limiter import RateLimiter

logger = logging.getLogger(__name__)

_QUERY_METHODS = ('GET', 'HEAD')


def _api_root(base_url, api_version):
    base_url = base_url.rstrip('/')
    if not base_url.endswith(f'/api/{api_version}'):
        base_url = f'{base_url}/api/{api_version}'
    return base_url + '/'


def _flatten_message(value):
    """Flatten the ``message`` member of an error body into one line."""
    if isinstance(value, dict):
        parts = []
        for key in sorted(value):
            inner = value[key]
            if isinstance(inner, list):
                parts.append(f"{{{key}: [{', '.join(str(i) for i in inner)}]}}")
            elif isinstance(inner, dict):
                parts.append(f"{{{key}: {_flatten_message(inner)}}}")
            else:
                parts.append(f"{{{key}: {inner}}}")
        return ', '.join(parts)
    if isinstance(value, list):
        return ', '.join(str(item) for item in value)
    return str(value)


def parse_error_message(raw):
    """Extract a readable message from an error response body."""
    if not raw.content:
        return ''
    try:
        data = raw.json()
    except ValueError:
        return raw.text.strip()
    if isinstance(data, dict):
        if 'message' in data:
            return _flatten_message(data['message'])
        if 'error' in data:
            message = str(data['error'])
            if data.get('error_description'):
                message += f": {data['error_description']}"
            return message
    return _flatten_message(data)


def check_response(response):
    """Raise ErrorResponse unless the response has a 2xx status."""
    if response.ok:
        return
    raise ErrorResponse(response, parse_error_message(response.raw))


class Client:
    """Builds and executes requests against a versioned GitLab API root.

    Resource services are attached as attributes, e.g.
    ``client.external_status_checks``.
    """

    def __init__(self, token, base_url=BASE_URL, api_version=API_VERSION,
                 token_type=TOKEN_PRIVATE, session=None, timeout=REQUEST_TIMEOUT,
                 max_retries=MAX_RETRIES, requests_per_second=REQUESTS_PER_SECOND):
        self.auth = AuthManager(token, token_type)
        self.base_url = _api_root(base_url, api_version)
        self.session = session or requests.Session()
        self.timeout = timeout
        self.max_retries = max_retries
        self.rate_limiter = RateLimiter(max_requests=requests_per_second, time_window=1.0)

        self.external_status_checks = ExternalStatusChecksService(self)

    def new_request(self, method, path, options=None, request_options=()):
        """Build a prepared request for ``path`` relative to the API root.

        ``path`` must already have its variable segments escaped. Options are
        encoded as the query string for GET/HEAD and as a JSON body otherwise.

        Raises:
            RequestConstructionError: if the options or URL cannot be encoded.
        """
        method = method.upper()
        request = requests.Request(
            method,
            self.base_url + path.lstrip('/'),
            headers=self.auth.headers,
        )

        if method in _QUERY_METHODS:
            request.params = encode_query(options)
        elif options is not None:
            request.json = encode_body(options)

        for apply in request_options:
            apply(request)

        try:
            return self.session.prepare_request(request)
        except (requests.exceptions.RequestException, ValueError, TypeError) as e:
            raise RequestConstructionError(f"cannot build {method} {path}: {e}") from e

    def do(self, request, decode=None):
        """Send a prepared request and decode its body.

        Args:
            request: a request built by ``new_request``
            decode: callable turning the parsed JSON body into a typed value,
                or None to ignore the body

        Returns:
            tuple: (decoded value or None, Response)

        Raises:
            TransportError: on network failure, non-2xx status or bad body.
        """
        raw = self._send(request)
        response = Response(raw)
        check_response(response)

        if decode is None:
            return None, response

        try:
            data = raw.json()
        except ValueError as e:
            raise TransportError(
                f"{request.method} {request.url}: invalid JSON in response body", response
            ) from e
        try:
            return decode(data), response
        except (ValidationError, TypeError, ValueError) as e:
            raise TransportError(
                f"{request.method} {request.url}: unexpected response body: {e}", response
            ) from e

    def _send(self, request):
        attempt = 0
        while True:
            self.rate_limiter.wait_for_slot()
            logger.debug("Sending %s request to %s", request.method, request.url)
            try:
                raw = self.session.send(request, timeout=self.timeout)
            except (requests.ConnectionError, requests.Timeout) as e:
                if attempt >= self.max_retries:
                    raise TransportError(f"{request.method} {request.url}: {e}") from e
                delay = self._backoff(attempt)
                logger.warning("%s %s failed (%s), retrying in %.1fs",
                               request.method, request.url, e, delay)
            except requests.RequestException as e:
                raise TransportError(f"{request.method} {request.url}: {e}") from e
            else:
                if not self._should_retry(raw) or attempt >= self.max_retries:
                    return raw
                delay = self._retry_delay(raw, attempt)
                logger.warning("%s %s returned %s, retrying in %.1fs",
                               request.method, request.url, raw.status_code, delay)
            time.sleep(delay)
            attempt += 1

    @staticmethod
    def _should_retry(raw):
        if raw.status_code == 429:
            return True
        return raw.status_code >= 500 and raw.status_code != 501

    @staticmethod
    def _backoff(attempt):
        return min(RETRY_BACKOFF * (2 ** attempt), MAX_RETRY_WAIT)

    def _retry_delay(self, raw, attempt):
        """Delay before the next attempt, honoring server rate limit hints."""
        retry_after = raw.headers.get(HEADER_RETRY_AFTER)
        if retry_after:
            try:
                return min(max(float(retry_after), 0.0), MAX_RETRY_WAIT)
            except ValueError:
                pass
        reset = raw.headers.get(HEADER_RATE_RESET)
        if raw.status_code == 429 and reset:
            try:
                wait = float(reset) - datetime.now(timezone.utc).timestamp()
                return min(max(wait, 0.0), MAX_RETRY_WAIT)
            except ValueError:
                pass
        return self._backoff(attempt)

    def close(self):
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
