"""Exception types raised by the GitLab client."""


class GitLabError(Exception):
    """Base exception for all client failures."""


class InvalidArgumentError(GitLabError):
    """Raised when an argument is rejected locally, before any request is built."""


class RequestConstructionError(GitLabError):
    """Raised when a request cannot be built from the given path and options."""


class TransportError(GitLabError):
    """Raised when the HTTP round trip fails.

    ``response`` holds whatever response metadata the transport produced. It is
    ``None`` when the request never reached the server.
    """

    def __init__(self, message, response=None):
        super().__init__(message)
        self.response = response

    @property
    def sent(self):
        """True if the server answered, even with an error status."""
        return self.response is not None

    @property
    def status_code(self):
        return self.response.status_code if self.response is not None else None


class ErrorResponse(TransportError):
    """Raised for any non-2xx HTTP status."""

    def __init__(self, response, message=None):
        self.message = message or ""
        request = response.raw.request
        text = f"{request.method} {request.url}: {response.status_code}"
        if self.message:
            text += f" {self.message}"
        super().__init__(text, response)
