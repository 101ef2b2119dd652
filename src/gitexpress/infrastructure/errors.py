"""Errors raised by infrastructure clients."""

from gitexpress.domain.exceptions import ExternalServiceError


class HTTPClientError(ExternalServiceError):
    """Non-success HTTP response or transport failure."""

    def __init__(self, message: str, status_code: int | None = None, url: str | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.url = url

    @property
    def is_not_found(self) -> bool:
        return self.status_code == 404


class LLMError(ExternalServiceError):
    """The text generation service failed or returned nothing."""

    pass


class GitHubError(ExternalServiceError):
    """A GitHub REST call failed."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code
