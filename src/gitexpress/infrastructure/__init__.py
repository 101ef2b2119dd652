from .credential_store import CredentialStore, Credentials, resolve_credentials
from .errors import GitHubError, HTTPClientError, LLMError
from .http_client import AsyncHTTPClient

__all__ = [
    "AsyncHTTPClient",
    "CredentialStore",
    "Credentials",
    "GitHubError",
    "HTTPClientError",
    "LLMError",
    "resolve_credentials",
]
