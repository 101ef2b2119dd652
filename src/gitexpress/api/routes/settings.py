"""API routes for locally stored credentials."""

from litestar import Controller, get, put
from litestar.status_codes import HTTP_200_OK
from loguru import logger

from gitexpress.api.schemas.settings import SettingsRequest, SettingsResponse
from gitexpress.domain.credentials import is_valid_github_token, mask_secret
from gitexpress.infrastructure.credential_store import Credentials, CredentialStore


def _to_response(credentials: Credentials, message: str | None = None) -> SettingsResponse:
    return SettingsResponse(
        gemini_api_key=mask_secret(credentials.gemini_api_key),
        github_token=mask_secret(credentials.github_token),
        github_token_valid=is_valid_github_token(credentials.github_token),
        message=message,
    )


class SettingsController(Controller):
    """Controller for credential settings."""

    path = "/settings"

    @get("/", status_code=HTTP_200_OK)
    async def get_settings(self, credential_store: CredentialStore) -> SettingsResponse:
        """Return which credentials are stored, masked."""
        return _to_response(credential_store.load())

    @put("/", status_code=HTTP_200_OK)
    async def save_settings(
        self, data: SettingsRequest, credential_store: CredentialStore
    ) -> SettingsResponse:
        """Persist credentials to the local credentials file."""
        logger.debug("API request to save credentials")
        credentials = credential_store.save(data.gemini_api_key, data.github_token)
        return _to_response(credentials, message="🔐 Credentials saved locally.")
