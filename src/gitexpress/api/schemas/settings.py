"""Pydantic schemas for credential settings endpoints."""

from pydantic import BaseModel


class SettingsRequest(BaseModel):
    """Credentials to store locally."""

    gemini_api_key: str = ""
    github_token: str = ""


class SettingsResponse(BaseModel):
    """Stored credentials, masked."""

    gemini_api_key: str | None = None
    github_token: str | None = None
    github_token_valid: bool = False
    message: str | None = None
