"""Local persistent storage for API credentials."""

import json
import os
from dataclasses import asdict, dataclass
from pathlib import Path

from loguru import logger

from gitexpress.config import Settings


@dataclass
class Credentials:
    gemini_api_key: str = ""
    github_token: str = ""


class CredentialStore:
    """
    JSON file holding the AI key and GitHub token.

    Loaded once on first access and written only on explicit ``save``.
    """

    def __init__(self, path: Path):
        self.path = Path(path)
        self._credentials: Credentials | None = None

    def load(self) -> Credentials:
        if self._credentials is not None:
            return self._credentials

        if not self.path.exists():
            logger.debug(f"No credentials file at {self.path}")
            self._credentials = Credentials()
            return self._credentials

        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Ignoring unreadable credentials file {self.path}: {e}")
            data = {}

        self._credentials = Credentials(
            gemini_api_key=data.get("gemini_api_key", ""),
            github_token=data.get("github_token", ""),
        )
        return self._credentials

    def save(self, gemini_api_key: str, github_token: str) -> Credentials:
        credentials = Credentials(gemini_api_key=gemini_api_key, github_token=github_token)

        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd = os.open(self.path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(asdict(credentials), f, indent=2)
        # O_CREAT only applies the mode to a new file
        os.chmod(self.path, 0o600)

        self._credentials = credentials
        logger.info(f"Credentials saved to {self.path}")
        return credentials


def resolve_credentials(store: CredentialStore, settings: Settings) -> Credentials:
    """Stored credentials first, then the environment."""
    stored = store.load()
    return Credentials(
        gemini_api_key=stored.gemini_api_key or settings.gemini_api_key or "",
        github_token=stored.github_token or settings.github_token or "",
    )
