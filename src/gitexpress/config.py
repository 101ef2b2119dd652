"""Runtime configuration and logging setup."""

import os
import sys
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv
from loguru import logger

DEFAULT_MODEL = "gemini-2.5-flash"
DEFAULT_OPENROUTER_MODEL = "google/gemini-2.5-flash"
DEFAULT_CREDENTIALS_PATH = Path.home() / ".gitexpress" / "credentials.json"


@dataclass(frozen=True)
class Settings:
    """Settings read from the environment (and ``.env``) once at startup."""

    gemini_api_key: str | None = None
    github_token: str | None = None
    openrouter_api_key: str | None = None
    llm_provider: str = "gemini"
    model: str = DEFAULT_MODEL
    repo_name: str = "GitExpress-Archive"
    http_timeout: float = 30.0
    credentials_path: Path = DEFAULT_CREDENTIALS_PATH
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 8000

    @classmethod
    def from_env(cls) -> "Settings":
        provider = os.getenv("GITEXPRESS_LLM_PROVIDER", "gemini").strip().lower()
        default_model = DEFAULT_OPENROUTER_MODEL if provider == "openrouter" else DEFAULT_MODEL

        return cls(
            gemini_api_key=os.getenv("GEMINI_API_KEY") or None,
            github_token=os.getenv("GITHUB_PAT") or None,
            openrouter_api_key=os.getenv("OPENROUTER_API_KEY") or None,
            llm_provider=provider,
            model=os.getenv("GITEXPRESS_MODEL") or default_model,
            repo_name=os.getenv("GITEXPRESS_REPO") or "GitExpress-Archive",
            http_timeout=float(os.getenv("GITEXPRESS_HTTP_TIMEOUT", "30")),
            credentials_path=Path(
                os.getenv("GITEXPRESS_CREDENTIALS_PATH") or DEFAULT_CREDENTIALS_PATH
            ).expanduser(),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            host=os.getenv("GITEXPRESS_HOST") or "127.0.0.1",
            port=int(os.getenv("GITEXPRESS_PORT", "8000")),
        )


_settings: Settings | None = None


def get_settings() -> Settings:
    """Load ``.env`` and build the process-wide settings on first call."""
    global _settings
    if _settings is None:
        load_dotenv()
        _settings = Settings.from_env()
    return _settings


def configure_logging(level: str = "INFO") -> None:
    logger.remove()
    logger.add(sys.stderr, level=level)
