# tests/config_test.py
from pathlib import Path

import pytest

from gitexpress.cli.run import build_parser
from gitexpress.config import DEFAULT_OPENROUTER_MODEL, Settings

ENV_KEYS = [
    "GEMINI_API_KEY",
    "GITHUB_PAT",
    "OPENROUTER_API_KEY",
    "GITEXPRESS_LLM_PROVIDER",
    "GITEXPRESS_MODEL",
    "GITEXPRESS_REPO",
    "GITEXPRESS_HTTP_TIMEOUT",
    "GITEXPRESS_CREDENTIALS_PATH",
    "LOG_LEVEL",
    "GITEXPRESS_HOST",
    "GITEXPRESS_PORT",
]


@pytest.fixture
def clean_env(monkeypatch):
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    return monkeypatch


def test_defaults(clean_env) -> None:
    settings = Settings.from_env()

    assert settings.gemini_api_key is None
    assert settings.github_token is None
    assert settings.llm_provider == "gemini"
    assert settings.repo_name == "GitExpress-Archive"
    assert settings.http_timeout == 30.0
    assert settings.log_level == "INFO"
    assert settings.host == "127.0.0.1"
    assert settings.port == 8000


def test_reads_environment(clean_env, tmp_path) -> None:
    clean_env.setenv("GEMINI_API_KEY", "key")
    clean_env.setenv("GITHUB_PAT", "ghp_token")
    clean_env.setenv("GITEXPRESS_REPO", "daily-solutions")
    clean_env.setenv("GITEXPRESS_HTTP_TIMEOUT", "5")
    clean_env.setenv("GITEXPRESS_CREDENTIALS_PATH", str(tmp_path / "c.json"))
    clean_env.setenv("LOG_LEVEL", "debug")
    clean_env.setenv("GITEXPRESS_HOST", "0.0.0.0")
    clean_env.setenv("GITEXPRESS_PORT", "9000")

    settings = Settings.from_env()

    assert settings.gemini_api_key == "key"
    assert settings.github_token == "ghp_token"
    assert settings.repo_name == "daily-solutions"
    assert settings.http_timeout == 5.0
    assert settings.credentials_path == Path(tmp_path / "c.json")
    assert settings.log_level == "DEBUG"
    assert settings.host == "0.0.0.0"
    assert settings.port == 9000


def test_openrouter_provider_switches_default_model(clean_env) -> None:
    clean_env.setenv("GITEXPRESS_LLM_PROVIDER", "OpenRouter")

    settings = Settings.from_env()

    assert settings.llm_provider == "openrouter"
    assert settings.model == DEFAULT_OPENROUTER_MODEL


@pytest.mark.parametrize(
    "argv, mode, language",
    [
        ([], "express", "python"),
        (["-m", "leetcode", "-l", "cpp"], "leetcode", "cpp"),
        (["--mode", "custom_build", "--language", "rust", "-p", "cli"], "custom_build", "rust"),
    ],
)
def test_cli_arguments(argv, mode, language) -> None:
    args = build_parser().parse_args(argv)

    assert args.mode == mode
    assert args.language == language


def test_cli_rejects_unknown_language() -> None:
    with pytest.raises(SystemExit):
        build_parser().parse_args(["-l", "cobol"])
