"""Tests for the HTTP API."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from litestar.testing import TestClient

from gitexpress.api.app import create_app
from gitexpress.application.orchestrator import GitExpressOrchestrator
from gitexpress.config import Settings
from gitexpress.domain.exceptions import ProblemSourceError
from gitexpress.domain.models import (
    CommitResult,
    GeneratedArtifact,
    ProblemRecord,
    ProblemSource,
    TargetLanguage,
)
from gitexpress.infrastructure.credential_store import CredentialStore
from gitexpress.services import CodeforcesDailyService, Components, LeetCodeDailyService

VALID_TOKEN = "ghp_" + "b" * 40

PROBLEM = ProblemRecord(
    source=ProblemSource.CODEFORCES,
    problem_id="4A",
    title="Watermelon",
    difficulty_label="800",
    external_url="https://codeforces.com/problemset/problem/4/A",
    tags=("brute force", "math"),
    date="2024-01-15",
    contest_id=4,
    index="A",
)


@pytest.fixture
def settings(tmp_path):
    return Settings(credentials_path=tmp_path / "creds.json")


@pytest.fixture
def store(settings):
    return CredentialStore(settings.credentials_path)


@pytest.fixture
def components():
    generator = AsyncMock()
    generator.generate.return_value = GeneratedArtifact(
        language=TargetLanguage.PYTHON, code="print(1)", file_name="script_1.py"
    )
    publisher = AsyncMock()
    publisher.publish.return_value = CommitResult(
        owner="octocat",
        repo="GitExpress-Archive",
        path="script_1.py",
        html_url="https://github.com/octocat/GitExpress-Archive/blob/main/script_1.py",
    )
    return Components(
        generator=generator,
        publisher=publisher,
        leetcode=AsyncMock(),
        codeforces=AsyncMock(),
    )


@pytest.fixture
def codeforces_service():
    service = AsyncMock(spec=CodeforcesDailyService)
    service.get_daily_problem.return_value = PROBLEM
    return service


@pytest.fixture
def leetcode_service():
    service = AsyncMock(spec=LeetCodeDailyService)
    service.get_daily_problem.side_effect = ProblemSourceError("Could not fetch daily challenge")
    return service


@pytest.fixture
def client(settings, store, components, codeforces_service, leetcode_service):
    app = create_app(
        settings=settings,
        credential_store=store,
        orchestrator=GitExpressOrchestrator(settings, MagicMock(return_value=components)),
        leetcode_service=leetcode_service,
        codeforces_service=codeforces_service,
    )
    with TestClient(app=app) as client:
        yield client


def test_settings_empty_by_default(client):
    response = client.get("/settings")

    assert response.status_code == 200
    assert response.json()["github_token"] is None
    assert response.json()["github_token_valid"] is False


def test_save_settings_masks_values(client, store):
    response = client.put(
        "/settings", json={"gemini_api_key": "gemini-secret", "github_token": VALID_TOKEN}
    )

    body = response.json()
    assert response.status_code == 200
    assert body["message"] == "🔐 Credentials saved locally."
    assert body["github_token_valid"] is True
    assert body["github_token"].endswith("bbbb")
    assert "gemini-secret" not in body["gemini_api_key"]
    assert store.load().gemini_api_key == "gemini-secret"


def test_run_with_invalid_token_reports_failure(client, components):
    client.put("/settings", json={"gemini_api_key": "k", "github_token": "nope"})

    response = client.post("/runs", json={"prompt": "hello"})

    body = response.json()
    assert response.status_code == 200
    assert body["success"] is False
    assert body["error"] == "Invalid GitHub PAT format."
    components.generator.generate.assert_not_awaited()


def test_run_commits_file(client):
    client.put("/settings", json={"gemini_api_key": "k", "github_token": VALID_TOKEN})

    response = client.post(
        "/runs", json={"prompt": "hello", "mode": "express", "language": "python"}
    )

    body = response.json()
    assert body["success"] is True
    assert body["file_name"] == "script_1.py"
    assert body["repo_name"] == "GitExpress-Archive"
    assert body["commit"]["owner"] == "octocat"
    assert any("Code received" in line for line in body["logs"])


def test_run_rejects_unknown_language(client):
    response = client.post("/runs", json={"prompt": "hello", "language": "cobol"})

    assert response.status_code == 400


def test_codeforces_daily(client, codeforces_service):
    response = client.get("/daily/codeforces", params={"date": "2024-01-15"})

    body = response.json()
    assert response.status_code == 200
    assert body["title"] == "Watermelon"
    assert body["tags"] == ["brute force", "math"]
    codeforces_service.get_daily_problem.assert_awaited_once_with("2024-01-15")


def test_codeforces_daily_rejects_bad_date(client):
    response = client.get("/daily/codeforces", params={"date": "yesterday"})

    assert response.status_code == 400
    assert "YYYY-MM-DD" in response.json()["detail"]


def test_source_failure_maps_to_bad_gateway(client):
    response = client.get("/daily/leetcode")

    assert response.status_code == 502
    assert response.json()["detail"] == "Could not fetch daily challenge"
