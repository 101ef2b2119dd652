"""Unit tests for the GitHub client and repository publisher."""

import base64
from unittest.mock import AsyncMock

import pytest

from gitexpress.domain.models import GeneratedArtifact, TargetLanguage
from gitexpress.infrastructure.errors import GitHubError, HTTPClientError
from gitexpress.infrastructure.github_client import GitHubApiClient, encode_content
from gitexpress.services.publisher import RepositoryPublisher

ARTIFACT = GeneratedArtifact(
    language=TargetLanguage.PYTHON,
    code="print('héllo')\n",
    file_name="script_1.py",
)


def test_encode_content_is_utf8_base64():
    encoded = encode_content("héllo")
    assert base64.b64decode(encoded).decode("utf-8") == "héllo"


class TestGitHubApiClient:
    """Tests for REST calls against a mocked HTTP client."""

    @pytest.fixture
    def http_client(self):
        return AsyncMock()

    @pytest.mark.asyncio
    async def test_missing_repository_returns_none(self, http_client):
        http_client.get_json.side_effect = HTTPClientError("nf", status_code=404)

        repo = await GitHubApiClient("ghp_x", http_client).get_repository("me", "archive")

        assert repo is None

    @pytest.mark.asyncio
    async def test_other_errors_propagate(self, http_client):
        http_client.get_json.side_effect = HTTPClientError("denied", status_code=403)

        with pytest.raises(GitHubError) as exc_info:
            await GitHubApiClient("ghp_x", http_client).get_repository("me", "archive")

        assert exc_info.value.status_code == 403

    @pytest.mark.asyncio
    async def test_create_repository_is_private(self, http_client):
        http_client.post_json.return_value = {"name": "archive"}

        await GitHubApiClient("ghp_x", http_client).create_repository("archive")

        url, payload = http_client.post_json.call_args.args
        assert url == "https://api.github.com/user/repos"
        assert payload == {"name": "archive", "private": True}

    @pytest.mark.asyncio
    async def test_commit_sends_base64_content(self, http_client):
        http_client.put_json.return_value = {"content": {"html_url": "https://github.com/x"}}

        await GitHubApiClient("ghp_x", http_client).create_file(
            "me", "archive", "script_1.py", "Add script_1.py", "print(1)"
        )

        url, payload = http_client.put_json.call_args.args
        headers = http_client.put_json.call_args.kwargs["headers"]
        assert url == "https://api.github.com/repos/me/archive/contents/script_1.py"
        assert payload["message"] == "Add script_1.py"
        assert set(payload) == {"message", "content"}
        assert base64.b64decode(payload["content"]) == b"print(1)"
        assert headers["Authorization"] == "Bearer ghp_x"


class TestRepositoryPublisher:
    """Tests for the ensure-repo-then-commit sequence."""

    @pytest.fixture
    def github_client(self):
        client = AsyncMock(spec=GitHubApiClient)
        client.get_authenticated_user.return_value = {"login": "octocat"}
        client.get_repository.return_value = {"name": "GitExpress-Archive"}
        client.create_file.return_value = {
            "content": {"html_url": "https://github.com/octocat/GitExpress-Archive/blob/main/script_1.py"}
        }
        return client

    @pytest.mark.asyncio
    async def test_existing_repository(self, github_client):
        logs = []

        result = await RepositoryPublisher(github_client).publish(
            ARTIFACT, "GitExpress-Archive", log=logs.append
        )

        github_client.create_repository.assert_not_awaited()
        github_client.create_file.assert_awaited_once_with(
            "octocat",
            "GitExpress-Archive",
            "script_1.py",
            "Add script_1.py",
            ARTIFACT.code,
        )
        assert result.owner == "octocat"
        assert result.repo_created is False
        assert result.html_url.endswith("script_1.py")
        assert logs == [
            "🐙 Connecting to GitHub...",
            "📁 Repository found.",
            "🎉 Commit successful: 'script_1.py'",
        ]

    @pytest.mark.asyncio
    async def test_missing_repository_is_created(self, github_client):
        github_client.get_repository.return_value = None
        logs = []

        result = await RepositoryPublisher(github_client).publish(
            ARTIFACT, "new-repo", log=logs.append, description="desc"
        )

        github_client.create_repository.assert_awaited_once_with(
            "new-repo", private=True, description="desc"
        )
        assert result.repo_created is True
        assert "📁 Repository created." in logs

    @pytest.mark.asyncio
    async def test_commit_failure_propagates(self, github_client):
        github_client.create_file.side_effect = GitHubError("conflict", 409)

        with pytest.raises(GitHubError):
            await RepositoryPublisher(github_client).publish(ARTIFACT, "GitExpress-Archive")
