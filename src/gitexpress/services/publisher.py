"""Commit generated artifacts to GitHub."""

from typing import Callable, Optional

from loguru import logger

from gitexpress.domain.models import CommitResult, GeneratedArtifact
from gitexpress.infrastructure.github_client import GitHubApiClient

LogFn = Callable[[str], None]


class RepositoryPublisher:
    """Ensures the target repository exists and commits one file to it."""

    def __init__(self, github_client: GitHubApiClient):
        self.github_client = github_client

    async def publish(
        self,
        artifact: GeneratedArtifact,
        repo_name: str,
        log: Optional[LogFn] = None,
        description: Optional[str] = None,
    ) -> CommitResult:
        """
        Commit ``artifact`` as a new file in ``repo_name``.

        A missing repository is created (private) first.

        Raises:
            GitHubError: If any GitHub call fails
        """
        log = log or logger.info

        log("🐙 Connecting to GitHub...")
        user = await self.github_client.get_authenticated_user()
        owner = user["login"]

        repo_created = False
        if await self.github_client.get_repository(owner, repo_name) is not None:
            log("📁 Repository found.")
        else:
            await self.github_client.create_repository(
                repo_name, private=True, description=description
            )
            repo_created = True
            log("📁 Repository created.")

        response = await self.github_client.create_file(
            owner,
            repo_name,
            artifact.file_name,
            f"Add {artifact.file_name}",
            artifact.code,
        )

        html_url = (response.get("content") or {}).get("html_url")
        log(f"🎉 Commit successful: '{artifact.file_name}'")

        return CommitResult(
            owner=owner,
            repo=repo_name,
            path=artifact.file_name,
            html_url=html_url,
            repo_created=repo_created,
        )
