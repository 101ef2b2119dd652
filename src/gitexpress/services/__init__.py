from dataclasses import dataclass

from gitexpress.config import Settings
from gitexpress.infrastructure.credential_store import Credentials
from gitexpress.services.codeforces import CodeforcesDailyService
from gitexpress.services.generation import CodeGenerator
from gitexpress.services.leetcode import LeetCodeDailyService
from gitexpress.services.publisher import RepositoryPublisher


@dataclass
class Components:
    """Everything a run needs, built after credentials are validated."""

    generator: CodeGenerator
    publisher: RepositoryPublisher
    leetcode: LeetCodeDailyService
    codeforces: CodeforcesDailyService


def create_llm_client(settings: Settings, credentials: Credentials):
    """Build the configured text generation client."""
    from gitexpress.infrastructure.llm_client import GeminiClient, OpenRouterClient

    if settings.llm_provider == "openrouter":
        return OpenRouterClient(api_key=settings.openrouter_api_key or "", model=settings.model)
    return GeminiClient(api_key=credentials.gemini_api_key, model=settings.model)


def create_leetcode_service(settings: Settings) -> LeetCodeDailyService:
    from gitexpress.infrastructure.http_client import AsyncHTTPClient
    from gitexpress.infrastructure.leetcode_client import LeetCodeClient

    return LeetCodeDailyService(LeetCodeClient(AsyncHTTPClient(timeout=settings.http_timeout)))


def create_codeforces_service(settings: Settings) -> CodeforcesDailyService:
    from gitexpress.infrastructure.codeforces_client import CodeforcesApiClient
    from gitexpress.infrastructure.http_client import AsyncHTTPClient
    from gitexpress.infrastructure.parsers import ProblemPageParser

    http_client = AsyncHTTPClient(timeout=settings.http_timeout)
    return CodeforcesDailyService(
        api_client=CodeforcesApiClient(http_client),
        page_parser=ProblemPageParser(http_client),
    )


def create_components(settings: Settings, credentials: Credentials) -> Components:
    """Factory function to create run components with all dependencies."""
    from gitexpress.infrastructure.github_client import GitHubApiClient
    from gitexpress.infrastructure.http_client import AsyncHTTPClient

    github_http = AsyncHTTPClient(timeout=settings.http_timeout, impersonate=None)

    return Components(
        generator=CodeGenerator(create_llm_client(settings, credentials)),
        publisher=RepositoryPublisher(GitHubApiClient(credentials.github_token, github_http)),
        leetcode=create_leetcode_service(settings),
        codeforces=create_codeforces_service(settings),
    )


__all__ = [
    "CodeGenerator",
    "CodeforcesDailyService",
    "Components",
    "LeetCodeDailyService",
    "RepositoryPublisher",
    "create_codeforces_service",
    "create_components",
    "create_leetcode_service",
    "create_llm_client",
]
