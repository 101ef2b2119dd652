"""Protocol interfaces for external collaborators."""

from typing import Any, Optional, Protocol

from gitexpress.domain.models.parsing import ProblemPageData


class HTTPClientProtocol(Protocol):
    """Protocol for HTTP client."""

    async def get_text(self, url: str, headers: dict[str, str] | None = None) -> str:
        """Get text content from URL."""
        ...

    async def get_json(self, url: str, headers: dict[str, str] | None = None) -> Any:
        ...

    async def post_json(
        self, url: str, payload: Any, headers: dict[str, str] | None = None
    ) -> Any:
        ...

    async def put_json(
        self, url: str, payload: Any, headers: dict[str, str] | None = None
    ) -> Any:
        ...


class LLMClientProtocol(Protocol):
    """Protocol for a text generation service."""

    async def complete(
        self,
        prompt: str,
        system_prompt: Optional[str] = None,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
    ) -> str:
        """Return a single text completion."""
        ...


class ProblemPageParserProtocol(Protocol):
    """Protocol for parsing problem pages."""

    async def parse_problem_page(self, contest_id: int, index: str) -> ProblemPageData:
        """Parse problem page and extract data."""
        ...
