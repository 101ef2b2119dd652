"""Parsing of raw model output into code and metadata."""

import re

from loguru import logger

CODE_START = "---CODE_START---"
CODE_END = "---CODE_END---"

REPO_NAME_PATTERN = re.compile(r"REPO_NAME:\s*([a-z0-9][a-z0-9-]*)")
CODE_BLOCK_PATTERN = re.compile(re.escape(CODE_START) + r"([\s\S]*?)" + re.escape(CODE_END))

_FENCE_OPEN = re.compile(r"^```[a-zA-Z0-9_+#-]*[ \t]*\n?")
_FENCE_CLOSE = re.compile(r"\n?```\s*$")


def extract_build_response(raw: str) -> tuple[str, str | None]:
    """
    Extract ``(code, repo_name)`` from a Custom-Build response.

    The model is asked to answer with a ``REPO_NAME:`` line followed by the
    code between ``CODE_START``/``CODE_END`` markers. If it ignored the
    markers the whole trimmed response is the code and there is no name.
    """
    text = raw.strip()

    code_match = CODE_BLOCK_PATTERN.search(text)
    if not code_match:
        logger.debug("No code sentinels in response, using full text as code")
        return text, None

    name_match = REPO_NAME_PATTERN.search(text)
    repo_name = name_match.group(1) if name_match else None
    return code_match.group(1).strip(), repo_name


def strip_code_fences(code: str) -> str:
    """Remove a Markdown fence wrapping the whole snippet, if any."""
    text = code.strip()
    if not text.startswith("```"):
        return text

    text = _FENCE_OPEN.sub("", text, count=1)
    text = _FENCE_CLOSE.sub("", text, count=1)
    return text.strip()
