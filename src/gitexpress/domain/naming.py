"""File and repository naming for generated artifacts."""

import re
import time

from .models import GenerationMode, ProblemRecord, TargetLanguage

DEFAULT_REPO_NAME = "GitExpress-Archive"

_MODE_PREFIX = {
    GenerationMode.EXPRESS: "script",
    GenerationMode.CUSTOM_BUILD: "main",
    GenerationMode.LEETCODE: "leetcode",
    GenerationMode.CODEFORCES: "codeforces",
}


def slugify(value: str) -> str:
    """Lowercase ``value`` and collapse every non-alphanumeric run to ``_``."""
    return re.sub(r"[^a-z0-9]+", "_", value.lower()).strip("_")


def timestamp_millis() -> int:
    return int(time.time() * 1000)


def build_file_name(
    mode: GenerationMode,
    language: TargetLanguage,
    problem: ProblemRecord | None = None,
    timestamp: int | None = None,
) -> str:
    """
    Build ``{prefix}_{slug-or-timestamp}{extension}``.

    LeetCode files use the slugified title, Codeforces files use the
    contest id and index, everything else uses a millisecond timestamp.
    """
    prefix = _MODE_PREFIX[mode]

    slug = ""
    if problem is not None:
        if mode == GenerationMode.LEETCODE:
            slug = slugify(problem.title)
        elif mode == GenerationMode.CODEFORCES and problem.contest_id is not None:
            slug = f"{problem.contest_id}{problem.index or ''}"

    if not slug:
        slug = str(timestamp if timestamp is not None else timestamp_millis())

    return f"{prefix}_{slug}{language.extension}"
