"""Domain models package."""

from .artifact import (
    CommitResult,
    GeneratedArtifact,
    GenerationMode,
    RunReport,
    TargetLanguage,
)
from .problem import CodeSnippet, ProblemRecord, ProblemSource

__all__ = [
    "CodeSnippet",
    "CommitResult",
    "GeneratedArtifact",
    "GenerationMode",
    "ProblemRecord",
    "ProblemSource",
    "RunReport",
    "TargetLanguage",
]
