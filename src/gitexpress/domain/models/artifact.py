"""Generated code and the results of publishing it."""

from dataclasses import dataclass, field
from enum import Enum


class TargetLanguage(str, Enum):
    """Languages the generator can target.

    Each member carries its display name, file extension and the LeetCode
    ``langSlug`` used to look up starter templates.
    """

    PYTHON = "python"
    JAVASCRIPT = "javascript"
    TYPESCRIPT = "typescript"
    JAVA = "java"
    CPP = "cpp"
    C = "c"
    CSHARP = "csharp"
    GO = "go"
    RUST = "rust"
    KOTLIN = "kotlin"

    @property
    def display_name(self) -> str:
        return _LANGUAGE_INFO[self][0]

    @property
    def extension(self) -> str:
        return _LANGUAGE_INFO[self][1]

    @property
    def leetcode_slug(self) -> str:
        return _LANGUAGE_INFO[self][2]


_LANGUAGE_INFO: dict[TargetLanguage, tuple[str, str, str]] = {
    TargetLanguage.PYTHON: ("Python", ".py", "python3"),
    TargetLanguage.JAVASCRIPT: ("JavaScript", ".js", "javascript"),
    TargetLanguage.TYPESCRIPT: ("TypeScript", ".ts", "typescript"),
    TargetLanguage.JAVA: ("Java", ".java", "java"),
    TargetLanguage.CPP: ("C++", ".cpp", "cpp"),
    TargetLanguage.C: ("C", ".c", "c"),
    TargetLanguage.CSHARP: ("C#", ".cs", "csharp"),
    TargetLanguage.GO: ("Go", ".go", "golang"),
    TargetLanguage.RUST: ("Rust", ".rs", "rust"),
    TargetLanguage.KOTLIN: ("Kotlin", ".kt", "kotlin"),
}


class GenerationMode(str, Enum):
    """What the user asked the generator to do."""

    EXPRESS = "express"
    CUSTOM_BUILD = "custom_build"
    LEETCODE = "leetcode"
    CODEFORCES = "codeforces"

    @property
    def needs_prompt(self) -> bool:
        return self in (GenerationMode.EXPRESS, GenerationMode.CUSTOM_BUILD)


@dataclass(frozen=True)
class GeneratedArtifact:
    """Code produced by one generation run, ready to be committed."""

    language: TargetLanguage
    code: str
    file_name: str
    suggested_repo_name: str | None = None

    @property
    def line_count(self) -> int:
        return len(self.code.split("\n"))


@dataclass(frozen=True)
class CommitResult:
    """Where a generated file landed."""

    owner: str
    repo: str
    path: str
    html_url: str | None = None
    repo_created: bool = False


@dataclass
class RunReport:
    """Outcome of a single run, including the user-facing log."""

    success: bool = False
    logs: list[str] = field(default_factory=list)
    artifact: GeneratedArtifact | None = None
    commit: CommitResult | None = None
    error: str | None = None
