"""Orchestrates a single GitExpress run from prompt to commit."""

from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional

from loguru import logger

from gitexpress.config import Settings
from gitexpress.domain.credentials import validate_github_token
from gitexpress.domain.exceptions import (
    EmptyPromptError,
    GitExpressError,
    MissingCredentialError,
)
from gitexpress.domain.models import (
    GenerationMode,
    ProblemRecord,
    RunReport,
    TargetLanguage,
)
from gitexpress.infrastructure.credential_store import Credentials
from gitexpress.services import Components, create_components

ComponentsFactory = Callable[[Settings, Credentials], Components]


@dataclass(frozen=True)
class RunRequest:
    """What the user asked for."""

    mode: GenerationMode = GenerationMode.EXPRESS
    language: TargetLanguage = TargetLanguage.PYTHON
    prompt: str = ""
    repo_name: Optional[str] = None


class RunLog:
    """Timestamped user-facing log that also goes to the application logger."""

    def __init__(self, report: RunReport, sink: Optional[Callable[[str], None]] = None):
        self.report = report
        self.sink = sink

    def __call__(self, message: str) -> None:
        line = f"[{datetime.now().strftime('%H:%M:%S')}] {message}"
        self.report.logs.append(line)
        logger.info(message)
        if self.sink is not None:
            self.sink(line)


class GitExpressOrchestrator:
    """Runs validate → fetch problem → generate → ensure repo → commit."""

    def __init__(
        self,
        settings: Settings,
        components_factory: ComponentsFactory = create_components,
    ):
        """
        Initialize orchestrator.

        Args:
            settings: Runtime settings
            components_factory: Builds clients once credentials are validated
        """
        self.settings = settings
        self.components_factory = components_factory

    def validate(self, request: RunRequest, credentials: Credentials) -> None:
        """
        Check everything that can be checked without a network call.

        Raises:
            InvalidTokenError: If the GitHub token has the wrong format
            MissingCredentialError: If the AI key is missing
            EmptyPromptError: If the mode needs a prompt and none was given
        """
        validate_github_token(credentials.github_token)

        if self.settings.llm_provider == "openrouter":
            if not self.settings.openrouter_api_key:
                raise MissingCredentialError("OPENROUTER_API_KEY")
        elif not credentials.gemini_api_key:
            raise MissingCredentialError("GEMINI_API_KEY")

        if request.mode.needs_prompt and not request.prompt.strip():
            raise EmptyPromptError()

    async def run(
        self,
        request: RunRequest,
        credentials: Credentials,
        sink: Optional[Callable[[str], None]] = None,
    ) -> RunReport:
        """
        Execute one run. Never raises; failures end up in the report.

        Args:
            request: Mode, language, prompt and optional repository name
            credentials: AI key and GitHub token
            sink: Optional callback receiving every log line as it is written
        """
        report = RunReport()
        log = RunLog(report, sink)

        try:
            self.validate(request, credentials)
            components = self.components_factory(self.settings, credentials)

            problem = await self._fetch_problem(request.mode, components, log)

            log(f"🤖 Generating {request.language.display_name} code...")
            artifact = await components.generator.generate(
                request.mode,
                request.language,
                prompt=request.prompt,
                problem=problem,
            )
            report.artifact = artifact
            log(f"✅ Code received ({artifact.line_count} lines).")

            repo_name = (
                request.repo_name
                or artifact.suggested_repo_name
                or self.settings.repo_name
            )
            description = f"Generated by GitExpress: {problem.title}" if problem else None
            report.commit = await components.publisher.publish(
                artifact, repo_name, log=log, description=description
            )
            report.success = True

        except GitExpressError as e:
            report.error = str(e)
            log(f"❌ {e}")
        except Exception as e:
            logger.exception("Unexpected error in orchestrator")
            report.error = f"Unexpected error: {e}"
            log(f"❌ Unexpected error: {e}")

        return report

    async def _fetch_problem(
        self, mode: GenerationMode, components: Components, log: RunLog
    ) -> Optional[ProblemRecord]:
        if mode == GenerationMode.LEETCODE:
            log("🔄 Fetching today's LeetCode challenge...")
            problem = await components.leetcode.get_daily_problem()
        elif mode == GenerationMode.CODEFORCES:
            log("⚡ Fetching Codeforces daily problem...")
            problem = await components.codeforces.get_daily_problem()
        else:
            return None

        log(f"📌 {problem.title} ({problem.difficulty_label})")
        return problem
