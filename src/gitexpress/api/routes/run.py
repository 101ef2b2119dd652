"""API routes for generation runs."""

from litestar import Controller, post
from litestar.status_codes import HTTP_200_OK
from loguru import logger

from gitexpress.api.schemas.run import CommitSchema, RunRequestSchema, RunResponse
from gitexpress.application.orchestrator import GitExpressOrchestrator, RunRequest
from gitexpress.infrastructure.credential_store import CredentialStore, resolve_credentials


class RunController(Controller):
    """Controller for generate-and-commit runs."""

    path = "/runs"

    @post("/", status_code=HTTP_200_OK)
    async def create_run(
        self,
        data: RunRequestSchema,
        orchestrator: GitExpressOrchestrator,
        credential_store: CredentialStore,
    ) -> RunResponse:
        """
        Generate code and commit it.

        The response always carries the run log; ``success`` tells whether
        the commit happened.
        """
        logger.debug(f"API request for run: mode={data.mode.value}, language={data.language.value}")

        report = await orchestrator.run(
            RunRequest(
                mode=data.mode,
                language=data.language,
                prompt=data.prompt,
                repo_name=data.repo_name,
            ),
            resolve_credentials(credential_store, orchestrator.settings),
        )

        return RunResponse(
            success=report.success,
            logs=report.logs,
            file_name=report.artifact.file_name if report.artifact else None,
            repo_name=report.commit.repo if report.commit else None,
            commit=CommitSchema.model_validate(report.commit) if report.commit else None,
            error=report.error,
        )
