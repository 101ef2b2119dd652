"""Litestar application exposing GitExpress over HTTP."""

from typing import Optional

from litestar import Litestar, Request, Response
from litestar.di import Provide
from litestar.status_codes import HTTP_400_BAD_REQUEST, HTTP_502_BAD_GATEWAY
from loguru import logger

from gitexpress.api.routes import DailyController, RunController, SettingsController
from gitexpress.application.orchestrator import GitExpressOrchestrator
from gitexpress.config import Settings, configure_logging, get_settings
from gitexpress.domain.exceptions import GitExpressError, ValidationError
from gitexpress.infrastructure.credential_store import CredentialStore
from gitexpress.services import (
    CodeforcesDailyService,
    LeetCodeDailyService,
    create_codeforces_service,
    create_leetcode_service,
)


def gitexpress_error_handler(request: Request, exc: GitExpressError) -> Response:
    """Map domain errors to JSON responses."""
    status_code = HTTP_400_BAD_REQUEST if isinstance(exc, ValidationError) else HTTP_502_BAD_GATEWAY
    logger.warning(f"{request.method} {request.url.path} failed: {exc}")
    return Response(content={"detail": str(exc)}, status_code=status_code)


def create_app(
    settings: Optional[Settings] = None,
    credential_store: Optional[CredentialStore] = None,
    orchestrator: Optional[GitExpressOrchestrator] = None,
    leetcode_service: Optional[LeetCodeDailyService] = None,
    codeforces_service: Optional[CodeforcesDailyService] = None,
) -> Litestar:
    """
    Build the application.

    Every collaborator can be passed in; missing ones are created from
    ``settings`` (loaded from the environment by default).
    """
    settings = settings or get_settings()
    credential_store = credential_store or CredentialStore(settings.credentials_path)
    orchestrator = orchestrator or GitExpressOrchestrator(settings)
    leetcode_service = leetcode_service or create_leetcode_service(settings)
    codeforces_service = codeforces_service or create_codeforces_service(settings)

    return Litestar(
        route_handlers=[SettingsController, RunController, DailyController],
        dependencies={
            "credential_store": Provide(lambda: credential_store, sync_to_thread=False),
            "orchestrator": Provide(lambda: orchestrator, sync_to_thread=False),
            "leetcode_service": Provide(lambda: leetcode_service, sync_to_thread=False),
            "codeforces_service": Provide(lambda: codeforces_service, sync_to_thread=False),
        },
        exception_handlers={GitExpressError: gitexpress_error_handler},
    )


def serve() -> None:
    """Run the API with uvicorn."""
    import uvicorn

    settings = get_settings()
    configure_logging(settings.log_level)

    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
    )


if __name__ == "__main__":
    serve()
