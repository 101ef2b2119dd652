"""Generate code and commit it to GitHub from the terminal."""

import argparse
import asyncio
import sys

from gitexpress.application.orchestrator import GitExpressOrchestrator, RunRequest
from gitexpress.config import configure_logging, get_settings
from gitexpress.domain.models import GenerationMode, TargetLanguage
from gitexpress.infrastructure.credential_store import CredentialStore, resolve_credentials


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gitexpress",
        description="Generate code with an AI model and commit it to GitHub.",
    )
    parser.add_argument("--prompt", "-p", default="", help="What the code should do")
    parser.add_argument(
        "--mode",
        "-m",
        choices=[m.value for m in GenerationMode],
        default=GenerationMode.EXPRESS.value,
    )
    parser.add_argument(
        "--language",
        "-l",
        choices=[lang.value for lang in TargetLanguage],
        default=TargetLanguage.PYTHON.value,
    )
    parser.add_argument("--repo", default=None, help="Target repository name")
    return parser


async def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    settings = get_settings()
    configure_logging(settings.log_level)

    store = CredentialStore(settings.credentials_path)
    orchestrator = GitExpressOrchestrator(settings)

    report = await orchestrator.run(
        RunRequest(
            mode=GenerationMode(args.mode),
            language=TargetLanguage(args.language),
            prompt=args.prompt,
            repo_name=args.repo,
        ),
        resolve_credentials(store, settings),
    )

    if report.commit and report.commit.html_url:
        print(report.commit.html_url)
    return 0 if report.success else 1


def cli() -> None:
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    cli()
