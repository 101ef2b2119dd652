"""Pydantic schemas for generation runs."""

from pydantic import BaseModel

from gitexpress.domain.models import GenerationMode, TargetLanguage


class RunRequestSchema(BaseModel):
    """Request to generate and commit code."""

    prompt: str = ""
    mode: GenerationMode = GenerationMode.EXPRESS
    language: TargetLanguage = TargetLanguage.PYTHON
    repo_name: str | None = None


class CommitSchema(BaseModel):
    owner: str
    repo: str
    path: str
    html_url: str | None = None
    repo_created: bool = False

    class Config:
        from_attributes = True


class RunResponse(BaseModel):
    """Outcome of a run with its log lines."""

    success: bool
    logs: list[str]
    file_name: str | None = None
    repo_name: str | None = None
    commit: CommitSchema | None = None
    error: str | None = None
