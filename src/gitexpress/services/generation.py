"""Prompt construction and code generation."""

from loguru import logger

from gitexpress.domain.exceptions import EmptyPromptError
from gitexpress.domain.models import (
    GeneratedArtifact,
    GenerationMode,
    ProblemRecord,
    ProblemSource,
    TargetLanguage,
)
from gitexpress.domain.naming import build_file_name
from gitexpress.domain.response_format import (
    CODE_END,
    CODE_START,
    extract_build_response,
    strip_code_fences,
)
from gitexpress.infrastructure.parsers import LLMClientProtocol

SYSTEM_PROMPT_TEMPLATE = """
You are a senior software engineer.
Generate ONLY professional-quality {language} code.
- Include documentation comments
- Follow the idiomatic style guide for {language}
- No explanations
- No markdown
- No conversational text
"""

PYTHON_RULES = """- Include docstrings
- Use type hints
- Follow PEP8
"""

CUSTOM_BUILD_FORMAT = f"""
Respond in exactly this format:
REPO_NAME: <short-kebab-case-repository-name>
{CODE_START}
<the complete code>
{CODE_END}
"""

PROBLEM_INSTRUCTIONS = """
Solve the following competitive programming problem.
The solution must be correct and efficient for the stated constraints.
"""


def build_system_prompt(language: TargetLanguage, mode: GenerationMode) -> str:
    prompt = SYSTEM_PROMPT_TEMPLATE.format(language=language.display_name)
    if language == TargetLanguage.PYTHON:
        prompt += PYTHON_RULES
    if mode == GenerationMode.CUSTOM_BUILD:
        prompt += CUSTOM_BUILD_FORMAT
    elif mode in (GenerationMode.LEETCODE, GenerationMode.CODEFORCES):
        prompt += PROBLEM_INSTRUCTIONS
    return prompt


def build_problem_prompt(problem: ProblemRecord, language: TargetLanguage) -> str:
    """Fold a problem into the user prompt sent to the model."""
    parts = [
        f"Problem ({problem.source.value} {problem.problem_id}): {problem.title}",
        f"Difficulty: {problem.difficulty_label}",
        f"URL: {problem.external_url}",
    ]
    if problem.time_limit:
        parts.append(f"Time limit: {problem.time_limit}")
    if problem.memory_limit:
        parts.append(f"Memory limit: {problem.memory_limit}")
    if problem.tags:
        parts.append(f"Tags: {', '.join(problem.tags)}")
    if problem.description_text:
        parts.append(f"\nDescription:\n{problem.description_text}")
    if problem.test_cases_text:
        parts.append(f"\nExample test cases:\n{problem.test_cases_text}")
    if problem.hints:
        hints = "\n".join(f"{i}. {hint}" for i, hint in enumerate(problem.hints, start=1))
        parts.append(f"\nHints:\n{hints}")

    snippet = problem.snippet_for(language.leetcode_slug)
    if snippet is not None:
        parts.append(f"\nComplete this {language.display_name} template:\n{snippet.code}")
    elif problem.source == ProblemSource.CODEFORCES:
        parts.append(f"\nRead from standard input and write to standard output in {language.display_name}.")

    return "\n".join(parts)


class CodeGenerator:
    """Turns a prompt or a problem into a ``GeneratedArtifact``."""

    def __init__(self, llm_client: LLMClientProtocol):
        self.llm_client = llm_client

    async def generate(
        self,
        mode: GenerationMode,
        language: TargetLanguage,
        prompt: str = "",
        problem: ProblemRecord | None = None,
    ) -> GeneratedArtifact:
        """
        Generate code for one run.

        Raises:
            EmptyPromptError: If the mode needs a prompt and none was given
            LLMError: If the generation service fails
        """
        if problem is not None:
            user_prompt = build_problem_prompt(problem, language)
            if prompt.strip():
                user_prompt += f"\n\nAdditional instructions:\n{prompt.strip()}"
        else:
            if not prompt.strip():
                raise EmptyPromptError()
            user_prompt = prompt

        raw = await self.llm_client.complete(
            prompt=user_prompt,
            system_prompt=build_system_prompt(language, mode),
        )

        repo_name = None
        if mode == GenerationMode.CUSTOM_BUILD:
            code, repo_name = extract_build_response(raw)
        else:
            code = raw

        code = strip_code_fences(code)
        artifact = GeneratedArtifact(
            language=language,
            code=code,
            file_name=build_file_name(mode, language, problem),
            suggested_repo_name=repo_name,
        )

        logger.debug(f"Generated {artifact.file_name} ({artifact.line_count} lines)")
        return artifact
