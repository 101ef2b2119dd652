"""Exception hierarchy for GitExpress."""


class GitExpressError(Exception):
    """Base error for every failure that ends a run."""

    pass


class ValidationError(GitExpressError):
    """Bad user input detected before any network call."""

    pass


class InvalidTokenError(ValidationError):
    """GitHub token does not look like a personal access token."""

    def __init__(self, message: str = "Invalid GitHub PAT format."):
        super().__init__(message)


class MissingCredentialError(ValidationError):
    """A required credential is not configured."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Missing credential: {name}")


class EmptyPromptError(ValidationError):
    """Prompt is empty in a mode that needs one."""

    def __init__(self, message: str = "Prompt must not be empty."):
        super().__init__(message)


class EmptyCandidateListError(GitExpressError):
    """Daily selection was asked to pick from nothing."""

    def __init__(self, message: str = "Cannot pick a daily item from an empty sequence."):
        super().__init__(message)


class ExternalServiceError(GitExpressError):
    """An external API rejected the request or returned garbage."""

    pass


class ProblemSourceError(ExternalServiceError):
    """LeetCode or Codeforces returned an unusable payload."""

    pass


class ParsingError(ExternalServiceError):
    """Error parsing HTML content."""

    pass
