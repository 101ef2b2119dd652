from .credentials import is_valid_github_token, validate_github_token
from .markup import html_to_text
from .response_format import extract_build_response, strip_code_fences
from .selection import date_seed, pick_daily

__all__ = [
    "date_seed",
    "extract_build_response",
    "html_to_text",
    "is_valid_github_token",
    "pick_daily",
    "strip_code_fences",
    "validate_github_token",
]
