"""Parsers for extracting data from external sources."""

from .interfaces import HTTPClientProtocol, LLMClientProtocol, ProblemPageParserProtocol
from .problem_page_parser import ProblemPageParser

__all__ = [
    "HTTPClientProtocol",
    "LLMClientProtocol",
    "ProblemPageParser",
    "ProblemPageParserProtocol",
]
