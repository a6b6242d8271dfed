"""Branch description generation module."""

from .claude import generate, generate_claude_description, try_generate_claude_description
from .exceptions import UpstreamError
from .fallback import generate_description_with_fallback, resolve
from .results import GenerationFailed, GenerationResult, GenerationSucceeded

__all__ = [
    "GenerationFailed",
    "GenerationResult",
    "GenerationSucceeded",
    "UpstreamError",
    "generate",
    "generate_claude_description",
    "generate_description_with_fallback",
    "resolve",
    "try_generate_claude_description",
]
