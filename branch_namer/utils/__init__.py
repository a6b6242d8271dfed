"""Utility modules for shared functionality."""

from .constants import (
    BRANCH_DESCRIPTION_PATTERN,
    CLAUDE_GENERATED_PLACEHOLDER,
    FALLBACK_DESCRIPTION_PLACEHOLDER,
    SIMPLE_DESCRIPTION_PLACEHOLDER,
)
from .slugs import build_branch_name, sanitize_branch_description, slugify_title_words

__all__ = [
    "BRANCH_DESCRIPTION_PATTERN",
    "CLAUDE_GENERATED_PLACEHOLDER",
    "FALLBACK_DESCRIPTION_PLACEHOLDER",
    "SIMPLE_DESCRIPTION_PLACEHOLDER",
    "build_branch_name",
    "sanitize_branch_description",
    "slugify_title_words",
]
