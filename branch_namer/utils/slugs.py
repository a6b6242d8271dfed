"""Slug helpers for turning free text into branch-safe descriptions."""

import re

from branch_namer.schemas.requests import EntityType
from branch_namer.utils.constants import (
    CLAUDE_GENERATED_PLACEHOLDER,
    DEFAULT_BRANCH_PREFIX,
    MAX_BRANCH_DESCRIPTION_LENGTH,
    MAX_TITLE_WORDS,
)


def sanitize_branch_description(description: str, placeholder: str = CLAUDE_GENERATED_PLACEHOLDER) -> str:
    """Sanitize free text (typically a model response) into a kebab-case branch description.

    Args:
        description: Arbitrary text to clean up.
        placeholder: Returned when nothing usable survives sanitization.

    Returns:
        A lowercase, hyphen-delimited description of at most 50 characters.
    """
    slug = description.lower().strip()
    # One surrounding quote on each side, single or double.
    slug = re.sub(r"^[\"']|[\"']$", "", slug)
    slug = re.sub(r"[\s_]+", "-", slug)
    slug = re.sub(r"[^a-z0-9-]", "", slug)
    slug = re.sub(r"-+", "-", slug)
    slug = re.sub(r"^-|-$", "", slug)
    # Truncation can expose a hyphen at the cut point.
    slug = slug[:MAX_BRANCH_DESCRIPTION_LENGTH].rstrip("-")
    return slug or placeholder


def slugify_title_words(title: str, placeholder: str, max_words: int = MAX_TITLE_WORDS) -> str:
    """Build a description from the first few words of a title.

    Kept separate from sanitize_branch_description: quotes and underscores are
    not special here, so results differ for titles containing them.
    """
    words = re.split(r"\s+", title)[:max_words]
    slug = "-".join(words).lower()
    slug = re.sub(r"[^a-z0-9-]", "", slug)
    slug = re.sub(r"-+", "-", slug)
    slug = re.sub(r"^-|-$", "", slug)
    return slug or placeholder


def build_branch_name(
    description: str,
    entity_type: EntityType,
    number: int | str,
    prefix: str = DEFAULT_BRANCH_PREFIX,
) -> str:
    """Generate a branch name like 'claude/issue-123-fix-login-bug'."""
    return f"{prefix}/{entity_type.value}-{number}-{description}"
