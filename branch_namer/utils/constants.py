"""Shared constants used across the application."""

import re

# Claude API Constants
# --------------------

DEFAULT_ANTHROPIC_API_URL = "https://api.anthropic.com/v1/messages"
"""Messages endpoint of the Anthropic API."""

ANTHROPIC_API_VERSION = "2023-06-01"
"""Value sent in the anthropic-version header."""

CLAUDE_DESCRIPTION_MODEL = "claude-3-5-haiku-20241022"
"""Small, fast model used to summarize titles into branch descriptions."""

CLAUDE_DESCRIPTION_MAX_TOKENS = 50
"""Output token budget for a single description request."""

MAX_PROMPT_BODY_LENGTH = 500
"""Issue/PR bodies are cut to this many characters before being sent to Claude."""

# Branch Description Constants
# ----------------------------

MAX_BRANCH_DESCRIPTION_LENGTH = 50
"""Maximum length of a sanitized branch description."""

MAX_TITLE_WORDS = 3
"""Number of title words kept by the title parsing strategy."""

DEFAULT_BRANCH_PREFIX = "claude"
"""Default prefix for branch names built from a description."""

CLAUDE_GENERATED_PLACEHOLDER = "claude-generated"
"""Used when Claude's response sanitizes down to nothing."""

SIMPLE_DESCRIPTION_PLACEHOLDER = "simple-description"
"""Used when Claude generation is disabled and the title yields nothing."""

FALLBACK_DESCRIPTION_PLACEHOLDER = "fallback-description"
"""Used when Claude generation failed and the title yields nothing."""

# Regex Patterns
BRANCH_DESCRIPTION_PATTERN = re.compile(r"^[a-z0-9]+(-[a-z0-9]+)*$")
"""Shape of every description returned by this package."""
