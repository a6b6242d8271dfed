"""Prompt templates sent to Claude when generating branch descriptions."""

from branch_namer.schemas.requests import GenerationRequest
from branch_namer.utils.constants import MAX_PROMPT_BODY_LENGTH
from branch_namer.utils.templates import construct_jinja2_template_from_string, render_template

SYSTEM_PROMPT_TEMPLATE = construct_jinja2_template_from_string(
    """\
You are a branch name generator. Your task is to create a concise, descriptive 3-4 word kebab-case name for a git branch based on {{ entity_name }} title and description.

Rules:
- Output ONLY the kebab-case branch name (e.g., "fix-auth-bug" or "add-user-validation")
- Use 3-4 words maximum
- Use lowercase with hyphens only
- Be specific and descriptive about what the change does
- Focus on the action being taken (fix, add, update, remove, etc.)
- No prefixes or suffixes, just the core description"""
)

USER_PROMPT_TEMPLATE = construct_jinja2_template_from_string(
    """\
Title: {{ title }}

{% if body %}Description: {{ body }}{% else %}No description provided.{% endif %}

Generate a 3-4 word kebab-case branch name:"""
)


def build_system_prompt(request: GenerationRequest) -> str:
    """Render the system instruction for the request's entity type."""
    entity_name = request.entity_type.display_name
    article = "an" if entity_name[0] in "aeiou" else "a"
    return render_template(SYSTEM_PROMPT_TEMPLATE, entity_name=f"{article} {entity_name}")


def build_user_prompt(request: GenerationRequest) -> str:
    """Render the user message, cutting the body to its first 500 characters."""
    return render_template(
        USER_PROMPT_TEMPLATE,
        title=request.title,
        body=request.body[:MAX_PROMPT_BODY_LENGTH],
    )
