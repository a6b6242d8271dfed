"""Resolves a branch description, falling back to title parsing when Claude cannot be used."""

import httpx
import structlog

from branch_namer.configuration.models import Credentials
from branch_namer.generation.claude import try_generate_claude_description
from branch_namer.generation.results import GenerationFailed, GenerationSucceeded
from branch_namer.schemas.requests import EntityType, GenerationRequest
from branch_namer.utils.constants import (
    DEFAULT_ANTHROPIC_API_URL,
    FALLBACK_DESCRIPTION_PLACEHOLDER,
    SIMPLE_DESCRIPTION_PLACEHOLDER,
)
from branch_namer.utils.slugs import slugify_title_words

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


async def generate_description_with_fallback(
    request: GenerationRequest,
    use_claude: bool,
    credentials: Credentials | None = None,
    client: httpx.AsyncClient | None = None,
    api_url: str = DEFAULT_ANTHROPIC_API_URL,
) -> str:
    """Return a branch description for the request. Never raises.

    With use_claude disabled the first words of the title are used and no
    request is made. Otherwise Claude is asked once; on any failure a warning
    is logged and the title is used instead.
    """
    if not use_claude:
        return slugify_title_words(request.title, placeholder=SIMPLE_DESCRIPTION_PLACEHOLDER)

    result = await try_generate_claude_description(request, credentials=credentials, client=client, api_url=api_url)
    match result:
        case GenerationSucceeded(description=description):
            logger.info("Generated Claude description", description=description)
            return description
        case GenerationFailed(error=error):
            logger.warning(
                "Claude description generation failed, falling back to title parsing",
                error=str(error),
                error_type=type(error).__name__,
            )
    return slugify_title_words(request.title, placeholder=FALLBACK_DESCRIPTION_PLACEHOLDER)


async def resolve(
    title: str,
    body: str,
    entity_type: EntityType | str,
    use_claude: bool,
    credentials: Credentials | None = None,
    client: httpx.AsyncClient | None = None,
    api_url: str = DEFAULT_ANTHROPIC_API_URL,
) -> str:
    """Convenience wrapper around generate_description_with_fallback taking plain values."""
    request = GenerationRequest(title=title, body=body, entity_type=EntityType(entity_type))
    return await generate_description_with_fallback(request, use_claude, credentials=credentials, client=client, api_url=api_url)
