"""Generates branch descriptions with a single Claude Messages API call."""

from typing import Any

import httpx
import structlog

from branch_namer.configuration.models import Credentials
from branch_namer.configuration.reconcile import reconcile_credentials, validate_credentials
from branch_namer.generation.exceptions import UpstreamError
from branch_namer.generation.prompts import build_system_prompt, build_user_prompt
from branch_namer.generation.results import GenerationFailed, GenerationResult, GenerationSucceeded
from branch_namer.schemas.requests import EntityType, GenerationRequest
from branch_namer.utils.constants import (
    ANTHROPIC_API_VERSION,
    CLAUDE_DESCRIPTION_MAX_TOKENS,
    CLAUDE_DESCRIPTION_MODEL,
    CLAUDE_GENERATED_PLACEHOLDER,
    DEFAULT_ANTHROPIC_API_URL,
)
from branch_namer.utils.slugs import sanitize_branch_description

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


def build_request_payload(request: GenerationRequest) -> dict[str, Any]:
    """Build the JSON body for the Messages API request."""
    return {
        "model": CLAUDE_DESCRIPTION_MODEL,
        "max_tokens": CLAUDE_DESCRIPTION_MAX_TOKENS,
        "messages": [
            {
                "role": "user",
                "content": build_user_prompt(request),
            }
        ],
        "system": build_system_prompt(request),
    }


def build_request_headers(credentials: Credentials) -> dict[str, str]:
    """Build request headers; the API key is preferred over the OAuth token."""
    headers = {
        "Content-Type": "application/json",
        "anthropic-version": ANTHROPIC_API_VERSION,
    }
    headers.update(credentials.headers())
    return headers


def extract_description(data: Any) -> str:
    """Pull the text of the first content block out of a Messages API response.

    Raises:
        UpstreamError: If the response has no content blocks.
    """
    content = data.get("content") if isinstance(data, dict) else None
    if not content:
        raise UpstreamError("No content returned from Claude API")
    first_block = content[0]
    text = first_block.get("text") if isinstance(first_block, dict) else None
    return (text or "").strip()


async def generate_claude_description(
    request: GenerationRequest,
    credentials: Credentials | None = None,
    client: httpx.AsyncClient | None = None,
    api_url: str = DEFAULT_ANTHROPIC_API_URL,
) -> str:
    """Generate a branch description for an issue or pull request using Claude.

    Exactly one request is made; failures are raised to the caller unrecovered.

    Args:
        request: Title, body and entity type to summarize.
        credentials: Claude credentials. Read from the environment if omitted.
        client: HTTP client to send the request with. A short-lived client is opened if omitted.
        api_url: Messages API endpoint.

    Raises:
        CredentialError: If no credentials are available. No request is sent.
        UpstreamError: If the API returns a non-success status or no content.
        httpx.HTTPError: If the request cannot be sent or its response read.
        ValueError: If the response body is not valid JSON.

    Returns:
        The sanitized branch description.
    """
    if credentials is None:
        credentials = reconcile_credentials()
    validate_credentials(credentials)

    payload = build_request_payload(request)
    headers = build_request_headers(credentials)
    logger.debug(
        "Requesting branch description from Claude",
        model=payload["model"],
        entity_type=request.entity_type.value,
        authentication_type=credentials.authentication_type.value if credentials.authentication_type else None,
    )

    if client is None:
        async with httpx.AsyncClient() as owned_client:
            response = await owned_client.post(api_url, headers=headers, json=payload)
    else:
        response = await client.post(api_url, headers=headers, json=payload)

    if not response.is_success:
        logger.error("Claude API request failed", status_code=response.status_code, body=response.text)
        raise UpstreamError.from_response(response.status_code, response.text)

    description = extract_description(response.json())
    return sanitize_branch_description(description, placeholder=CLAUDE_GENERATED_PLACEHOLDER)


async def generate(
    title: str,
    body: str,
    entity_type: EntityType | str,
    credentials: Credentials | None = None,
    client: httpx.AsyncClient | None = None,
    api_url: str = DEFAULT_ANTHROPIC_API_URL,
) -> str:
    """Convenience wrapper around generate_claude_description taking plain values."""
    request = GenerationRequest(title=title, body=body, entity_type=EntityType(entity_type))
    return await generate_claude_description(request, credentials=credentials, client=client, api_url=api_url)


async def try_generate_claude_description(
    request: GenerationRequest,
    credentials: Credentials | None = None,
    client: httpx.AsyncClient | None = None,
    api_url: str = DEFAULT_ANTHROPIC_API_URL,
) -> GenerationResult:
    """Run generate_claude_description and capture any failure as a GenerationFailed result."""
    try:
        description = await generate_claude_description(request, credentials=credentials, client=client, api_url=api_url)
    except Exception as exc:
        return GenerationFailed(error=exc)
    return GenerationSucceeded(description=description)
