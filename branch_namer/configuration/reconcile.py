"""Reconcile Claude API credentials between CLI arguments and environment variables."""

import structlog

from branch_namer.configuration.env import Settings, get_settings
from branch_namer.configuration.exceptions import CredentialError
from branch_namer.configuration.models import Credentials

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


def reconcile_credentials(
    cli_anthropic_api_key: str | None = None,
    cli_claude_code_oauth_token: str | None = None,
    settings: Settings | None = None,
) -> Credentials:
    """Merge CLI-provided secrets over the ones found in the environment.

    Args:
        cli_anthropic_api_key (str | None): API key passed on the command line.
        cli_claude_code_oauth_token (str | None): OAuth token passed on the command line.
        settings (Settings | None): Settings to fall back to. Read fresh from the environment if omitted.

    Returns:
        Credentials: The reconciled credentials, possibly empty.
    """
    if settings is None:
        settings = get_settings()
    return Credentials(
        anthropic_api_key=cli_anthropic_api_key or settings.ANTHROPIC_API_KEY,
        claude_code_oauth_token=cli_claude_code_oauth_token or settings.CLAUDE_CODE_OAUTH_TOKEN,
    )


def validate_credentials(credentials: Credentials) -> Credentials:
    """Validates that at least one form of Claude credential is present.

    Raises:
        CredentialError: If neither the API key nor the OAuth token is set.

    Returns:
        Credentials: The same credentials, unchanged.
    """
    if credentials.authentication_type is None:
        raise CredentialError()
    logger.debug("Claude credentials found", authentication_type=credentials.authentication_type.value)
    return credentials
