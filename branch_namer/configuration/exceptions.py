"""Contains exceptions raised when reconciling application configuration."""


class CredentialError(Exception):
    """Raised when neither an Anthropic API key nor a Claude OAuth token is configured."""

    def __init__(self, env_names: tuple[str, ...] = ("ANTHROPIC_API_KEY", "CLAUDE_CODE_OAUTH_TOKEN")) -> None:
        """Initializes the exception with the environment variables that were checked."""
        super().__init__(f"No Claude API credentials available for description generation (checked {', '.join(env_names)})")
        self.env_names = env_names
