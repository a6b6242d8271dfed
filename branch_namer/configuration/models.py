"""Configuration models for authenticating against the Claude API."""

from dataclasses import dataclass
from enum import Enum


class AuthenticationType(str, Enum):
    """Enum for Claude API authentication types."""

    API_KEY = "api_key"
    OAUTH_TOKEN = "oauth_token"


@dataclass(frozen=True)
class Credentials:
    """Secrets used to authorize Claude API requests.

    Empty strings are treated as unset. When both values are present the API
    key takes priority.
    """

    anthropic_api_key: str | None = None
    claude_code_oauth_token: str | None = None

    @property
    def authentication_type(self) -> AuthenticationType | None:
        """Return which secret will be sent, or None if there is nothing to send."""
        if self.anthropic_api_key:
            return AuthenticationType.API_KEY
        if self.claude_code_oauth_token:
            return AuthenticationType.OAUTH_TOKEN
        return None

    def headers(self) -> dict[str, str]:
        """Return the single authentication header for these credentials."""
        if self.anthropic_api_key:
            return {"x-api-key": self.anthropic_api_key}
        if self.claude_code_oauth_token:
            return {"authorization": f"Bearer {self.claude_code_oauth_token}"}
        return {}
