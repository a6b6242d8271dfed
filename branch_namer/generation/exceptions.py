"""Custom exceptions for the generation module."""


class UpstreamError(Exception):
    """Raised when the Claude API fails or returns a payload that cannot be used."""

    def __init__(self, message: str, status_code: int | None = None, body: str | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body

    @classmethod
    def from_response(cls, status_code: int, body: str) -> "UpstreamError":
        """Build the error for a non-success HTTP response."""
        return cls(f"Claude API request failed: {status_code} {body}", status_code=status_code, body=body)
