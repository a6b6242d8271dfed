"""Fixtures for unit tests."""

import json
from pathlib import Path
from typing import Any, Callable, Generator

import httpx
import pytest
import structlog

from branch_namer.configuration.models import Credentials


@pytest.fixture(autouse=True)
def configure_structlog_for_caplog() -> Generator[None, None, None]:
    """Configure structlog for use with caplog."""
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )
    yield
    structlog.reset_defaults()


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Remove Claude credentials from the environment and keep stray .env files out of reach."""
    for name in ("ANTHROPIC_API_KEY", "CLAUDE_CODE_OAUTH_TOKEN", "ANTHROPIC_API_URL", "USE_CLAUDE", "BRANCH_PREFIX", "DEBUG"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def api_key_credentials() -> Credentials:
    """Credentials holding only an API key."""
    return Credentials(anthropic_api_key="sk-ant-test")


class RecordingTransport:
    """Stand-in for the Claude API that records every request it receives."""

    def __init__(self, status_code: int = 200, json_body: Any = None, text: str | None = None) -> None:
        self.status_code = status_code
        self.json_body = json_body
        self.text = text
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.text is not None:
            return httpx.Response(self.status_code, text=self.text)
        return httpx.Response(self.status_code, json=self.json_body)

    def sent_json(self, index: int = 0) -> dict[str, Any]:
        """Decode the JSON body of a recorded request."""
        return json.loads(self.requests[index].content)


@pytest.fixture
def claude_api() -> Callable[..., tuple[RecordingTransport, httpx.AsyncClient]]:
    """Build a recording transport and an AsyncClient wired to it."""

    def factory(status_code: int = 200, json_body: Any = None, text: str | None = None) -> tuple[RecordingTransport, httpx.AsyncClient]:
        transport = RecordingTransport(status_code=status_code, json_body=json_body, text=text)
        return transport, httpx.AsyncClient(transport=httpx.MockTransport(transport))

    return factory


@pytest.fixture
def text_response() -> Callable[[str], dict[str, Any]]:
    """Build a Messages API response body with a single text block."""

    def factory(text: str) -> dict[str, Any]:
        return {"id": "msg_test", "type": "message", "role": "assistant", "content": [{"type": "text", "text": text}]}

    return factory
