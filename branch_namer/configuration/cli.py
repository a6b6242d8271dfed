"""Defines the Command Line Interface (CLI) using Typer."""

import asyncio

import typer
from dotenv import load_dotenv
from typer import Argument, Option
from typing_extensions import Annotated

from branch_namer.configuration.env import get_settings
from branch_namer.configuration.reconcile import reconcile_credentials
from branch_namer.generation.fallback import generate_description_with_fallback
from branch_namer.schemas.requests import EntityType, GenerationRequest
from branch_namer.utils.constants import DEFAULT_BRANCH_PREFIX
from branch_namer.utils.log_config import configure_logging
from branch_namer.utils.slugs import build_branch_name

load_dotenv()

typer_app = typer.Typer(pretty_exceptions_show_locals=False)


@typer_app.callback()
def main_callback() -> None:
    """Generate git branch names from GitHub issue and pull request titles."""


@typer_app.command(name="describe")
def describe_cli(
    title: Annotated[str, Argument(help="Title of the issue or pull request.")],
    body: Annotated[str, Option(help="Body of the issue or pull request.")] = "",
    entity_type: Annotated[EntityType, Option(case_sensitive=False, help="Whether the title belongs to an issue or a pull request.")] = EntityType.ISSUE,
    use_claude: Annotated[bool, Option("--use-claude/--no-use-claude", envvar="USE_CLAUDE", help="Ask Claude for the description.")] = True,
    number: Annotated[int | None, Option(help="Issue or pull request number. Prints a full branch name when given.")] = None,
    prefix: Annotated[str, Option(envvar="BRANCH_PREFIX", help="Branch name prefix used with --number.")] = DEFAULT_BRANCH_PREFIX,
    anthropic_api_key: Annotated[str | None, Option(envvar="ANTHROPIC_API_KEY", help="Anthropic API key.")] = None,
    claude_code_oauth_token: Annotated[str | None, Option(envvar="CLAUDE_CODE_OAUTH_TOKEN", help="Claude Code OAuth token.")] = None,
    debug: Annotated[bool, Option(envvar="DEBUG", help="Enable debug mode.")] = False,
) -> None:
    """Print a kebab-case branch description for an issue or pull request."""
    configure_logging(debug=debug)
    settings = get_settings()
    credentials = reconcile_credentials(
        cli_anthropic_api_key=anthropic_api_key,
        cli_claude_code_oauth_token=claude_code_oauth_token,
        settings=settings,
    )
    request = GenerationRequest(title=title, body=body, entity_type=entity_type)

    description = asyncio.run(
        generate_description_with_fallback(
            request,
            use_claude,
            credentials=credentials,
            api_url=settings.ANTHROPIC_API_URL,
        )
    )

    if number is not None:
        typer.echo(build_branch_name(description, entity_type, number, prefix=prefix))
    else:
        typer.echo(description)


if __name__ == "__main__":
    typer_app()
