"""Command-line interface for the News Time admin console."""

import asyncio
import logging
import sys
from collections.abc import Awaitable, Callable

import click

from newstime.auth.utils import get_password_hash
from newstime_console import __version__
from newstime_console.client import ApiError, NewsApiClient
from newstime_console.config import DEFAULT_CONFIG_FILE, ConsoleConfig, get_config
from newstime_console.session import Access, SessionGate
from newstime_console.storage import FileTokenStore


def setup_logging(level: str) -> None:
    """Set up logging configuration.

    Args:
        level: Log level string.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler()],
    )


def _build(config: ConsoleConfig) -> tuple[NewsApiClient, SessionGate]:
    store = FileTokenStore(config.token_file)
    client = NewsApiClient(config.server_url, store)
    return client, SessionGate(client, store)


async def _run_as_admin(
    config: ConsoleConfig,
    action: Callable[[NewsApiClient], Awaitable[None]],
) -> bool:
    """Verify the stored token, then run an admin action.

    Returns:
        bool: False if the session is not authenticated.
    """
    client, gate = _build(config)
    async with client:
        await gate.mount()
        if gate.access() is not Access.RENDER:
            return False
        await action(client)
    return True


def _require_admin(config: ConsoleConfig, action) -> None:
    try:
        ok = asyncio.run(_run_as_admin(config, action))
    except ApiError as e:
        click.echo(f"Error: {e.message}")
        sys.exit(1)

    if not ok:
        click.echo("Not logged in (or session expired). Run 'newstime-admin login'.")
        sys.exit(1)


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.pass_context
def main(ctx: click.Context, verbose: bool):
    """Newstime admin console.

    Signs in to the 24x7 News Time API and runs admin tasks from the
    command line.
    """
    config = get_config()
    setup_logging("DEBUG" if verbose else config.log_level)
    ctx.obj = config


@main.command()
@click.option(
    "--server",
    "-s",
    prompt="News Time API URL",
    help="Base URL of the API (e.g., https://api.example.com)",
)
@click.pass_obj
def configure(config: ConsoleConfig, server: str):
    """Set the API server URL."""
    config.server_url = server.rstrip("/")
    config.save()
    click.echo(f"Configuration saved to {DEFAULT_CONFIG_FILE}")
    click.echo("\nRun 'newstime-admin login' to sign in.")


@main.command()
@click.password_option(confirmation_prompt=False, prompt="Admin password")
@click.pass_obj
def login(config: ConsoleConfig, password: str):
    """Sign in with the admin password."""
    client, gate = _build(config)

    async def _login() -> bool:
        async with client:
            return await gate.login(password)

    if asyncio.run(_login()):
        click.echo("Logged in.")
    else:
        click.echo(f"Login failed: {gate.last_error}. Please try again.")
        sys.exit(1)


@main.command()
@click.pass_obj
def logout(config: ConsoleConfig):
    """Forget the stored admin token."""
    # No server call; tokens carry no server-side state
    FileTokenStore(config.token_file).clear()
    click.echo("Logged out.")


@main.command()
@click.pass_obj
def status(config: ConsoleConfig):
    """Show the server and whether the stored token is still valid."""
    client, gate = _build(config)

    async def _status():
        async with client:
            return await gate.mount()

    state = asyncio.run(_status())

    click.echo(f"Server: {config.server_url}")
    click.echo(f"Authenticated: {'yes' if state.is_authenticated else 'no'}")


@main.command("hash-password")
@click.password_option(prompt="Password to hash")
def hash_password(password: str):
    """Print a bcrypt hash for ADMIN_PASSWORD_HASH."""
    click.echo(get_password_hash(password))
    click.echo("\nCopy this hash to ADMIN_PASSWORD_HASH in the server's .env", err=True)


@main.command()
@click.pass_obj
def stats(config: ConsoleConfig):
    """Show post, view, category and video totals."""

    async def _stats(client: NewsApiClient) -> None:
        data = await client.get_stats()
        click.echo(f"Posts:      {data['totalPosts']}")
        click.echo(f"Views:      {data['totalViews']}")
        click.echo(f"Categories: {data['totalCategories']}")
        click.echo(f"Videos:     {data['totalVideos']}")

    _require_admin(config, _stats)


@main.command("go-live")
@click.argument("video_id")
@click.option("--title", "-t", default=None, help="Banner title")
@click.pass_obj
def go_live(config: ConsoleConfig, video_id: str, title: str | None):
    """Switch the live banner on for VIDEO_ID."""

    async def _go_live(client: NewsApiClient) -> None:
        result = await client.go_live(video_id, title)
        click.echo(result.get("message", "Live"))

    _require_admin(config, _go_live)


@main.command("end-live")
@click.pass_obj
def end_live(config: ConsoleConfig):
    """Switch the live banner off."""

    async def _end_live(client: NewsApiClient) -> None:
        result = await client.end_live()
        click.echo(result.get("message", "Live stream ended"))

    _require_admin(config, _end_live)


if __name__ == "__main__":
    main()
