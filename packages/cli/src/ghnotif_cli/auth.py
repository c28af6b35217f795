"""GitHub token resolution with gh CLI fallback.

Resolution order (stops at first success):
  1. ``github_token`` from the loaded config, i.e. the GITHUB_TOKEN environment variable
  2. `gh auth token` (GitHub CLI session, works after `gh auth login`)
"""

from __future__ import annotations

import logging
import subprocess

import click

from ghnotif_core.gh.notifications import get_client

logger = logging.getLogger(__name__)

_GH_TIMEOUT_SECONDS = 5


def gh_cli_token() -> str | None:
    """Return the token of the current `gh` session, or None."""
    try:
        result = subprocess.run(
            ["gh", "auth", "token"],
            capture_output=True,
            text=True,
            timeout=_GH_TIMEOUT_SECONDS,
        )
    except (FileNotFoundError, subprocess.TimeoutExpired) as e:
        logger.debug("gh CLI unavailable: %s", e)
        return None

    token = result.stdout.strip() if result.returncode == 0 else ""
    return token or None


def resolve_github_token(config: dict) -> str | None:
    token = config.get("github_token")
    if token:
        return token

    token = gh_cli_token()
    if token:
        logger.debug("Resolved GitHub token via gh CLI session.")
    return token


def require_client(config: dict):
    """Return an authenticated client, or fail the command before any request is made."""
    token = resolve_github_token(config)
    if not token:
        raise click.UsageError(
            "Please provide an API token using the GITHUB_TOKEN env var, or run `gh auth login` first.\n"
            "The token needs the 'notifications' scope (or 'repo' for private repositories)."
        )
    return get_client(token)
