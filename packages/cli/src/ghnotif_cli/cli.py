"""CLI entry point for ghnotif.

Commands:
  list         — list notifications matching the filters
  unsubscribe  — unsubscribe from the notification threads matching the filters
"""

from __future__ import annotations

import importlib.metadata
import logging

import click

from ghnotif_cli.commands.listing import list_cmd
from ghnotif_cli.commands.unsubscribe import unsubscribe_cmd


@click.group()
@click.version_option(
    version=importlib.metadata.version("ghnotif"),
    prog_name="ghnotif",
)
@click.option(
    "--config",
    "config_path",
    default=".ghnotif.yml",
    show_default=True,
    help="Path to the configuration file.",
    envvar="GHNOTIF_CONFIG",
)
@click.option("--repo", default=None, help="Consider this repository only. Example: org/reponame")
@click.option(
    "--type",
    "subject_type",
    default=None,
    help="Notifications for this type of subject only. Supported options: PullRequest (default) or Issue.",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
@click.pass_context
def main(ctx: click.Context, config_path: str, repo: str | None, subject_type: str | None, verbose: bool):
    """List and bulk-unsubscribe from GitHub notifications."""
    from ghnotif_core.config import load_config

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    ctx.ensure_object(dict)
    try:
        ctx.obj["config"] = load_config(config_path, cli_overrides={"repo": repo, "type": subject_type})
    except ValueError as e:
        raise click.UsageError(f"Invalid configuration in {config_path}: {e}")


main.add_command(list_cmd)
main.add_command(unsubscribe_cmd)
