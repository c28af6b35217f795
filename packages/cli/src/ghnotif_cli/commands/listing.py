"""list command — print matching notifications with their subject state."""

from __future__ import annotations

import click
from rich.console import Console

from ghnotif_core.actions import make_print_action
from ghnotif_core.errors import NotificationError
from ghnotif_core.models import SUBJECT_STATES
from ghnotif_core.pipeline import for_each_notification

console = Console()


@click.command("list")
@click.option(
    "--state",
    type=click.Choice(SUBJECT_STATES),
    default=None,
    help="Only notifications whose subject is in that state. Merged is for PRs only.",
)
@click.option("--show-read", "show_read", is_flag=True, help="Show read notifications.")
@click.option("--first-page-only", is_flag=True, help="Only consider the first page of notifications.")
@click.pass_context
def list_cmd(ctx, state: str | None, show_read: bool, first_page_only: bool):
    """List notifications.

    Without --state, the state of every matching subject is looked up so it
    can be displayed.
    """
    from ghnotif_cli.auth import require_client
    from ghnotif_core.config import build_filters

    config = ctx.obj["config"]
    client = require_client(config)
    filters = build_filters(config, subject_state=state, include_read=show_read)

    action = make_print_action(client, filters, console, title_width=config.get("title_width", 80))
    all_pages = config.get("all_pages", True) and not first_page_only
    try:
        for_each_notification(client, filters, action, all_pages=all_pages)
    except NotificationError as e:
        console.print(
            f"Failed to process notifications, {e}", markup=False, highlight=False, emoji=False, soft_wrap=True
        )
        ctx.exit(1)
