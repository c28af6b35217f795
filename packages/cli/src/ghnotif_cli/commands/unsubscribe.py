"""unsubscribe command — drop subscriptions to matching notification threads."""

from __future__ import annotations

import click
from rich.console import Console

from ghnotif_core.actions import make_unsubscribe_action
from ghnotif_core.errors import NotificationError
from ghnotif_core.models import SUBJECT_STATES
from ghnotif_core.pipeline import for_each_notification

console = Console()


@click.command("unsubscribe")
@click.option(
    "--state",
    type=click.Choice(SUBJECT_STATES),
    default="closed",
    show_default=True,
    help="Act on notifications where the subject is in that state. Merged is for PRs only.",
)
@click.option("--unread", "unsubscribe_unread", is_flag=True, help="Also unsubscribe from unread notifications.")
@click.option("--first-page-only", is_flag=True, help="Only consider the first page of notifications.")
@click.pass_context
def unsubscribe_cmd(ctx, state: str, unsubscribe_unread: bool, first_page_only: bool):
    """Unsubscribe from the notifications matching the filters.

    Read and unread threads are both listed; unread ones are left alone unless
    --unread is given, in which case they are marked as read first. There is
    no dry run: use `ghnotif list` with the same filters to preview.
    """
    from ghnotif_cli.auth import require_client
    from ghnotif_core.config import build_filters

    config = ctx.obj["config"]
    client = require_client(config)
    filters = build_filters(config, subject_state=state, include_read=True, unsubscribe_unread=unsubscribe_unread)

    action = make_unsubscribe_action(client, filters, console)
    all_pages = config.get("all_pages", True) and not first_page_only
    try:
        for_each_notification(client, filters, action, all_pages=all_pages)
    except NotificationError as e:
        console.print(
            f"Failed to process notifications, {e}", markup=False, highlight=False, emoji=False, soft_wrap=True
        )
        ctx.exit(1)
