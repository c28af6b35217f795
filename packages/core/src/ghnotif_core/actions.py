"""Per-notification actions invoked by the pipeline.

Each factory closes over the client and the active FilterConfig and returns
a callable taking one Notification. Errors are raised, never swallowed, so
the pipeline can stop at the first failure.
"""

from __future__ import annotations

import logging

from rich.console import Console

from ghnotif_core.errors import MarkReadError, UnsubscribeError
from ghnotif_core.gh.notifications import REMOTE_ERRORS, delete_thread_subscription, mark_thread_read
from ghnotif_core.models import FilterConfig, Notification
from ghnotif_core.pipeline import Action
from ghnotif_core.resolver import resolve_subject_state

console = Console()
logger = logging.getLogger(__name__)

DEFAULT_TITLE_WIDTH = 80


def _emit(out: Console, line: str) -> None:
    # Titles are user content: no markup parsing, no wrapping.
    out.print(line, markup=False, highlight=False, emoji=False, soft_wrap=True)


def make_print_action(
    client,
    filters: FilterConfig,
    out: Console | None = None,
    title_width: int = DEFAULT_TITLE_WIDTH,
) -> Action:
    """Return an action printing each notification's title and subject state.

    When a state filter is configured every matching notification already has
    that state, so it is reused instead of fetching the subject a second time.
    """
    out = out or console

    def print_notification(notification: Notification) -> None:
        state = filters.subject_state or resolve_subject_state(client, notification)
        _emit(out, f"{notification.subject.title:<{title_width}} {state}")

    return print_notification


def make_unsubscribe_action(client, filters: FilterConfig, out: Console | None = None) -> Action:
    """Return an action that unsubscribes from each notification thread.

    Unread threads are skipped unless ``filters.unsubscribe_unread`` is set,
    in which case they are marked as read before the subscription is deleted.
    """
    out = out or console

    def unsubscribe(notification: Notification) -> None:
        if notification.unread:
            if not filters.unsubscribe_unread:
                logger.debug("Leaving unread thread %s alone.", notification.id)
                return
            try:
                mark_thread_read(client, notification.id)
            except REMOTE_ERRORS as e:
                raise MarkReadError(f"failed to mark thread as read, {e}") from e

        try:
            delete_thread_subscription(client, notification.id)
        except REMOTE_ERRORS as e:
            raise UnsubscribeError(f"failed to unsubscribe from thread, {e}") from e

        subject = notification.subject
        logger.debug("Unsubscribed from thread %s.", notification.id)
        _emit(
            out,
            f"✅  {subject.title} (thread {notification.id}, reason was \"{notification.reason}\", {subject.url})",
        )

    return unsubscribe
