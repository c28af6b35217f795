"""Notification filter pipeline."""

from __future__ import annotations

import logging
from typing import Callable

from ghnotif_core.errors import ListingFetchError
from ghnotif_core.gh.notifications import REMOTE_ERRORS, list_notifications
from ghnotif_core.models import FilterConfig, Notification
from ghnotif_core.resolver import resolve_subject_state

logger = logging.getLogger(__name__)

Action = Callable[[Notification], None]


def matches(client, notification: Notification, filters: FilterConfig) -> bool:
    """Return True if the notification passes every configured filter.

    Structural filters run first so the state lookup is only paid for
    notifications that could still match.
    """
    if notification.subject.type != filters.subject_type:
        return False

    # TODO: use GET /repos/{owner}/{repo}/notifications when a repository filter is set
    if filters.repository and notification.repository != filters.repository:
        return False

    if filters.subject_state:
        state = resolve_subject_state(client, notification)
        if state != filters.subject_state:
            return False

    return True


def for_each_notification(client, filters: FilterConfig, action: Action, all_pages: bool = True) -> int:
    """Invoke ``action`` for every notification that passes ``filters``.

    Notifications are visited in listing order and fully handled one at a
    time. The first error raised by the resolver or by the action stops the
    pass; notifications after it are left untouched.

    Returns the number of notifications the action was invoked for.
    """
    try:
        notifications = list_notifications(client, include_read=filters.include_read, all_pages=all_pages)
    except REMOTE_ERRORS as e:
        raise ListingFetchError(f"failed to list notifications, {e}") from e

    handled = 0
    for notification in notifications:
        if not matches(client, notification, filters):
            logger.debug("Skipping thread %s (%s).", notification.id, notification.subject.title)
            continue
        action(notification)
        handled += 1
    return handled
