from __future__ import annotations

import logging

from github import Github, GithubException
from requests.exceptions import RequestException

from ghnotif_core.models import Notification

logger = logging.getLogger(__name__)

# PyGithub raises GithubException for API errors but lets requests exceptions
# (connection refused, timeouts, ...) through unchanged.
REMOTE_ERRORS = (GithubException, RequestException)


def get_client(token: str) -> Github:
    return Github(token)


def list_notifications(client: Github, include_read: bool, all_pages: bool = True) -> list[Notification]:
    """Return the notification listing in server order.

    ``all_pages=False`` stops after the first page, which is what the API
    returns for a single unpaginated request.
    """
    paginated = client.get_user().get_notifications(all=include_read)
    raw = paginated if all_pages else paginated.get_page(0)
    notifications = [Notification.from_github(n) for n in raw]
    logger.debug("Fetched %d notification(s) (include_read=%s).", len(notifications), include_read)
    return notifications


def get_detail(client: Github, url: str) -> dict:
    _, data = client.requester.requestJsonAndCheck("GET", url)
    return data


def mark_thread_read(client: Github, thread_id: str) -> None:
    client.requester.requestJsonAndCheck("PATCH", f"/notifications/threads/{thread_id}")


def delete_thread_subscription(client: Github, thread_id: str) -> None:
    client.requester.requestJsonAndCheck("DELETE", f"/notifications/threads/{thread_id}/subscription")
