"""Tests for the GitHub notification helper functions."""

import types
from unittest.mock import MagicMock

from ghnotif_core.gh.notifications import (
    delete_thread_subscription,
    get_detail,
    list_notifications,
    mark_thread_read,
)
from ghnotif_core.models import Notification, Subject


def _gh_notification(id="101", unread=True, subject_type="PullRequest", repo="a/b"):
    return types.SimpleNamespace(
        id=id,
        unread=unread,
        reason="mention",
        repository=types.SimpleNamespace(full_name=repo),
        subject=types.SimpleNamespace(
            type=subject_type,
            title="Fix bug",
            url="https://api.github.com/repos/a/b/pulls/1",
        ),
    )


class TestListNotifications:
    def test_iterates_all_pages_by_default(self):
        client = MagicMock()
        paginated = MagicMock()
        paginated.__iter__.return_value = iter([_gh_notification("1"), _gh_notification("2")])
        client.get_user.return_value.get_notifications.return_value = paginated

        result = list_notifications(client, include_read=False)

        client.get_user.return_value.get_notifications.assert_called_once_with(all=False)
        paginated.get_page.assert_not_called()
        assert [n.id for n in result] == ["1", "2"]

    def test_first_page_only(self):
        client = MagicMock()
        paginated = client.get_user.return_value.get_notifications.return_value
        paginated.get_page.return_value = [_gh_notification("1")]

        result = list_notifications(client, include_read=True, all_pages=False)

        client.get_user.return_value.get_notifications.assert_called_once_with(all=True)
        paginated.get_page.assert_called_once_with(0)
        assert [n.id for n in result] == ["1"]

    def test_converts_to_snapshots(self):
        client = MagicMock()
        client.get_user.return_value.get_notifications.return_value = [_gh_notification()]

        (notification,) = list_notifications(client, include_read=False)

        assert notification == Notification(
            id="101",
            unread=True,
            reason="mention",
            repository="a/b",
            subject=Subject(type="PullRequest", title="Fix bug", url="https://api.github.com/repos/a/b/pulls/1"),
        )


class TestRemoteCalls:
    def test_get_detail_returns_decoded_body(self):
        client = MagicMock()
        client.requester.requestJsonAndCheck.return_value = ({}, {"state": "open"})

        assert get_detail(client, "https://api.github.com/repos/a/b/issues/3") == {"state": "open"}
        client.requester.requestJsonAndCheck.assert_called_once_with(
            "GET", "https://api.github.com/repos/a/b/issues/3"
        )

    def test_mark_thread_read(self):
        client = MagicMock()
        client.requester.requestJsonAndCheck.return_value = ({}, None)

        mark_thread_read(client, "101")

        client.requester.requestJsonAndCheck.assert_called_once_with("PATCH", "/notifications/threads/101")

    def test_delete_thread_subscription(self):
        client = MagicMock()
        client.requester.requestJsonAndCheck.return_value = ({}, None)

        delete_thread_subscription(client, "101")

        client.requester.requestJsonAndCheck.assert_called_once_with(
            "DELETE", "/notifications/threads/101/subscription"
        )
