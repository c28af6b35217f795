"""Notification data models.

Snapshots of the remote listing, built fresh on every run and never persisted.
Decoupled from PyGithub so the pipeline and actions can be exercised with
plain objects.
"""

from __future__ import annotations

from dataclasses import dataclass

PULL_REQUEST = "PullRequest"
ISSUE = "Issue"

SUBJECT_STATES = ("open", "closed", "merged")


@dataclass(frozen=True)
class Subject:
    """The pull request or issue a notification refers to."""

    type: str  # "PullRequest" | "Issue" | anything else GitHub sends (Commit, Release, ...)
    title: str
    url: str  # API URL of the detail resource


@dataclass(frozen=True)
class Notification:
    """A single notification thread as returned by the listing."""

    id: str
    unread: bool
    reason: str
    repository: str  # full name, e.g. "owner/name"
    subject: Subject

    @classmethod
    def from_github(cls, notification) -> Notification:
        """Build a snapshot from a PyGithub ``Notification`` object."""
        subject = notification.subject
        return cls(
            id=str(notification.id),
            unread=bool(notification.unread),
            reason=notification.reason or "",
            repository=notification.repository.full_name if notification.repository else "",
            subject=Subject(
                type=subject.type or "",
                title=subject.title or "",
                url=subject.url or "",
            ),
        )


@dataclass(frozen=True)
class FilterConfig:
    """Filters applied to every notification before an action runs.

    Built once per command invocation and passed explicitly into the pipeline.
    """

    subject_type: str = PULL_REQUEST
    repository: str | None = None  # None = any repository
    subject_state: str | None = None  # None = any state
    include_read: bool = False
    unsubscribe_unread: bool = False
