"""Error taxonomy for the notification pipeline.

Every stage of the pipeline is fail-fast: the first error raised by the
listing, the resolver or an action stops the pass and propagates to the
caller unchanged. The original transport exception is kept as __cause__.
"""

from __future__ import annotations


class NotificationError(Exception):
    """Base class for all pipeline errors."""


class ListingFetchError(NotificationError):
    """The notification listing could not be fetched."""


class DetailFetchError(NotificationError):
    """A subject's detail resource could not be fetched or decoded."""


class UnsupportedSubjectType(NotificationError):
    """The subject type has no state mapping (e.g. Commit, Release)."""

    def __init__(self, subject_type: str):
        super().__init__(f'unhandled subject type "{subject_type}"')
        self.subject_type = subject_type


class MarkReadError(NotificationError):
    """Marking a thread as read failed."""


class UnsubscribeError(NotificationError):
    """Deleting a thread subscription failed."""
