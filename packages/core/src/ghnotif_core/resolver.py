"""Subject state resolution.

Each supported subject type is a SubjectKind variant that knows how to
describe its detail resource and how to map that resource to a normalized
state (open, closed or merged):

    resolve_subject_state() → kind_for(subject.type)
                            → get_detail(subject.url)   ← one remote read
                            → kind.state_from_detail()  ← only this differs per kind

Anything GitHub notifies about that has no variant here (Commit, Release,
Discussion, ...) cannot be resolved and raises UnsupportedSubjectType.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from ghnotif_core.errors import DetailFetchError, UnsupportedSubjectType
from ghnotif_core.gh.notifications import REMOTE_ERRORS, get_detail
from ghnotif_core.models import ISSUE, PULL_REQUEST, Notification

logger = logging.getLogger(__name__)


class SubjectKind(ABC):
    subject_type: str
    label: str  # human name used in error messages

    def fetch_state(self, client, url: str) -> str:
        try:
            detail = get_detail(client, url)
            return self.state_from_detail(detail)
        except (*REMOTE_ERRORS, AttributeError, KeyError, TypeError) as e:
            raise DetailFetchError(f"failed to get {self.label} details, {e}") from e

    @abstractmethod
    def state_from_detail(self, detail: dict) -> str:
        """Map a decoded detail resource to a normalized state."""


class PullRequestSubject(SubjectKind):
    subject_type = PULL_REQUEST
    label = "pull request"

    def state_from_detail(self, detail: dict) -> str:
        if detail.get("merged"):
            return "merged"
        return detail["state"]


class IssueSubject(SubjectKind):
    subject_type = ISSUE
    label = "issue"

    def state_from_detail(self, detail: dict) -> str:
        return detail["state"]


_KINDS: dict[str, SubjectKind] = {kind.subject_type: kind for kind in (PullRequestSubject(), IssueSubject())}


def kind_for(subject_type: str) -> SubjectKind:
    kind = _KINDS.get(subject_type)
    if kind is None:
        raise UnsupportedSubjectType(subject_type)
    return kind


def resolve_subject_state(client, notification: Notification) -> str:
    """Return the normalized state of a notification's subject.

    Performs exactly one remote read. Raises UnsupportedSubjectType before
    any request is made when the subject type has no variant.
    """
    subject = notification.subject
    kind = kind_for(subject.type)
    state = kind.fetch_state(client, subject.url)
    logger.debug("Resolved %s %s as %s.", kind.label, subject.url, state)
    return state
