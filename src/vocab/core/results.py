"""
Structured results of store operations.

Failed operations are reported here instead of being raised; a failed
operation leaves the store unchanged.
"""

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from vocab.core.resolver import Choice
    from vocab.core.vocable import Vocable


class Status(str, Enum):
    ADDED = "added"
    MERGED = "merged"
    REMOVED = "removed"
    TRIMMED = "trimmed"
    RENAMED = "renamed"
    REJECTED = "rejected"
    NOT_FOUND = "not_found"
    CANCELLED = "cancelled"
    NEEDS_CHOICE = "needs_choice"


class ErrorKind(str, Enum):
    NON_UNIQUE_WORDS = "non_unique_words"
    ALREADY_PRESENT = "already_present"
    WOULD_DUPLICATE = "would_duplicate"
    NOT_UNIQUE = "not_unique"
    NOT_FOUND = "not_found"
    CANCELLED = "cancelled"
    CORRUPT_RECORD = "corrupt_record"
    EMPTY_SIDE = "empty_side"


class ConsistencyError(Exception):
    """The word indices disagree with the vocables they point to."""


@dataclass
class Outcome:
    status: Status
    vocable: "Vocable | None" = None
    reason: ErrorKind | None = None
    message: str = ""
    choice: "Choice | None" = None
    raw: str | None = None

    @property
    def ok(self) -> bool:
        return self.status in (
            Status.ADDED, Status.MERGED, Status.REMOVED, Status.TRIMMED, Status.RENAMED,
        )

    def to_dict(self) -> dict:
        return {
            "status": self.status.value,
            "ok": self.ok,
            "vocable": self.vocable.to_dict() if self.vocable else None,
            "reason": self.reason.value if self.reason else None,
            "message": self.message,
            "choice": self.choice.to_dict() if self.choice else None,
        }


def added(vocable: "Vocable") -> Outcome:
    return Outcome(Status.ADDED, vocable, message=f'Added "{vocable}" to the vocabulary.')


def merged(vocable: "Vocable") -> Outcome:
    return Outcome(Status.MERGED, vocable, message=f'Successfully added to "{vocable}".')


def removed(vocable: "Vocable") -> Outcome:
    return Outcome(Status.REMOVED, vocable, message=f'Successfully removed "{vocable}".')


def trimmed(vocable: "Vocable", word: str) -> Outcome:
    return Outcome(Status.TRIMMED, vocable, message=f'Successfully removed "{word}" from "{vocable}".')


def renamed(vocable: "Vocable") -> Outcome:
    return Outcome(Status.RENAMED, vocable, message=f'Successfully changed "{vocable}".')


def rejected(reason: ErrorKind, message: str, vocable: "Vocable | None" = None, raw: str | None = None) -> Outcome:
    return Outcome(Status.REJECTED, vocable, reason=reason, message=message, raw=raw)


def not_found(word: str) -> Outcome:
    return Outcome(Status.NOT_FOUND, reason=ErrorKind.NOT_FOUND, message=f'"{word}" is not in the vocabulary.')


def cancelled(message: str) -> Outcome:
    return Outcome(Status.CANCELLED, reason=ErrorKind.CANCELLED, message=message)


def needs_choice(choice: "Choice") -> Outcome:
    return Outcome(Status.NEEDS_CHOICE, choice=choice, message=choice.question)
