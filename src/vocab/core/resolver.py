"""
Conflict resolution contract.

When an operation has several valid outcomes the store asks a resolver to
pick one option. `None` means the default answer (no merge, cancel, remove
the whole vocable - depending on the question).
"""

from dataclasses import dataclass, field
from typing import Any, Protocol


@dataclass(frozen=True)
class Option:
    label: str
    ref: Any = None


@dataclass
class Choice:
    question: str
    default: str
    options: list[Option] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "question": self.question,
            "default": self.default,
            "options": [o.label for o in self.options],
        }


class ConflictResolver(Protocol):
    def choose(self, choice: Choice) -> int | None: ...


class ChoicePending(Exception):
    """Raised by a resolver that cannot answer right now."""

    def __init__(self, choice: Choice):
        super().__init__(choice.question)
        self.choice = choice


class ScriptedResolver:
    """
    Replays answers given up front, e.g. collected from an HTTP client.

    Once the answers run out the next question raises ChoicePending, which the
    store reports back as a needs-choice outcome.
    """

    def __init__(self, answers: list[int | None] | None = None):
        self.answers = list(answers or [])
        self.asked: list[Choice] = []

    def choose(self, choice: Choice) -> int | None:
        self.asked.append(choice)
        if not self.answers:
            raise ChoicePending(choice)
        answer = self.answers.pop(0)
        if answer is not None and not 0 <= answer < len(choice.options):
            # out of range is treated like the default answer
            return None
        return answer


class DeclineResolver:
    """Always takes the default answer."""

    def choose(self, choice: Choice) -> int | None:
        return None
