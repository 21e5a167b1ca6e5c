"""Violations and the rule driver that collects them.

A rule is a named function returning zero or more violations.  Rules for
one value shape are kept as an ordered list and always run in full: the
driver never stops at the first failure.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

from pydantic import BaseModel, Field

from nestform.domain.messages import MessageId

PathSegment = str | int
Path = tuple[PathSegment, ...]

T = TypeVar("T")


class Violation(BaseModel):
    """One failed rule, addressed by a path into the document."""

    model_config = {"frozen": True}

    path: Path
    message: str
    code: MessageId

    @property
    def dotted_path(self) -> str:
        return ".".join(str(segment) for segment in self.path)

    def under(self, *prefix: PathSegment) -> Violation:
        """Return a copy re-rooted beneath *prefix*."""
        return self.model_copy(update={"path": (*prefix, *self.path)})


@dataclass(frozen=True)
class Rule(Generic[T]):
    """A named check over a subject of type ``T``."""

    name: str
    check: Callable[[T], Iterable[Violation]]

    def __call__(self, subject: T) -> list[Violation]:
        return list(self.check(subject))


def run_rules(rules: Sequence[Rule[T]], subject: T) -> list[Violation]:
    """Run every rule against *subject* and concatenate the results in order."""
    violations: list[Violation] = []
    for rule in rules:
        violations.extend(rule(subject))
    return violations


def prefixed(prefix: Sequence[PathSegment], violations: Iterable[Violation]) -> list[Violation]:
    """Re-root each violation beneath *prefix*."""
    return [v.under(*prefix) for v in violations]


class ValidationReport(BaseModel):
    """Outcome of validating a param or a whole form."""

    model_config = {"frozen": True}

    violations: list[Violation] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.violations

    def messages_at(self, *path: PathSegment) -> list[str]:
        """Messages whose path is exactly *path*."""
        return [v.message for v in self.violations if v.path == path]

    def to_dict(self) -> dict[str, object]:
        return {
            "ok": self.ok,
            "violations": [
                {"path": list(v.path), "message": v.message, "code": str(v.code)}
                for v in self.violations
            ],
        }
