"""Constraints a document part can be judged against.

A constraint is anything with ``is_satisfied``, ``evaluate`` and ``describe``.
Variants are independent frozen dataclasses; they only classify and never
raise while judging a part. ``evaluate`` returns an empty list exactly when
``is_satisfied`` is true.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, List, Protocol, Tuple, runtime_checkable

from .model import Part
from .violations import ContractViolation


@runtime_checkable
class Constraint(Protocol):
    def is_satisfied(self, part: Part) -> bool:
        ...

    def evaluate(self, part: Part) -> List[ContractViolation]:
        """Return the violations for ``part``; empty means satisfied."""
        ...

    def describe(self) -> str:
        ...


def word_count(text: str) -> int:
    """Count whitespace-delimited words.

    Runs of whitespace count as one separator and leading/trailing whitespace
    adds nothing, so empty or blank text has zero words.
    """
    return len((text or "").split())


@dataclass(frozen=True)
class SizeLimit:
    """Word-count bound: satisfied iff the part has fewer than ``max`` words."""

    max: int

    def __post_init__(self):
        if isinstance(self.max, bool) or not isinstance(self.max, int):
            raise TypeError(f"SizeLimit max must be an int, got {type(self.max).__name__}")
        if self.max <= 0:
            raise ValueError(f"SizeLimit max must be positive, got {self.max}")

    def is_satisfied(self, part: Part) -> bool:
        return word_count(part.content) < self.max

    def evaluate(self, part: Part) -> List[ContractViolation]:
        count = word_count(part.content)
        if count < self.max:
            return []
        return [
            ContractViolation.constraint_violation(
                f"Part '{part.name}' has {count} words, not valid according to {self.describe()}"
            )
        ]

    def describe(self) -> str:
        return f"SizeLimit(max={self.max})"


@dataclass(frozen=True)
class RequiredPattern:
    """Satisfied iff ``pattern`` is found somewhere in the part content."""

    pattern: str
    _compiled: Any = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        # re.error surfaces here, never during evaluation
        object.__setattr__(self, "_compiled", re.compile(self.pattern))

    def is_satisfied(self, part: Part) -> bool:
        return self._compiled.search(part.content or "") is not None

    def evaluate(self, part: Part) -> List[ContractViolation]:
        if self.is_satisfied(part):
            return []
        return [
            ContractViolation.constraint_violation(
                f"Part '{part.name}' not valid according to {self.describe()}"
            )
        ]

    def describe(self) -> str:
        return f"RequiredPattern(pattern={self.pattern!r})"


@dataclass(frozen=True)
class AllOf:
    """Composite constraint.

    Every member is evaluated, so a part failing two members yields two
    violations. An empty ``AllOf`` is always satisfied.
    """

    constraints: Tuple[Constraint, ...] = ()

    def __post_init__(self):
        if not isinstance(self.constraints, tuple):
            object.__setattr__(self, "constraints", tuple(self.constraints))

    def is_satisfied(self, part: Part) -> bool:
        return all(c.is_satisfied(part) for c in self.constraints)

    def evaluate(self, part: Part) -> List[ContractViolation]:
        violations: List[ContractViolation] = []
        for constraint in self.constraints:
            violations.extend(constraint.evaluate(part))
        return violations

    def describe(self) -> str:
        return "AllOf(" + ", ".join(c.describe() for c in self.constraints) + ")"
