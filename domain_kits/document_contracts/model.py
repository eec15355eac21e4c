"""Document and contract value types.

All types are frozen. Documents and contracts hold frozensets, so insertion
order never matters. Name uniqueness is expected but not enforced: a document
may hold two parts called "Body" and a contract may hold two requirements for
the same part name.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, FrozenSet, Iterable

if TYPE_CHECKING:
    from .constraints import Constraint


@dataclass(frozen=True)
class Part:
    name: str
    content: str


@dataclass(frozen=True)
class Document:
    parts: FrozenSet[Part] = field(default_factory=frozenset)

    def __post_init__(self):
        # Accept any iterable of parts
        if not isinstance(self.parts, frozenset):
            object.__setattr__(self, "parts", frozenset(self.parts))

    @classmethod
    def of(cls, *parts: Part) -> "Document":
        return cls(parts=frozenset(parts))

    def part_names(self) -> FrozenSet[str]:
        return frozenset(p.name for p in self.parts)


@dataclass(frozen=True)
class PartRequirement:
    part_name: str
    constraint: "Constraint"

    def matches(self, part: Part) -> bool:
        return part.name == self.part_name

    def describe(self) -> str:
        return f"'{self.part_name}' must satisfy {self.constraint.describe()}"


@dataclass(frozen=True)
class Contract:
    requirements: FrozenSet[PartRequirement] = field(default_factory=frozenset)

    def __post_init__(self):
        if not isinstance(self.requirements, frozenset):
            object.__setattr__(self, "requirements", frozenset(self.requirements))

    @classmethod
    def of(cls, *requirements: PartRequirement) -> "Contract":
        return cls(requirements=frozenset(requirements))

    @classmethod
    def from_pairs(cls, pairs: Iterable) -> "Contract":
        """Build a contract from ``(part_name, constraint)`` pairs."""
        return cls(requirements=frozenset(PartRequirement(name, c) for name, c in pairs))
