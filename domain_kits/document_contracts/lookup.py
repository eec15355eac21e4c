"""Locate the part a requirement refers to.

The result is a value, ``Found`` or ``NotFound``; a missing part is an
ordinary outcome and is never signalled with an exception.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .model import Document, Part, PartRequirement


@dataclass(frozen=True)
class Found:
    part: Part


@dataclass(frozen=True)
class NotFound:
    part_name: str


LookupResult = Union[Found, NotFound]


def find_part(document: Document, requirement: PartRequirement) -> LookupResult:
    """Return the first part matching ``requirement.part_name``.

    If several parts share the name, which one is returned is unspecified
    (it follows the document's set iteration order).
    """
    for part in document.parts:
        if requirement.matches(part):
            return Found(part)
    return NotFound(requirement.part_name)
