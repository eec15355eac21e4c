"""
Contract violations.

A violation is plain data: validation never raises to report a failure.
Downstream consumers branch on ``ContractViolation.kind``.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict


class ViolationKind(str, Enum):
    PART_MISSING = "PART_MISSING"
    CONSTRAINT_VIOLATION = "CONSTRAINT_VIOLATION"


@dataclass(frozen=True)
class ContractViolation:
    kind: ViolationKind
    message: str

    @classmethod
    def part_missing(cls, message: str) -> "ContractViolation":
        return cls(kind=ViolationKind.PART_MISSING, message=message)

    @classmethod
    def constraint_violation(cls, message: str) -> "ContractViolation":
        return cls(kind=ViolationKind.CONSTRAINT_VIOLATION, message=message)

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind.value, "message": self.message}


class ViolationTaxonomy:
    """Describe violation kinds in reviewer-facing language.

    Every kind carries:
    - severity: 'critical' | 'high'
    - pattern: what went wrong
    - example: a concrete instance
    - impact: what it means for the document
    """

    CATEGORIES = {
        ViolationKind.PART_MISSING: {
            'severity': 'critical',
            'pattern': 'A part required by the contract is absent from the document',
            'example': 'Contract requires "Conclusion" but the document only has Introduction and Body',
            'impact': 'Document is incomplete; a mandated part must be written before acceptance',
        },
        ViolationKind.CONSTRAINT_VIOLATION: {
            'severity': 'high',
            'pattern': 'A required part is present but its content breaks the attached constraint',
            'example': 'Body has 24 words but the contract limits it to fewer than 10',
            'impact': 'Part exists but must be revised to satisfy the contract',
        },
    }

    @classmethod
    def classify(cls, kind) -> dict:
        """
        Retrieve category info for a violation kind.

        Args:
            kind: A ViolationKind or its literal string value

        Returns:
            Dict with severity, pattern, example, impact
        """
        try:
            key = ViolationKind(kind)
        except ValueError:
            return {
                'severity': 'unknown',
                'pattern': 'Unknown violation kind',
                'example': '',
                'impact': 'See logs for details',
            }
        return cls.CATEGORIES[key]

    @classmethod
    def all_kinds(cls) -> list:
        """Return the literal values of every violation kind."""
        return [kind.value for kind in cls.CATEGORIES]

    @classmethod
    def severity_level(cls, kind) -> str:
        return cls.classify(kind).get('severity', 'unknown')
