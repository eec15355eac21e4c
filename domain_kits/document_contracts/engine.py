"""Validation engine.

Every requirement of a contract is evaluated on its own and the resulting
violations are concatenated. A missing part or a failed constraint is
appended to the result like any other outcome; evaluation never aborts early
and never raises.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Tuple
import logging

from .lookup import Found, find_part
from .model import Contract, Document, PartRequirement
from .violations import ContractViolation, ViolationKind

logger = logging.getLogger(__name__)


def _missing_part(requirement: PartRequirement) -> ContractViolation:
    return ContractViolation.part_missing(
        f"Document does not contain part '{requirement.part_name}' "
        f"required by contract requirement {requirement.describe()}"
    )


def evaluate_requirement(document: Document, requirement: PartRequirement) -> List[ContractViolation]:
    """Judge one requirement in isolation.

    Total: always returns a list, one PART_MISSING entry when the part is
    absent, otherwise whatever the requirement's constraint reports.
    """
    result = find_part(document, requirement)
    if isinstance(result, Found):
        violations = list(requirement.constraint.evaluate(result.part))
    else:
        violations = [_missing_part(requirement)]
    logger.debug(
        "requirement part=%s constraint=%s violations=%d",
        requirement.part_name,
        requirement.constraint.describe(),
        len(violations),
    )
    return violations


def iter_violations(document: Document, contract: Contract) -> Iterator[ContractViolation]:
    """Yield violations lazily, one requirement at a time.

    A requirement is evaluated only when the consumer pulls past the previous
    one's violations. Fully consuming the iterator evaluates every requirement
    exactly once and yields the same multiset as ``validate``; stopping early
    leaves later requirements unevaluated, so a partial read is not a
    representative result.
    """
    for requirement in contract.requirements:
        yield from evaluate_requirement(document, requirement)


def validate(document: Document, contract: Contract) -> List[ContractViolation]:
    """Evaluate every requirement of ``contract`` against ``document``.

    Returns the concatenation of all per-requirement violations. Ordering is
    not meaningful. An empty list means the document fulfils the contract.
    """
    violations: List[ContractViolation] = []
    for requirement in contract.requirements:
        violations.extend(evaluate_requirement(document, requirement))
    return violations


@dataclass(frozen=True)
class ValidationReport:
    total_requirements: int
    failed_requirements: int
    violations: Tuple[ContractViolation, ...]

    @property
    def is_valid(self) -> bool:
        return not self.violations

    @property
    def missing_parts(self) -> int:
        return sum(1 for v in self.violations if v.kind is ViolationKind.PART_MISSING)

    @property
    def constraint_violations(self) -> int:
        return sum(1 for v in self.violations if v.kind is ViolationKind.CONSTRAINT_VIOLATION)

    @property
    def pass_rate(self) -> float:
        total = self.total_requirements
        return 0.0 if total == 0 else (total - self.failed_requirements) / total

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_checks": self.total_requirements,
            "failed_checks": self.failed_requirements,
            "pass_rate": self.pass_rate,
            "missing_parts": self.missing_parts,
            "constraint_violations": self.constraint_violations,
            "violations": [v.to_dict() for v in self.violations],
        }


def summarize(document: Document, contract: Contract) -> ValidationReport:
    """Validate and aggregate the outcome into a ``ValidationReport``.

    ``failed_requirements`` counts requirements with at least one violation, so
    a composite constraint failing several members still counts once there.
    """
    violations: List[ContractViolation] = []
    failed = 0
    for requirement in contract.requirements:
        found = evaluate_requirement(document, requirement)
        if found:
            failed += 1
            violations.extend(found)

    report = ValidationReport(
        total_requirements=len(contract.requirements),
        failed_requirements=failed,
        violations=tuple(violations),
    )
    logger.info(
        "document validated requirements=%d failed=%d missing=%d constraint=%d",
        report.total_requirements,
        report.failed_requirements,
        report.missing_parts,
        report.constraint_violations,
    )
    return report
