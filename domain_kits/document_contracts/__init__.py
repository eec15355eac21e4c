# Document Contracts Domain Kit
# Validate documents against contracts of per-part constraints,
# reporting every violation instead of stopping at the first one

from .model import Part, Document, PartRequirement, Contract
from .constraints import Constraint, SizeLimit, RequiredPattern, AllOf, word_count
from .violations import ContractViolation, ViolationKind, ViolationTaxonomy
from .lookup import Found, NotFound, find_part
from .engine import ValidationReport, evaluate_requirement, iter_violations, summarize, validate

__all__ = [
    'Part', 'Document', 'PartRequirement', 'Contract',
    'Constraint', 'SizeLimit', 'RequiredPattern', 'AllOf', 'word_count',
    'ContractViolation', 'ViolationKind', 'ViolationTaxonomy',
    'Found', 'NotFound', 'find_part',
    'ValidationReport', 'evaluate_requirement', 'iter_violations', 'summarize', 'validate',
]
__version__ = '1.0.0'
