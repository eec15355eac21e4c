"""Document contract endpoints.

Validates a document against a contract of per-part constraints using the
document contracts kit (domain_kits/document_contracts).

A document that breaks its contract is still a successful call: violations
come back as data with status='ok' and valid=false. HTTP errors are reserved
for malformed requests.
"""

import logging
import re
import uuid

from fastapi import APIRouter, HTTPException, Request

from api_validation.public.schemas import (
    ConstraintTypeInfo,
    DocumentValidateRequest,
    DocumentValidateResponse,
    SummaryStats,
    ViolationModel,
)
from api_validation.public.settings import settings

from domain_kits.document_contracts import (
    AllOf,
    Contract,
    Document,
    Part,
    PartRequirement,
    RequiredPattern,
    SizeLimit,
    ViolationTaxonomy,
    summarize,
)

router = APIRouter(tags=["documents"])

logger = logging.getLogger(__name__)


CONSTRAINT_TYPES = [
    ConstraintTypeInfo(
        type="size_limit",
        description="Part must have fewer than `max` whitespace-delimited words.",
        parameters={"max": "positive integer (exclusive upper bound)"},
    ),
    ConstraintTypeInfo(
        type="pattern",
        description="Regular expression must be found somewhere in the part content.",
        parameters={"pattern": "regular expression"},
    ),
    ConstraintTypeInfo(
        type="all_of",
        description="Every member constraint must hold; each failed member is reported.",
        parameters={"constraints": "list of constraint specs"},
    ),
]


def build_constraint(spec):
    """Turn a validated constraint spec into a domain constraint."""
    if spec.type == "size_limit":
        return SizeLimit(spec.max)
    if spec.type == "pattern":
        if len(spec.pattern) > settings.max_pattern_length:
            raise ValueError(f"pattern is {len(spec.pattern)} characters; limit is {settings.max_pattern_length}")
        return RequiredPattern(spec.pattern)
    return AllOf(tuple(build_constraint(member) for member in spec.constraints))


def build_document(model) -> Document:
    return Document(Part(p.name, p.content) for p in model.parts)


def build_contract(model) -> Contract:
    requirements = []
    for idx, req in enumerate(model.requirements):
        try:
            constraint = build_constraint(req.constraint)
        except (re.error, ValueError) as e:
            raise HTTPException(
                status_code=422,
                detail={
                    "code": "INVALID_CONSTRAINT",
                    "message": f"Invalid constraint in requirement {idx} ('{req.part_name}'): {e}",
                    "field": f"contract.requirements.{idx}.constraint",
                },
            ) from e
        requirements.append(PartRequirement(req.part_name, constraint))
    return Contract(requirements)


def _enforce_limits(req_body: DocumentValidateRequest) -> None:
    parts = len(req_body.document.parts)
    requirements = len(req_body.contract.requirements)
    if parts > settings.max_document_parts:
        raise HTTPException(
            status_code=413,
            detail={
                "code": "PAYLOAD_TOO_LARGE",
                "message": f"Document has {parts} parts; limit is {settings.max_document_parts}",
            },
        )
    if requirements > settings.max_contract_requirements:
        raise HTTPException(
            status_code=413,
            detail={
                "code": "PAYLOAD_TOO_LARGE",
                "message": f"Contract has {requirements} requirements; limit is {settings.max_contract_requirements}",
            },
        )


@router.get("/api/documents/constraints")
def list_constraint_types() -> dict:
    return {"constraints": [c.model_dump() for c in CONSTRAINT_TYPES]}


@router.post("/api/documents/validate", response_model=DocumentValidateResponse)
def validate_document(request: Request, req_body: DocumentValidateRequest) -> DocumentValidateResponse:
    """Validate a document against a contract and return every violation found."""

    trace_id = getattr(request.state, "trace_id", None) or str(uuid.uuid4())
    request_id = request.headers.get("X-Request-ID")

    _enforce_limits(req_body)

    document = build_document(req_body.document)
    contract = build_contract(req_body.contract)

    report = summarize(document, contract)

    # Content is never logged, only counts
    logger.info(
        "validate_document parts=%d requirements=%d violations=%d",
        len(document.parts),
        report.total_requirements,
        len(report.violations),
    )

    return DocumentValidateResponse(
        trace_id=trace_id,
        request_id=request_id,
        status="ok",
        valid=report.is_valid,
        summary=SummaryStats(
            pass_rate=report.pass_rate,
            total_checks=report.total_requirements,
            failed_checks=report.failed_requirements,
            missing_parts=report.missing_parts,
            constraint_violations=report.constraint_violations,
        ),
        violations=[
            ViolationModel(
                kind=v.kind.value,
                message=v.message,
                severity=ViolationTaxonomy.severity_level(v.kind),
            )
            for v in report.violations
        ],
    )
