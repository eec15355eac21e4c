"""
Pydantic models for request/response validation.
These define the exact contract between client and API.
"""
from pydantic import BaseModel, Field
from typing import Annotated, Any, Dict, List, Literal, Optional, Union


class PartModel(BaseModel):
    """One named part of a document."""
    name: str = Field(..., min_length=1, description="Part name, e.g. 'Introduction'")
    content: str = Field("", description="Textual content of the part")


class DocumentModel(BaseModel):
    parts: List[PartModel] = Field(default_factory=list, description="Parts in any order")


class SizeLimitSpec(BaseModel):
    type: Literal["size_limit"] = "size_limit"
    max: int = Field(..., gt=0, description="Exclusive upper bound on word count")


class PatternSpec(BaseModel):
    type: Literal["pattern"] = "pattern"
    pattern: str = Field(
        ...,
        min_length=1,
        description=(
            "Regular expression that must be found in the content (Python re syntax). "
            "Length is capped by MAX_PATTERN_LENGTH; matching cost is not otherwise bounded."
        ),
    )


class AllOfSpec(BaseModel):
    type: Literal["all_of"] = "all_of"
    constraints: List["ConstraintSpec"] = Field(default_factory=list, description="Every member must hold")


ConstraintSpec = Annotated[
    Union[SizeLimitSpec, PatternSpec, AllOfSpec],
    Field(discriminator="type"),
]
AllOfSpec.model_rebuild()


class RequirementModel(BaseModel):
    part_name: str = Field(..., min_length=1, description="Name of the required part")
    constraint: ConstraintSpec


class ContractModel(BaseModel):
    requirements: List[RequirementModel] = Field(
        default_factory=list,
        description=(
            "Requirements in any order. Identical requirements (same part_name and constraint) "
            "are merged and evaluated once, so summary.total_checks counts distinct requirements."
        ),
    )


class DocumentValidateRequest(BaseModel):
    """Validate one document against one contract."""
    document: DocumentModel
    contract: ContractModel
    api_version: str = Field("1.0", description="Client API version")


class ViolationModel(BaseModel):
    kind: Literal["PART_MISSING", "CONSTRAINT_VIOLATION"] = Field(..., description="Violation discriminator")
    message: str = Field(..., description="Human-readable description")
    severity: str = Field(..., description="Severity from the violation taxonomy")


class SummaryStats(BaseModel):
    """Summary of validation results."""
    pass_rate: float = Field(..., ge=0, le=1, description="Fraction of requirements satisfied (0–1)")
    total_checks: int = Field(..., ge=0, description="Number of requirements evaluated")
    failed_checks: int = Field(..., ge=0, description="Number of requirements with at least one violation")
    missing_parts: int = Field(..., ge=0, description="Number of PART_MISSING violations")
    constraint_violations: int = Field(..., ge=0, description="Number of CONSTRAINT_VIOLATION violations")


class DocumentValidateResponse(BaseModel):
    trace_id: str = Field(..., description="Unique request ID for audit trail")
    request_id: Optional[str] = Field(None, description="Echo of X-Request-ID header for tracing")
    status: str = Field(..., description="Always 'ok' when validation ran, even if violations were found")
    valid: bool = Field(..., description="True when the document fulfils the contract")
    summary: SummaryStats
    violations: List[ViolationModel] = Field(default_factory=list, description="Every violation found, unordered")


class ConstraintTypeInfo(BaseModel):
    type: str
    description: str
    parameters: Dict[str, str] = Field(default_factory=dict)


class ErrorResponse(BaseModel):
    """Standard error response."""
    trace_id: str = Field(..., description="Unique request ID")
    status: str = Field(default="error", description="Always 'error'")
    error: Dict[str, Any] = Field(..., description="Error details with 'code', 'message', optional 'detail'")


class HealthResponse(BaseModel):
    """Health check response."""
    status: str = Field(..., description="'ok' if healthy")
    service: str = Field(..., description="Service name")
    version: str = Field(..., description="API version")
    commit: str = Field(..., description="Git commit hash")
    timestamp: str = Field(..., description="Server time (ISO8601)")
