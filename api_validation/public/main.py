"""
FastAPI application for the document contracts API.

Thin HTTP wrapper around domain_kits/document_contracts. The validation
itself is pure; this module only wires logging, tracing and error envelopes.

Features:
- Trace ID per request (X-Request-ID echoed, injected into every log line)
- Audit logging (request ID, payload hash, latency, status)
- Uniform ErrorResponse envelope for HTTP and request validation errors
"""
from fastapi import FastAPI, status, Request, HTTPException
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
import logging
import uuid
import time
from contextvars import ContextVar

from api_validation.public.routes import health
from api_validation.public.middleware.audit_logging import AuditLoggingMiddleware
from api_validation.public.settings import settings

# Context var for trace_id (used in logging)
trace_id_ctx: ContextVar[str] = ContextVar('trace_id', default='-')


# Logging filter to inject trace_id into all log records
class TraceIdFilter(logging.Filter):
    def filter(self, record):
        record.trace_id = trace_id_ctx.get()
        return True


root_logger = logging.getLogger()
if not root_logger.handlers:
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format='[%(trace_id)s] %(message)s',
    )

for handler in logging.root.handlers:
    if not any(isinstance(f, TraceIdFilter) for f in handler.filters):
        handler.addFilter(TraceIdFilter())

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Document Contracts API",
    description="Validate documents against contracts of per-part constraints, reporting every violation.",
    version=settings.api_version,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json"
)

if settings.enable_documents_api:
    from api_validation.public.routes.documents import router as documents_router
    app.include_router(documents_router)

app.include_router(health.router)


@app.get("/")
def root():
    return {"name": "Document Contracts API", "status": "running"}


# Trace ID middleware (sets request.state.trace_id and adds response headers)
@app.middleware("http")
async def add_trace_id_middleware(request: Request, call_next):
    # Reuse the id assigned by the audit layer when the client sent none
    trace_id = request.headers.get("X-Request-ID") or getattr(request.state, "trace_id", None) or str(uuid.uuid4())
    request.state.trace_id = trace_id

    token = trace_id_ctx.set(trace_id)
    try:
        start = time.perf_counter()
        response = await call_next(request)
        process_time = time.perf_counter() - start

        response.headers["X-Request-ID"] = trace_id
        response.headers["X-Process-Time"] = str(process_time)
        return response
    finally:
        trace_id_ctx.reset(token)


if settings.enable_audit_logging:
    app.add_middleware(AuditLoggingMiddleware)


def _trace_id_for(request: Request) -> str:
    return getattr(request.state, "trace_id", None) or request.headers.get("X-Request-ID") or str(uuid.uuid4())


# HTTPException handler (wraps all HTTPException into ErrorResponse format)
@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    if isinstance(exc.detail, dict):
        err = exc.detail
    else:
        err = {"code": str(exc.detail), "message": str(exc.detail)}

    return JSONResponse(
        status_code=exc.status_code,
        content={
            "trace_id": _trace_id_for(request),
            "status": "error",
            "error": err,
        },
    )


# RequestValidationError handler (wraps 422 validation errors into ErrorResponse format)
@app.exception_handler(RequestValidationError)
async def request_validation_exception_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=422,
        content={
            "trace_id": _trace_id_for(request),
            "status": "error",
            "error": {
                "code": "REQUEST_VALIDATION_ERROR",
                "message": "Request validation failed",
                "detail": jsonable_encoder(exc.errors()),
            },
        },
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "trace_id": _trace_id_for(request),
            "status": "error",
            "error": {
                "code": "INTERNAL_ERROR",
                "message": "An unexpected error occurred."
            }
        }
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "api_validation.public.main:app",
        host="0.0.0.0",
        port=settings.port,
        reload=settings.environment == "development"
    )
