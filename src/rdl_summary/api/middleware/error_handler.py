"""Global exception handlers mapping domain exceptions to HTTP responses."""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from rdl_summary.exceptions import (
    CandidateValidationError,
    InputValidationError,
    RDLSummaryError,
    SummaryNotFoundError,
)


def register_error_handlers(app: FastAPI) -> None:
    """Register exception-to-HTTP-status mappings."""

    @app.exception_handler(InputValidationError)
    async def handle_input_error(request: Request, exc: InputValidationError) -> JSONResponse:
        content: dict[str, object] = {"error": str(exc), "type": "input_validation_error"}
        if isinstance(exc, CandidateValidationError):
            content["details"] = exc.errors
        return JSONResponse(status_code=422, content=content)

    @app.exception_handler(SummaryNotFoundError)
    async def handle_not_found(request: Request, exc: SummaryNotFoundError) -> JSONResponse:
        return JSONResponse(status_code=404, content={"error": str(exc), "type": "not_found"})

    @app.exception_handler(RDLSummaryError)
    async def handle_generic_error(request: Request, exc: RDLSummaryError) -> JSONResponse:
        return JSONResponse(status_code=500, content={"error": str(exc), "type": "rdl_summary_error"})
