"""FastAPI REST API for running acctestlint checks."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field
from typing import Optional

from . import __version__
from .errors import (
    AcctestlintError,
    AnalyzerNotFoundError,
    UnsupportedLanguageError,
)
from .registry import all_analyzers, get_analyzer, supported_analyzers
from .runner import check_source


# --- Pydantic Schemas ---


class AnalyzerSchema(BaseModel):
    name: str
    doc: str


class AnalyzerListResponse(BaseModel):
    analyzers: list[AnalyzerSchema]


class CheckRequest(BaseModel):
    """Source of one file to check."""

    path: str = Field(..., description="File name; its extension selects the front end")
    source: str = Field(..., description="Complete file content")
    analyzers: Optional[list[str]] = Field(
        None, description="Analyzer names to run (default: all)"
    )


class FindingSchema(BaseModel):
    path: str
    line: int
    column: int
    offset: int
    message: str


class CheckResponse(BaseModel):
    findings: list[FindingSchema]
    count: int
    has_parse_error: bool


# --- FastAPI App ---


app = FastAPI(
    title="acctestlint API",
    description="REST API for checking Terraform acceptance tests",
    version=__version__,
)


# --- Global Exception Handler ---


# Map exception types to HTTP status codes
ERROR_STATUS_CODES: dict[type, int] = {
    UnsupportedLanguageError: 400,
    AnalyzerNotFoundError: 404,
}


@app.exception_handler(AcctestlintError)
async def acctestlint_error_handler(request: Request, exc: AcctestlintError) -> JSONResponse:
    """Map AcctestlintError subclasses to appropriate HTTP responses."""
    status_code = ERROR_STATUS_CODES.get(type(exc), 500)
    return JSONResponse(
        status_code=status_code,
        content={"detail": str(exc), "error_type": type(exc).__name__},
    )


# --- Endpoints ---


@app.get("/api/health")
def health_check():
    """Health check endpoint."""
    return {
        "status": "ok",
        "version": __version__,
        "analyzers": supported_analyzers(),
    }


@app.get("/api/analyzers", response_model=AnalyzerListResponse)
def list_analyzers():
    """List registered analyzers."""
    return AnalyzerListResponse(
        analyzers=[AnalyzerSchema(name=a.name, doc=a.doc) for a in all_analyzers()]
    )


@app.post("/api/check", response_model=CheckResponse)
def check(request: CheckRequest):
    """Check the source of a single file."""
    analyzers = None
    if request.analyzers is not None:
        analyzers = [get_analyzer(name) for name in request.analyzers]

    result = check_source(request.source, request.path, analyzers=analyzers)
    return CheckResponse(
        findings=[FindingSchema(**f.to_dict()) for f in result.findings],
        count=len(result.findings),
        has_parse_error=result.has_parse_error,
    )
