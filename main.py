"""
Report Engine API application

Wires the reports router, error envelopes, request metrics and the
Prometheus endpoint into one FastAPI app. Run with `python main.py` or
`reportengine runserver`.
"""
import time

import uvicorn
from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from core.config import get_settings, settings
from core.exceptions import ReportEngineError, ValidationError
from core.logging import get_logger
from core.metrics import get_metrics_response, metrics
from report_engine.api import router as reports_router
from report_engine.schemas import ReportResponse
from report_engine.validation import field_errors

logger = get_logger(__name__)

UNTRACKED_PATHS = {"/metrics"}

app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description=(
        "Report generation API. Builds report designs from library components and "
        "produces output in PDF, HTML, Excel, Word, PowerPoint and XML formats."
    ),
    contact={"name": "Report Engine Team"},
    license_info={"name": "MIT License", "url": "https://choosealicense.com/licenses/mit/"},
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def track_requests(request: Request, call_next):
    """Record count and latency per route"""
    if request.url.path in UNTRACKED_PATHS:
        return await call_next(request)

    started = time.perf_counter()
    response = await call_next(request)

    # Route template, not the raw path, keeps report ids out of the labels
    route = request.scope.get("route")
    metrics.track_request(
        method=request.method,
        endpoint=getattr(route, "path", request.url.path),
        status=response.status_code,
        duration=time.perf_counter() - started,
    )
    return response


def _invalid(errors) -> JSONResponse:
    return JSONResponse(status_code=400, content=ReportResponse.invalid(errors).to_payload())


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    """Reject invalid request bodies with every offending field"""
    errors = field_errors(exc)
    logger.warning(f"Validation failed - path: {request.url.path}, fields: {list(errors)}")
    return _invalid(errors)


@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    logger.warning(f"Validation failed - path: {request.url.path}, fields: {exc.fields}")
    return _invalid(exc.field_errors)


@app.exception_handler(ReportEngineError)
async def report_engine_error_handler(request: Request, exc: ReportEngineError):
    logger.error(
        f"Report engine error - error_code: {exc.error_code}, details: {exc.details}, path: {request.url.path}"
    )
    return JSONResponse(status_code=exc.status_code, content=ReportResponse.failed(exc.message).to_payload())


@app.exception_handler(ValueError)
async def value_error_handler(request: Request, exc: ValueError):
    """Bad argument raised below the request models"""
    logger.warning(f"Invalid argument - path: {request.url.path}, error: {exc}")
    return JSONResponse(
        status_code=400,
        content=ReportResponse.failed(str(exc), message="Invalid argument").to_payload(),
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """Generic 500 envelope carrying the exception message; the traceback stays in the server log"""
    logger.exception(f"Unexpected error - path: {request.url.path}", exc_info=exc)
    return JSONResponse(
        status_code=500,
        content=ReportResponse.failed(str(exc), message="Internal server error").to_payload(),
    )


@app.get("/metrics", include_in_schema=False)
async def prometheus_metrics():
    if not get_settings().prometheus_enabled:
        return JSONResponse(status_code=404, content={"error": "Metrics not enabled"})

    payload, content_type = get_metrics_response()
    return Response(content=payload, media_type=content_type)


@app.on_event("startup")
async def startup_event():
    current = get_settings()
    logger.info(
        f"Starting {current.app_name} version={current.app_version} environment={current.environment} "
        f"template_dir={current.template_dir} output_dir={current.output_dir}"
    )


@app.on_event("shutdown")
async def shutdown_event():
    logger.info(f"Shutting down {settings.app_name}")


app.include_router(reports_router)


if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=8080,
        reload=settings.is_development,
        log_level=settings.log_level.lower(),
    )
