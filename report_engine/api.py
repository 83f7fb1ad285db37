"""
FastAPI endpoints for report generation

Provides REST API for dynamic report generation, simulated simple
generation, status tracking, download, template listing and deletion.
"""
import platform
import time
import uuid

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse, PlainTextResponse

from core.config import get_settings
from core.exceptions import ArtifactWriteError, ValidationError
from core.logging import get_logger
from core.metrics import metrics

from .schemas import (
    DeleteResponse,
    DynamicReportRequest,
    HealthResponse,
    ReportRequest,
    ReportResponse,
    ReportStatusResponse,
    TemplateListResponse,
)
from .service import DynamicReportService, get_report_service

# Initialize logger
logger = get_logger("reports_api", domain="reports")

# Create router
router = APIRouter(prefix="/api/reports", tags=["Report Generation"])

GENERATION_RESPONSES = {
    400: {"model": ReportResponse, "description": "Invalid request parameters"},
    500: {"model": ReportResponse, "description": "Internal server error during report generation"},
}


def _elapsed_ms(start_time: float) -> int:
    return int((time.perf_counter() - start_time) * 1000)


def _download_url(report_id: str) -> str:
    return f"{get_settings().download_base_path.rstrip('/')}/{report_id}"


def _failure(error: str) -> JSONResponse:
    return JSONResponse(status_code=500, content=ReportResponse.failed(error).to_payload())


@router.post(
    "/generate-dynamic",
    response_model=ReportResponse,
    response_model_exclude_none=True,
    responses=GENERATION_RESPONSES,
    summary="Generate dynamic report from library",
)
def generate_dynamic_report(
    request: DynamicReportRequest, service: DynamicReportService = Depends(get_report_service)
):
    """
    Build a report design from library components (datasources, datasets,
    parameters, tables and charts) and produce its output artifact.
    """
    logger.info(f"Generating dynamic report from library: {request.library_path}")
    start_time = time.perf_counter()

    try:
        result = service.generate_dynamic_report(request)
    except ValidationError:
        raise
    except ArtifactWriteError as e:
        logger.error(f"Error writing dynamic report artifacts: {e.message}")
        metrics.track_generation("dynamic", time.perf_counter() - start_time, status="failed")
        return _failure(f"Failed to generate dynamic report: {e.cause}")
    except Exception as e:
        logger.exception(f"Error generating dynamic report: {str(e)}")
        metrics.track_generation("dynamic", time.perf_counter() - start_time, status="error")
        return _failure(f"Failed to generate dynamic report: {str(e)}")

    generation_time = _elapsed_ms(start_time)
    metrics.track_generation("dynamic", generation_time / 1000)
    logger.info(f"Dynamic report generated successfully: {result.report_id} in {generation_time}ms")

    return ReportResponse.succeeded(
        report_id=result.report_id,
        output_path=result.output_path,
        output_format=result.output_format,
        time_ms=generation_time,
        download_url=_download_url(result.report_id),
    )


@router.post(
    "/generate",
    response_model=ReportResponse,
    response_model_exclude_none=True,
    responses=GENERATION_RESPONSES,
    summary="Generate a new report",
)
def generate_report(request: ReportRequest, service: DynamicReportService = Depends(get_report_service)):
    """Simulated generation: no artifact is written, a success envelope is returned"""
    logger.info(f"Generating report: {request.report_name} in format: {request.output_format}")

    report_id = str(uuid.uuid4())
    start_time = time.perf_counter()

    # Simulate processing time
    time.sleep(get_settings().simulated_generation_ms / 1000)

    generation_time = _elapsed_ms(start_time)
    metrics.track_generation("simple", generation_time / 1000)
    logger.info(f"Report generated successfully: {report_id}")

    return ReportResponse.succeeded(
        report_id=report_id,
        output_path=service.output_path_for(report_id, request.output_format),
        output_format=request.output_format,
        time_ms=generation_time,
        download_url=_download_url(report_id),
    )


@router.get("/status/{report_id}", response_model=ReportStatusResponse, summary="Get report status")
def get_report_status(report_id: str):
    """Generation is synchronous, so every report reports as completed"""
    logger.info(f"Checking status for report: {report_id}")
    return ReportStatusResponse(
        report_id=report_id,
        status="COMPLETED",
        progress=100,
        message="Report generation completed",
    )


@router.get("/download/{report_id}", response_class=PlainTextResponse, summary="Download generated report")
def download_report(report_id: str):
    logger.info(f"Downloading report: {report_id}")
    return PlainTextResponse(f"Report download would happen here. Report ID: {report_id}")


@router.get("/templates", response_model=TemplateListResponse, summary="List available report templates")
def list_templates():
    logger.info("Listing available report templates")
    templates = list(get_settings().available_templates)
    return TemplateListResponse(templates=templates, count=len(templates))


@router.get("/health", response_model=HealthResponse, summary="Health check")
def health_check():
    current = get_settings()
    return HealthResponse(
        status="UP",
        service=current.service_name,
        version=current.app_version,
        python=platform.python_version(),
    )


@router.delete("/{report_id}", response_model=DeleteResponse, summary="Delete a report")
def delete_report(report_id: str):
    """Acknowledge deletion; artifacts are not tracked, so nothing is removed"""
    logger.info(f"Deleting report: {report_id}")
    return DeleteResponse(message="Report deleted successfully", report_id=report_id)
