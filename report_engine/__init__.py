"""
Report Engine domain

REST facade that turns declarative report configuration (title, tables,
charts, datasets) into a report design template and an output artifact.
Rendering is provided by MockReportRenderer until a real engine is attached.
"""

from .renderer import MockReportRenderer, ReportRenderer
from .schemas import (
    EXTENDED_OUTPUT_FORMATS,
    OUTPUT_FORMATS,
    ChartConfig,
    ColumnConfig,
    DynamicReportRequest,
    ReportComponents,
    ReportRequest,
    ReportResponse,
    TableConfig,
    TitleSection,
)
from .service import DynamicReportService, GenerationResult, get_report_service
from .validation import field_errors, validate_dynamic_request, validate_report_request

__version__ = "1.0.0"

__all__ = [
    # Schemas
    "DynamicReportRequest",
    "ReportRequest",
    "ReportResponse",
    "ReportComponents",
    "TitleSection",
    "TableConfig",
    "ColumnConfig",
    "ChartConfig",
    "OUTPUT_FORMATS",
    "EXTENDED_OUTPUT_FORMATS",
    # Rendering
    "ReportRenderer",
    "MockReportRenderer",
    # Generation
    "DynamicReportService",
    "GenerationResult",
    "get_report_service",
    # Validation
    "field_errors",
    "validate_dynamic_request",
    "validate_report_request",
]
