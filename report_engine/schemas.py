"""
Pydantic schemas for the Report Engine API

Request models are immutable once constructed. JSON field names are camelCase
aliases; Python attributes stay snake_case.
"""

from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

OUTPUT_FORMATS: Tuple[str, ...] = ("pdf", "html", "xls", "xlsx", "doc", "docx")
EXTENDED_OUTPUT_FORMATS: Tuple[str, ...] = OUTPUT_FORMATS + ("ppt", "pptx", "xml")


class ChartType(str, Enum):
    """Supported chart types"""

    BAR = "bar"
    LINE = "line"
    PIE = "pie"
    AREA = "area"


class DataType(str, Enum):
    """Column data types"""

    STRING = "string"
    INTEGER = "integer"
    DECIMAL = "decimal"
    DATE = "date"


class Alignment(str, Enum):
    """Horizontal alignment values"""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class PageOrientation(str, Enum):
    PORTRAIT = "portrait"
    LANDSCAPE = "landscape"


class PageSize(str, Enum):
    A4 = "A4"
    LETTER = "Letter"
    LEGAL = "Legal"


def _require_text(value: Optional[str], message: str) -> str:
    if value is None or not value.strip():
        raise ValueError(message)
    return value


def _check_output_format(value: Optional[str], supported: Tuple[str, ...]) -> str:
    value = _require_text(value, "Output format is required")
    if value not in supported:
        raise ValueError(f"Invalid output format. Supported: {', '.join(supported)}")
    return value


class RequestModel(BaseModel):
    """Base for immutable request payloads"""

    model_config = ConfigDict(frozen=True, populate_by_name=True, use_enum_values=True, extra="ignore")


# Component configuration
class TitleSection(RequestModel):
    """Title section configuration"""

    text: Optional[str] = Field(None, description="Report title text", examples=["Monthly Sales Report"])
    font_size: Optional[int] = Field(None, alias="fontSize", ge=1, description="Title font size")
    alignment: Optional[Alignment] = Field(None, description="Title alignment")
    include_date: Optional[bool] = Field(None, alias="includeDate", description="Include date in title")


class ColumnConfig(RequestModel):
    """Column configuration"""

    name: Optional[str] = Field(None, description="Column name from dataset", examples=["product_name"])
    label: Optional[str] = Field(None, description="Display label", examples=["Product Name"])
    width: Optional[int] = Field(None, ge=0, description="Column width in pixels")
    data_type: Optional[DataType] = Field(None, alias="dataType", description="Data type")
    format_pattern: Optional[str] = Field(None, alias="format", description="Format pattern", examples=["#,##0.00"])
    alignment: Optional[Alignment] = Field(None, description="Horizontal alignment")


class TableConfig(RequestModel):
    """Table configuration"""

    dataset_name: Optional[str] = Field(None, alias="datasetName", description="Dataset feeding this table")
    title: Optional[str] = Field(None, description="Table title", examples=["Sales by Region"])
    columns: Optional[List[ColumnConfig]] = Field(None, description="Columns to include in the table")
    enable_grouping: Optional[bool] = Field(None, alias="enableGrouping", description="Enable grouping")
    group_by_column: Optional[str] = Field(None, alias="groupByColumn", description="Group by column name")
    include_totals: Optional[bool] = Field(None, alias="includeTotals", description="Include totals row")


class ChartConfig(RequestModel):
    """Chart configuration"""

    dataset_name: Optional[str] = Field(None, alias="datasetName", description="Dataset feeding this chart")
    title: Optional[str] = Field(None, description="Chart title", examples=["Sales Trend"])
    chart_type: Optional[ChartType] = Field(None, alias="chartType", description="Chart type")
    category_column: Optional[str] = Field(None, alias="categoryColumn", description="Category/X-axis column")
    value_column: Optional[str] = Field(None, alias="valueColumn", description="Value/Y-axis column")
    width: Optional[int] = Field(None, ge=0, description="Chart width in pixels")
    height: Optional[int] = Field(None, ge=0, description="Chart height in pixels")
    show_legend: Optional[bool] = Field(None, alias="showLegend", description="Show legend")


class ReportComponents(RequestModel):
    """Configuration for report components"""

    title: Optional[TitleSection] = None
    tables: Optional[List[TableConfig]] = None
    charts: Optional[List[ChartConfig]] = None
    footer: Optional[str] = Field(None, description="Footer text")
    page_orientation: Optional[PageOrientation] = Field(None, alias="pageOrientation")
    page_size: Optional[PageSize] = Field(None, alias="pageSize")


# Request schemas
class BaseReportRequest(RequestModel):
    """Fields shared by both generation endpoints"""

    report_name: Optional[str] = Field(
        None, alias="reportName", validate_default=True, description="Name for the generated report"
    )
    output_format: Optional[str] = Field(
        None, alias="outputFormat", validate_default=True, description="Output format for the report"
    )
    parameters: Optional[Dict[str, Any]] = Field(None, description="Report parameters and their values")

    @field_validator("report_name")
    @classmethod
    def validate_report_name(cls, v):
        return _require_text(v, "Report name is required")


class DynamicReportRequest(BaseReportRequest):
    """Dynamic report generation request built from library components"""

    library_path: Optional[str] = Field(
        None,
        alias="libraryPath",
        validate_default=True,
        description="Path to the library holding datasources, datasets and parameters",
        examples=["reports/library/common.rptlibrary"],
    )
    data_source_name: Optional[str] = Field(None, alias="dataSourceName", description="Data source from the library")
    dataset_names: Optional[List[str]] = Field(
        None, alias="datasetNames", validate_default=True, description="Dataset names from the library"
    )
    components: Optional[ReportComponents] = Field(None, description="Report components configuration")

    @field_validator("output_format")
    @classmethod
    def validate_output_format(cls, v):
        return _check_output_format(v, OUTPUT_FORMATS)

    @field_validator("library_path")
    @classmethod
    def validate_library_path(cls, v):
        return _require_text(v, "Library path is required")

    @field_validator("dataset_names")
    @classmethod
    def validate_dataset_names(cls, v):
        if not v:
            raise ValueError("At least one dataset is required")
        return v


class ReportRequest(BaseReportRequest):
    """Simple report generation request"""

    output_file_name: Optional[str] = Field(None, alias="outputFileName")
    locale: Optional[str] = Field(None, description="Locale for internationalization", examples=["en_US"])
    page_range: Optional[str] = Field(None, alias="pageRange", description="Page range for PDF output")

    @field_validator("output_format")
    @classmethod
    def validate_output_format(cls, v):
        return _check_output_format(v, EXTENDED_OUTPUT_FORMATS)


# Response schemas
class ResponseModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class ReportResponse(ResponseModel):
    """Success or failure envelope for report generation"""

    success: bool
    message: str
    report_id: Optional[str] = Field(None, alias="reportId")
    output_path: Optional[str] = Field(None, alias="outputPath")
    output_format: Optional[str] = Field(None, alias="outputFormat")
    generation_time_ms: Optional[int] = Field(None, alias="generationTimeMs")
    download_url: Optional[str] = Field(None, alias="downloadUrl")
    error: Optional[str] = None
    errors: Optional[Dict[str, str]] = None

    @classmethod
    def succeeded(
        cls, report_id: str, output_path: str, output_format: str, time_ms: int, download_url: str
    ) -> "ReportResponse":
        return cls(
            success=True,
            message="Report generated successfully",
            report_id=report_id,
            output_path=output_path,
            output_format=output_format,
            generation_time_ms=time_ms,
            download_url=download_url,
        )

    @classmethod
    def failed(cls, error: str, message: str = "Report generation failed") -> "ReportResponse":
        return cls(success=False, message=message, error=error)

    @classmethod
    def invalid(cls, errors: Dict[str, str]) -> "ReportResponse":
        return cls(
            success=False,
            message="Validation failed",
            error=f"Invalid request fields: {', '.join(errors)}",
            errors=errors,
        )

    def to_payload(self) -> Dict[str, Any]:
        """JSON body with camelCase keys and unset fields dropped"""
        return self.model_dump(by_alias=True, exclude_none=True)


class ReportStatusResponse(ResponseModel):
    report_id: str = Field(alias="reportId")
    status: str
    progress: int
    message: str


class TemplateListResponse(ResponseModel):
    templates: List[str]
    count: int


class HealthResponse(ResponseModel):
    status: str
    service: str
    version: str
    python: str


class DeleteResponse(ResponseModel):
    message: str
    report_id: str = Field(alias="reportId")
