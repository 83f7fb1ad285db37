"""
Dynamic report generation service

Mints a report identifier, asks the renderer for both artifacts and writes
them under the template and output directories. Either both artifacts are
written or neither is left behind.
"""

import time
import uuid
from dataclasses import asdict, dataclass
from datetime import datetime, timezone
from functools import lru_cache
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple

from core.config import get_settings
from core.exceptions import ArtifactWriteError, ValidationError
from core.logging import get_logger

from .renderer import MockReportRenderer, ReportRenderer
from .schemas import DynamicReportRequest

logger = get_logger(__name__, domain="reports")


def new_report_id() -> str:
    return str(uuid.uuid4())


@dataclass
class GenerationResult:
    """Result of a dynamic report generation"""

    report_id: str
    template_path: str
    output_path: str
    output_format: str
    generation_time_ms: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class DynamicReportService:
    """Generates report artifacts from library components"""

    def __init__(
        self,
        renderer: Optional[ReportRenderer] = None,
        template_dir: str = "reports/templates",
        output_dir: str = "reports/output",
        template_extension: str = "rptdesign",
        id_factory: Callable[[], str] = new_report_id,
    ):
        self.renderer = renderer or MockReportRenderer()
        self.template_dir = Path(template_dir)
        self.output_dir = Path(output_dir)
        self.template_extension = template_extension.lstrip(".")
        self.id_factory = id_factory

    def template_path_for(self, report_id: str) -> str:
        return (self.template_dir / f"{report_id}.{self.template_extension}").as_posix()

    def output_path_for(self, report_id: str, output_format: str) -> str:
        return (self.output_dir / f"{report_id}.{output_format}").as_posix()

    def generate_dynamic_report(
        self, request: DynamicReportRequest, generated_at: Optional[datetime] = None
    ) -> GenerationResult:
        """
        Generate the template and output artifacts for a request

        Args:
            request: Validated dynamic report request
            generated_at: Generation timestamp, defaults to now (UTC)

        Returns:
            GenerationResult with the new report id and artifact paths

        Raises:
            ValidationError: request carries no dataset
            ArtifactWriteError: a directory or artifact could not be written
        """
        if not request.dataset_names:
            raise ValidationError({"datasetNames": "At least one dataset is required"})

        logger.info(f"Starting dynamic report generation: {request.report_name}")
        start_time = time.perf_counter()

        report_id = self.id_factory()
        template_path = self.template_path_for(report_id)
        output_path = self.output_path_for(report_id, request.output_format)
        generated_at = generated_at or datetime.now(timezone.utc)

        template_content = self.renderer.render_template(request, generated_at)
        output_content = self.renderer.render_output(request, generated_at)

        self._ensure_directories()
        self._write_artifacts([(template_path, template_content), (output_path, output_content)])
        report_logger = logger.with_context(report_id=report_id)
        report_logger.info(f"Report template created: {template_path}")
        report_logger.info(f"Report output generated: {output_path}")

        return GenerationResult(
            report_id=report_id,
            template_path=template_path,
            output_path=output_path,
            output_format=request.output_format,
            generation_time_ms=int((time.perf_counter() - start_time) * 1000),
        )

    def _ensure_directories(self) -> None:
        for directory in (self.template_dir, self.output_dir):
            try:
                directory.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                raise ArtifactWriteError(directory.as_posix(), str(e)) from e

    def _write_artifacts(self, artifacts: List[Tuple[str, str]]) -> None:
        written: List[str] = []
        for path, content in artifacts:
            try:
                Path(path).write_text(content, encoding="utf-8")
            except OSError as e:
                logger.error(f"Failed to write artifact {path}: {e}")
                self._remove(written + [path])
                raise ArtifactWriteError(path, str(e)) from e
            written.append(path)

    @staticmethod
    def _remove(paths: List[str]) -> None:
        for path in paths:
            try:
                Path(path).unlink(missing_ok=True)
            except OSError as e:
                logger.warning(f"Could not remove partial artifact {path}: {e}")


@lru_cache()
def get_renderer() -> ReportRenderer:
    """Shared renderer instance"""
    logger.warning("No rendering engine configured, report artifacts are mock output")
    return MockReportRenderer()


def get_report_service() -> DynamicReportService:
    """FastAPI dependency building the service from current settings"""
    current = get_settings()
    return DynamicReportService(
        renderer=get_renderer(),
        template_dir=current.template_dir,
        output_dir=current.output_dir,
        template_extension=current.template_extension,
    )
