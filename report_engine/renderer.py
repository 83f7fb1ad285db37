"""
Report renderers

A renderer turns a validated DynamicReportRequest into the two artifacts of a
report run: the design template and the rendered output. No real rendering
engine is wired in yet; MockReportRenderer is the placeholder that fills the
same contract with an XML design and a plain-text summary, so a genuine
engine can replace it without touching the service or the API.
"""

import json
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Dict, List, Optional

from jinja2 import BaseLoader, Environment, StrictUndefined, TemplateNotFound, select_autoescape
from jinja2.sandbox import SandboxedEnvironment
from markupsafe import Markup, escape

from core.logging import get_logger

from .layouts import DEFAULT_LAYOUTS, DESIGN_LAYOUT_NAME, OUTPUT_LAYOUT_NAME
from .schemas import ColumnConfig, DynamicReportRequest, TitleSection

logger = get_logger(__name__, domain="reports")

RULE_WIDTH = 80


def as_text(value: Any) -> str:
    """Textual form of a parameter or flag value"""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (dict, list, tuple)):
        return json.dumps(value, default=str)
    return str(value)


def xml_attrs(**attributes: Any) -> Markup:
    """Render keyword arguments as escaped XML attributes, skipping None"""
    rendered = "".join(
        f' {name}="{escape(as_text(value))}"' for name, value in attributes.items() if value is not None
    )
    return Markup(rendered)


def column_labels(columns: List[ColumnConfig]) -> str:
    """Column labels joined by a separator, falling back to the column name"""
    return " | ".join(column.label or column.name or "" for column in columns)


class LayoutLoader(BaseLoader):
    """In-memory loader for renderer layouts"""

    def __init__(self, layouts: Optional[Dict[str, str]] = None):
        self.layouts = dict(layouts or {})

    def get_source(self, environment: Environment, template: str) -> tuple:
        if template not in self.layouts:
            raise TemplateNotFound(template)

        source = self.layouts[template]
        return source, None, lambda: True

    def list_templates(self) -> List[str]:
        return list(self.layouts.keys())


class ReportRenderer(ABC):
    """Two-artifact contract every report engine fulfils"""

    name = "abstract"

    @abstractmethod
    def render_template(self, request: DynamicReportRequest, generated_at: datetime) -> str:
        """Return the design template for the request"""

    @abstractmethod
    def render_output(self, request: DynamicReportRequest, generated_at: datetime) -> str:
        """Return the rendered report for the request"""


class MockReportRenderer(ReportRenderer):
    """
    Placeholder engine: serializes the configuration tree without binding data

    Every optional section of the request is null-safe; an absent section
    contributes nothing to either artifact.
    """

    name = "mock"

    def __init__(self, layouts: Optional[Dict[str, str]] = None):
        self.loader = LayoutLoader({**DEFAULT_LAYOUTS, **(layouts or {})})
        self.env = SandboxedEnvironment(
            loader=self.loader,
            autoescape=select_autoescape(enabled_extensions=("xml",), default_for_string=False, default=False),
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        self.env.filters["as_text"] = as_text
        self.env.filters["column_labels"] = column_labels
        self.env.globals["xml_attrs"] = xml_attrs
        self.env.globals["heavy_rule"] = "=" * RULE_WIDTH
        self.env.globals["light_rule"] = "-" * RULE_WIDTH

        logger.info(f"Initialized MockReportRenderer with layouts={self.loader.list_templates()}")

    def render_template(self, request: DynamicReportRequest, generated_at: datetime) -> str:
        content = self._render(DESIGN_LAYOUT_NAME, request, generated_at)
        components = request.components
        logger.info(
            f"Rendered design template with {len(request.dataset_names or [])} datasets, "
            f"{len(components.tables or []) if components else 0} tables, "
            f"{len(components.charts or []) if components else 0} charts"
        )
        return content

    def render_output(self, request: DynamicReportRequest, generated_at: datetime) -> str:
        return self._render(OUTPUT_LAYOUT_NAME, request, generated_at)

    def _render(self, layout: str, request: DynamicReportRequest, generated_at: datetime) -> str:
        components = request.components
        title = components.title if components is not None else None
        return self.env.get_template(layout).render(
            request=request,
            components=components,
            title_heading=self.title_heading(title, generated_at) if title is not None else None,
            generated_at=generated_at,
        )

    @staticmethod
    def title_heading(title: TitleSection, generated_at: datetime) -> str:
        """Title line of the summary, with the generation date when requested; empty skips the block"""
        text = title.text or ""
        if title.include_date:
            date_text = generated_at.strftime("%Y-%m-%d")
            return f"{text} - {date_text}" if text else date_text
        return text
