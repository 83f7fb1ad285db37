"""Core utilities and configuration for the report engine"""
from core.config import settings
from core.exceptions import ArtifactWriteError, ReportEngineError, ValidationError
from core.logging import get_logger

__all__ = [
    "settings",
    "get_logger",
    "ReportEngineError",
    "ValidationError",
    "ArtifactWriteError",
]
