"""
Custom exceptions for the report engine
Provides structured error handling across the API, service and CLI
"""
from typing import Any, Dict, Optional


class ReportEngineError(Exception):
    """Base exception for all report engine errors"""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        status_code: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        self.status_code = status_code

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for API responses"""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationError(ReportEngineError):
    """Raised when a report request violates one or more field rules"""

    def __init__(self, field_errors: Dict[str, str], message: str = "Validation failed"):
        super().__init__(
            message=message,
            error_code="VALIDATION_ERROR",
            details={"errors": dict(field_errors)},
            status_code=400,
        )
        self.field_errors = dict(field_errors)

    @property
    def fields(self):
        return list(self.field_errors)


class ArtifactWriteError(ReportEngineError):
    """Raised when a template or output artifact cannot be written"""

    def __init__(self, path: str, cause: str):
        super().__init__(
            message=f"Failed to write artifact {path}: {cause}",
            error_code="ARTIFACT_WRITE_ERROR",
            details={"path": path, "cause": cause},
            status_code=500,
        )
        self.path = path
        self.cause = cause


class ConfigurationError(ReportEngineError):
    """Raised when configuration is invalid or missing"""

    def __init__(self, message: str, setting: Optional[str] = None):
        super().__init__(
            message=message,
            error_code="CONFIGURATION_ERROR",
            details={"setting": setting} if setting else {},
            status_code=500,
        )
