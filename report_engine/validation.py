"""
Request validation helpers

Turns pydantic validation failures into an ordered {field path: reason}
mapping so every violated field is reported, not just the first one.
Paths use the JSON (camelCase) names even when pydantic reports the Python
attribute name, as it does for required fields that were left out.
"""
from typing import Any, Dict, Iterable, Mapping, Optional, Sequence, Type, TypeVar, get_args

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from core.exceptions import ValidationError

from .schemas import DynamicReportRequest, ReportRequest

ModelT = TypeVar("ModelT", bound=BaseModel)


def _nested_models(annotation: Any) -> Iterable[Type[BaseModel]]:
    if isinstance(annotation, type) and issubclass(annotation, BaseModel):
        yield annotation
        return
    for arg in get_args(annotation):
        yield from _nested_models(arg)


def collect_aliases(model: Type[BaseModel], aliases: Optional[Dict[str, str]] = None) -> Dict[str, str]:
    """Map attribute names to JSON aliases across a model and the models it nests"""
    aliases = {} if aliases is None else aliases
    for name, info in model.model_fields.items():
        if info.alias:
            aliases.setdefault(name, info.alias)
        for nested in _nested_models(info.annotation):
            collect_aliases(nested, aliases)
    return aliases


FIELD_ALIASES: Dict[str, str] = {}
for _request_model in (DynamicReportRequest, ReportRequest):
    collect_aliases(_request_model, FIELD_ALIASES)


def field_path(loc: Sequence[Any]) -> str:
    """Dotted alias path for an error location, without the request-body prefix"""
    parts = list(loc)
    if parts and parts[0] == "body":
        parts = parts[1:]
    names = [FIELD_ALIASES.get(part, part) if isinstance(part, str) else str(part) for part in parts]
    return ".".join(names) or "body"


def error_reason(error: Mapping[str, Any]) -> str:
    """Human message for a single pydantic error entry"""
    if error.get("type") == "value_error":
        cause = error.get("ctx", {}).get("error")
        if cause is not None:
            return str(cause)
    return error.get("msg", "Invalid value")


def field_errors(exc) -> Dict[str, str]:
    """
    Flatten a pydantic or FastAPI validation error into field -> reason

    The first reason reported for a field wins; field order follows the
    order pydantic reported them in.
    """
    return collect_errors(exc.errors())


def collect_errors(errors: Iterable[Mapping[str, Any]]) -> Dict[str, str]:
    result: Dict[str, str] = {}
    for error in errors:
        result.setdefault(field_path(error.get("loc", ())), error_reason(error))
    return result


def validate_payload(model: Type[ModelT], payload: Any) -> ModelT:
    """Validate a raw payload eagerly, raising ValidationError with every violation"""
    try:
        return model.model_validate(payload)
    except PydanticValidationError as exc:
        raise ValidationError(field_errors(exc)) from exc


def validate_dynamic_request(payload: Any) -> DynamicReportRequest:
    return validate_payload(DynamicReportRequest, payload)


def validate_report_request(payload: Any) -> ReportRequest:
    return validate_payload(ReportRequest, payload)
