"""
Validated construction of request payloads.

``build`` turns an untrusted mapping into a schema instance and never raises:
it returns a ``ValidationResult`` that is either ``ok`` with a ``value`` or
carries human-readable ``errors``. Services decide what a failure means,
usually by calling ``unwrap()`` which raises ``ValidationError`` (HTTP 400).
"""
from dataclasses import dataclass, field
from typing import Any, Dict, Generic, List, Mapping, Optional, Type, TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from ..core.exceptions import ValidationError

M = TypeVar("M", bound=BaseModel)


class SchemaBase(BaseModel):
    """camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        str_strip_whitespace=True,
    )


@dataclass(frozen=True)
class ValidationResult(Generic[M]):
    value: Optional[M] = None
    errors: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    def unwrap(self) -> M:
        if not self.ok:
            raise ValidationError("; ".join(self.errors))
        return self.value


def _format_error(error: Dict[str, Any]) -> str:
    location = ".".join(str(part) for part in error.get("loc", ()))
    message = error.get("msg", "invalid value")
    return f"{location}: {message}" if location else message


def build(model: Type[M], data: Any) -> ValidationResult[M]:
    """Validate ``data`` against ``model``."""
    if not isinstance(data, Mapping):
        return ValidationResult(errors=["Request body must be a JSON object"])
    try:
        return ValidationResult(value=model.model_validate(dict(data)))
    except PydanticValidationError as exc:
        return ValidationResult(errors=[_format_error(e) for e in exc.errors()])


def canonical_keys(model: Type[BaseModel], data: Mapping[str, Any]) -> Dict[str, Any]:
    """Rewrite field names to their wire aliases and drop unknown keys."""
    names = {}
    for name, info in model.model_fields.items():
        alias = info.alias or name
        names[name] = alias
        names[alias] = alias
    return {names[key]: value for key, value in data.items() if key in names}


def build_update(model: Type[M], current: Any, changes: Any) -> ValidationResult[M]:
    """
    Merge ``changes`` over the stored record ``current`` and validate the result.

    Fields missing from ``changes`` keep their stored values, so both partial
    and full updates go through the same rules as creation.
    """
    if not isinstance(changes, Mapping):
        return ValidationResult(errors=["Request body must be a JSON object"])
    merged = model.model_validate(current).model_dump(by_alias=True)
    merged.update(canonical_keys(model, changes))
    return build(model, merged)
