from __future__ import annotations

from enum import Enum
from typing import Type, TypeVar

from ..core.exceptions import ValidationError

E = TypeVar("E", bound=Enum)


def require_non_empty(value: str, field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_min_length(value: str, field_name: str, min_len: int) -> str:
    if value is None or len(value) < min_len:
        raise ValidationError(f"{field_name} must be at least {min_len} characters")
    return value


def coerce_enum(enum_cls: Type[E], value) -> E:
    """Coerce a raw value (int, str or enum member) into ``enum_cls``.

    Raises ValueError like the enum constructor does.
    """

    if isinstance(value, enum_cls):
        return value
    if isinstance(value, Enum):
        value = value.value
    return enum_cls(str(value))


def require_enum(enum_cls: Type[E], value, field_name: str) -> E:
    try:
        return coerce_enum(enum_cls, value)
    except ValueError:
        raise ValidationError(f"{field_name} is invalid: {value!r}") from None


def require_int(value, field_name: str) -> int:
    """Coerce an id from request data (int or digit string) into ``int``."""

    if isinstance(value, bool):
        raise ValidationError(f"{field_name} must be an integer")
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().lstrip("-").isdigit():
        return int(value.strip())
    raise ValidationError(f"{field_name} must be an integer")
