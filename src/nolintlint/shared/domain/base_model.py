"""
Base domain model with camelCase JSON serialization.

Domain dataclasses mix this in to get a stable JSON shape for reports:
snake_case fields become camelCase keys, enums become their values.
"""

from __future__ import annotations

from dataclasses import fields, is_dataclass
from enum import Enum
from typing import Any, Dict


def to_camel_case(snake_str: str) -> str:
    """
    Convert snake_case to camelCase.

    Examples:
        >>> to_camel_case("full_directive")
        'fullDirective'
        >>> to_camel_case("line")
        'line'
    """
    components = snake_str.split("_")
    return components[0] + "".join(x.title() for x in components[1:])


def to_snake_case(camel_str: str) -> str:
    """
    Convert camelCase to snake_case.

    Examples:
        >>> to_snake_case("requireExplanation")
        'require_explanation'
        >>> to_snake_case("excludes")
        'excludes'
    """
    if not camel_str:
        return camel_str
    result = [camel_str[0].lower()]
    for char in camel_str[1:]:
        if char.isupper():
            result.extend(["_", char.lower()])
        else:
            result.append(char)
    return "".join(result)


def _serialize(value: Any) -> Any:
    if isinstance(value, JsonModel):
        return value.to_json()
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (list, tuple)):
        return [_serialize(item) for item in value]
    if isinstance(value, (set, frozenset)):
        return sorted(_serialize(item) for item in value)
    if isinstance(value, dict):
        return {k: _serialize(v) for k, v in value.items()}
    return value


class JsonModel:
    """
    Mixin for dataclass domain models.

    Not a dataclass itself, so both frozen and mutable dataclasses can use it.
    """

    def to_json(self) -> Dict[str, Any]:
        """
        Serialize to JSON-compatible dict with camelCase keys.

        Returns:
            Dictionary with camelCase keys, Enum values, nested models expanded
        """
        if not is_dataclass(self):
            raise TypeError(f"{type(self).__name__} must be a dataclass to serialize")

        result: Dict[str, Any] = {}
        for field in fields(self):
            result[to_camel_case(field.name)] = _serialize(getattr(self, field.name))
        return result
