"""Shared serialization rules for NCCO wire models."""

from typing import Any, ClassVar

from pydantic import (
    BaseModel,
    ConfigDict,
    SerializationInfo,
    SerializerFunctionWrapHandler,
    model_serializer,
)


def _to_camel(name: str) -> str:
    """Convert snake_case to camelCase for JSON serialization."""
    parts = name.split("_")
    return parts[0] + "".join(p.capitalize() for p in parts[1:])


def _is_empty(value: Any) -> bool:
    """True for values the platform treats as not set."""
    if value is None:
        return True
    if isinstance(value, (str, list, tuple, dict)):
        return not value
    if isinstance(value, (bool, int, float)):
        return value == 0
    return False


class WireModel(BaseModel):
    """Pydantic model that drops empty optional fields when dumped.

    Field names listed in ``wire_required`` are always emitted, even when
    they hold a zero value.
    """

    model_config = ConfigDict(alias_generator=_to_camel, populate_by_name=True)

    wire_required: ClassVar[frozenset[str]] = frozenset()

    @model_serializer(mode="wrap")
    def _omit_empty(
        self, handler: SerializerFunctionWrapHandler, info: SerializationInfo
    ) -> dict[str, Any]:
        data = handler(self)
        for name, field in type(self).model_fields.items():
            if name in self.wire_required or not _is_empty(getattr(self, name)):
                continue
            key = (field.alias or name) if info.by_alias else name
            data.pop(key, None)
        return data

    def prepare(self) -> dict[str, Any]:
        """Return the wire representation of this model."""
        return self.model_dump(by_alias=True)
