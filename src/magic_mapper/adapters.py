from __future__ import annotations

from collections.abc import Mapping
from dataclasses import fields, is_dataclass
from enum import Enum
from typing import Any, Iterable, List, Tuple

from pydantic import BaseModel


class ValueShape(Enum):
    """How the mapper treats a value when the schema has no entry for it."""

    ARRAY = "array"
    PLAIN_OBJECT = "plain_object"
    SCALAR = "scalar"


class MappingAdapter:
    """Own properties of a plain mapping are its items."""

    def own_items(self, obj: Mapping) -> Iterable[Tuple[Any, Any]]:
        return list(obj.items())


class DataclassAdapter(MappingAdapter):
    def own_items(self, obj: Any) -> List[Tuple[str, Any]]:
        return [(field.name, getattr(obj, field.name)) for field in fields(obj)]


class PydanticModelAdapter(MappingAdapter):
    def own_items(self, obj: BaseModel) -> List[Tuple[str, Any]]:
        # Field values are read as attributes so nested models stay models
        # and are mapped by their own adapter.
        items = [(name, getattr(obj, name)) for name in type(obj).model_fields]
        items.extend((obj.model_extra or {}).items())
        return items


def is_dataclass_instance(obj: Any) -> bool:
    return is_dataclass(obj) and not isinstance(obj, type)


def shape_of(value: Any) -> ValueShape:
    """Classify ``value`` into the closed set of shapes the mapper knows.

    ``list`` and ``tuple`` are arrays, and a named tuple is rebuilt as its own
    type. Mappings, pydantic model instances and dataclass instances are
    plain objects. Everything else, including ``None``, strings, dates, sets
    and arbitrary class instances, is a scalar and is copied as it is.
    """
    if isinstance(value, (list, tuple)):
        return ValueShape.ARRAY
    if isinstance(value, (Mapping, BaseModel)) or is_dataclass_instance(value):
        return ValueShape.PLAIN_OBJECT
    return ValueShape.SCALAR


def get_adapter(obj: Any) -> MappingAdapter:
    if isinstance(obj, BaseModel):
        return PydanticModelAdapter()
    if is_dataclass_instance(obj):
        return DataclassAdapter()
    if isinstance(obj, Mapping):
        return MappingAdapter()
    raise TypeError(
        f"Expected a mapping, a pydantic model or a dataclass instance, got {type(obj).__name__}"
    )
