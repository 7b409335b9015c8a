from __future__ import annotations

from typing import Annotated, Any, Callable, Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictBool, ValidationError

from magic_mapper.exceptions import InvalidOptionType

PropertyTransform = Callable[[Any], Any]
ValueTransform = Callable[[Any], Any]
PositiveDepth = Annotated[int, Field(strict=True, gt=0)]


class MapperOptions(BaseModel):
    """Options a ``MagicMapper`` applies to all of its mappings.

    Attributes:
        property_transform: ``fn(name)`` applied to every property name
        value_transform: ``fn(value)`` applied to every property value
        exclusive: map only properties listed in the schema
        max_depth: refuse sources nested deeper than this many objects

    ``model_construct`` skips validation, so it never raises
    ``InvalidOptionType``. Build options with the constructor or
    ``model_validate`` instead.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    property_transform: Optional[PropertyTransform] = Field(
        default=None, alias="propertyTransform"
    )
    value_transform: Optional[ValueTransform] = Field(
        default=None, alias="valueTransform"
    )
    exclusive: StrictBool = False
    max_depth: Optional[PositiveDepth] = Field(default=None, alias="maxDepth")

    def __init__(self, **data: Any) -> None:
        try:
            super().__init__(**data)
        except ValidationError as exc:
            raise self._invalid_option_type(exc) from None

    @classmethod
    def _invalid_option_type(cls, exc: ValidationError) -> InvalidOptionType:
        error = exc.errors()[0]
        option = str(error["loc"][0]) if error["loc"] else "options"
        return InvalidOptionType(
            cls._field_names_by_alias().get(option, option),
            error.get("input"),
            error["msg"],
        )

    @classmethod
    def by_field_name(cls, data: Mapping[str, Any]) -> Dict[str, Any]:
        """Return ``data`` with camelCase aliases replaced by field names."""
        aliases = cls._field_names_by_alias()
        return {aliases.get(key, key): value for key, value in data.items()}

    @classmethod
    def _field_names_by_alias(cls) -> Dict[str, str]:
        return {
            field.alias: name
            for name, field in cls.model_fields.items()
            if field.alias
        }
