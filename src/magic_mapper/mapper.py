from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Dict, List, Optional, Tuple, Union

from magic_mapper.adapters import ValueShape, get_adapter, shape_of
from magic_mapper.directives import Direct, resolve_directive
from magic_mapper.exceptions import InvalidOptionType, MaxDepthExceeded, SchemaRequired
from magic_mapper.options import MapperOptions

logger = logging.getLogger(__name__)

Schema = Mapping[str, Any]
ArrayValue = Union[List[Any], Tuple[Any, ...]]


class MagicMapper:
    """Maps nested objects to new plain dicts.

    Property names and values can be rewritten globally through the
    options, and per property through a schema passed to ``map``.
    """

    Direct = Direct

    def __init__(
        self,
        options: Optional[Union[MapperOptions, Mapping[str, Any]]] = None,
        **kwargs: Any,
    ) -> None:
        self.options = self._build_options(options, kwargs)
        logger.debug(
            "MagicMapper configured: property_transform=%r value_transform=%r "
            "exclusive=%s max_depth=%s",
            self.options.property_transform,
            self.options.value_transform,
            self.options.exclusive,
            self.options.max_depth,
        )

    def map(self, source: Any, schema: Optional[Schema] = None) -> Any:
        """Map the properties of source to a new object.

        Args:
            source: Mapping, pydantic model or dataclass instance to map from.
                A list or tuple of them is mapped element by element.
            schema: Optional per property directives, looked up by transformed
                property name at every nesting level. Required in exclusive
                mode.

        Returns:
            A new dict (or list/tuple for a sequence source).
        """
        if self.options.exclusive and schema is None:
            raise SchemaRequired()

        shape = shape_of(source)
        if shape is ValueShape.ARRAY:
            return self._map_sequence(source, schema, 0)
        if shape is ValueShape.SCALAR:
            raise TypeError(
                f"Expected a mapping, a pydantic model or a dataclass instance as source, got {type(source).__name__}"
            )
        return self._map_object(source, schema, 0)

    # region Private methods

    @staticmethod
    def _build_options(
        options: Optional[Union[MapperOptions, Mapping[str, Any]]],
        overrides: Dict[str, Any],
    ) -> MapperOptions:
        if isinstance(options, MapperOptions):
            if not overrides:
                return options
            data = {
                name: getattr(options, name) for name in MapperOptions.model_fields
            }
        elif options is None or isinstance(options, Mapping):
            data = MapperOptions.by_field_name(options or {})
        else:
            raise InvalidOptionType(
                "options", options, "expected MapperOptions or a mapping"
            )
        data.update(MapperOptions.by_field_name(overrides))
        return MapperOptions(**data)

    def _map_object(
        self, source: Any, schema: Optional[Schema], depth: int
    ) -> Dict[Any, Any]:
        self._guard_depth(depth)
        exclusive = self.options.exclusive
        mapped = {}
        for prop_name, prop_value in get_adapter(source).own_items(source):
            target_name = self._transform_property(prop_name)
            from_value = self._transform_value(prop_value)

            if exclusive and target_name not in schema:
                continue

            mapped[target_name] = self._map_value(
                target_name, from_value, schema, depth
            )
        return mapped

    def _map_value(
        self, name: Any, value: Any, schema: Optional[Schema], depth: int
    ) -> Any:
        if schema is not None and name in schema:
            return resolve_directive(schema[name]).apply(value)

        shape = shape_of(value)
        if shape is ValueShape.ARRAY:
            return self._map_sequence(value, schema, depth + 1)
        if shape is ValueShape.PLAIN_OBJECT:
            return self._map_object(value, schema, depth + 1)
        return value

    def _map_sequence(
        self, values: ArrayValue, schema: Optional[Schema], depth: int
    ) -> ArrayValue:
        # Only object elements are mapped, nested sequences are kept as they are.
        mapped = [
            (
                self._map_object(value, schema, depth)
                if shape_of(value) is ValueShape.PLAIN_OBJECT
                else value
            )
            for value in values
        ]
        if isinstance(values, tuple):
            if hasattr(values, "_fields"):
                return type(values)(*mapped)
            return tuple(mapped)
        return mapped

    def _transform_property(self, name: Any) -> Any:
        transform = self.options.property_transform
        return transform(name) if transform is not None else name

    def _transform_value(self, value: Any) -> Any:
        transform = self.options.value_transform
        return transform(value) if transform is not None else value

    def _guard_depth(self, depth: int) -> None:
        max_depth = self.options.max_depth
        if max_depth is not None and depth > max_depth:
            raise MaxDepthExceeded(max_depth)

    # endregion
