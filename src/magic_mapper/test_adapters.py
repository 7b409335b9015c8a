from collections import OrderedDict
from dataclasses import dataclass
from datetime import datetime

import pytest
from pydantic import BaseModel, ConfigDict

from magic_mapper.adapters import (
    DataclassAdapter,
    MappingAdapter,
    PydanticModelAdapter,
    ValueShape,
    get_adapter,
    shape_of,
)


@dataclass
class Point:
    x: int
    y: int


class Settings(BaseModel):
    model_config = ConfigDict(extra="allow")

    name: str


class TestShapeOf:
    @pytest.mark.parametrize(
        "value,expected",
        [
            ([], ValueShape.ARRAY),
            ((1,), ValueShape.ARRAY),
            ({}, ValueShape.PLAIN_OBJECT),
            (OrderedDict(a=1), ValueShape.PLAIN_OBJECT),
            (Point(1, 2), ValueShape.PLAIN_OBJECT),
            (Settings(name="n"), ValueShape.PLAIN_OBJECT),
            (Point, ValueShape.SCALAR),
            (None, ValueShape.SCALAR),
            ("text", ValueShape.SCALAR),
            (datetime(2024, 1, 1), ValueShape.SCALAR),
            (object(), ValueShape.SCALAR),
        ],
    )
    def test_shapes(self, value, expected):
        assert shape_of(value) is expected


class TestAdapters:
    def test_get_adapter(self):
        assert isinstance(get_adapter({}), MappingAdapter)
        assert isinstance(get_adapter(Point(1, 2)), DataclassAdapter)
        assert isinstance(get_adapter(Settings(name="n")), PydanticModelAdapter)

    def test_get_adapter_rejects_scalars(self):
        with pytest.raises(TypeError, match="got int"):
            get_adapter(1)

    def test_dataclass_items_follow_field_order(self):
        assert DataclassAdapter().own_items(Point(1, 2)) == [("x", 1), ("y", 2)]

    def test_pydantic_items_include_extra_fields(self):
        settings = Settings(name="n", debug=True)

        items = PydanticModelAdapter().own_items(settings)

        assert items == [("name", "n"), ("debug", True)]
