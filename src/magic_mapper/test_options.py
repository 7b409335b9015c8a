import pytest
from pydantic import ValidationError

from magic_mapper import InvalidOptionType, MapperOptions


class TestMapperOptions:
    def test_defaults(self):
        options = MapperOptions()

        assert options.property_transform is None
        assert options.value_transform is None
        assert options.exclusive is False
        assert options.max_depth is None

    def test_aliases_and_names_are_equivalent(self):
        by_alias = MapperOptions(propertyTransform=str.upper, maxDepth=3)
        by_name = MapperOptions(property_transform=str.upper, max_depth=3)

        assert by_alias.property_transform is by_name.property_transform
        assert by_alias.max_depth == by_name.max_depth == 3

    def test_options_are_immutable(self):
        options = MapperOptions()

        with pytest.raises(ValidationError):
            options.exclusive = True

        assert options.exclusive is False

    @pytest.mark.parametrize(
        "option,value",
        [
            ("property_transform", "notAFunction"),
            ("value_transform", 1),
            ("exclusive", "yes"),
            ("exclusive", 1),
            ("max_depth", 0),
            ("max_depth", "3"),
        ],
    )
    def test_invalid_values_raise_invalid_option_type(self, option, value):
        with pytest.raises(InvalidOptionType) as exc_info:
            MapperOptions(**{option: value})

        assert exc_info.value.option == option
        assert exc_info.value.value == value

    def test_model_validate_raises_invalid_option_type(self):
        with pytest.raises(InvalidOptionType) as exc_info:
            MapperOptions.model_validate({"valueTransform": "notAFunction"})

        assert exc_info.value.option == "value_transform"

    def test_by_field_name_replaces_aliases(self):
        data = {"propertyTransform": str.upper, "exclusive": True}

        assert MapperOptions.by_field_name(data) == {
            "property_transform": str.upper,
            "exclusive": True,
        }

    def test_unknown_option_is_rejected(self):
        with pytest.raises(InvalidOptionType) as exc_info:
            MapperOptions(strict=True)

        assert exc_info.value.option == "strict"
