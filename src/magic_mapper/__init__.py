from magic_mapper.directives import Direct
from magic_mapper.exceptions import (
    InvalidOptionType,
    MagicMapperError,
    MaxDepthExceeded,
    SchemaRequired,
)
from magic_mapper.mapper import MagicMapper
from magic_mapper.options import MapperOptions

__all__ = [
    "MagicMapper",
    "MapperOptions",
    "Direct",
    "MagicMapperError",
    "InvalidOptionType",
    "SchemaRequired",
    "MaxDepthExceeded",
]
