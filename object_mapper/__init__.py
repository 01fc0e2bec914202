"""
Bidirectional object-to-object property mapper.

Build an ``ObjectMapper`` from ordered rules, then ``map`` one object
shape into another and ``reverse_map`` it back.
"""

import logging

from object_mapper.core.exceptions import (
    InvalidDescriptorException,
    InvalidDescriptorKind,
    InvalidPathException,
    ObjectMapperException,
)
from object_mapper.mappers.object_mapper import ObjectMapper
from object_mapper.mappers.rules import (
    MappingFunction,
    MappingRule,
    compile_property_mapping,
)
from object_mapper.schemas.descriptor import PropertyMappingDescriptor
from object_mapper.utils.paths import MISSING, get_path, set_path

__version__ = "1.0.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ObjectMapper",
    "MappingFunction",
    "MappingRule",
    "PropertyMappingDescriptor",
    "compile_property_mapping",
    "get_path",
    "set_path",
    "MISSING",
    "ObjectMapperException",
    "InvalidDescriptorException",
    "InvalidDescriptorKind",
    "InvalidPathException",
]
