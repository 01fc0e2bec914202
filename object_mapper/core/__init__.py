from object_mapper.core.exceptions import (
    ObjectMapperException,
    InvalidDescriptorException,
    InvalidDescriptorKind,
    InvalidPathException,
)
from object_mapper.core.logging import setup_logging, get_logger

__all__ = [
    "ObjectMapperException",
    "InvalidDescriptorException",
    "InvalidDescriptorKind",
    "InvalidPathException",
    "setup_logging",
    "get_logger",
]
