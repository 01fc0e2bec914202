from object_mapper.schemas.descriptor import (
    PropertyMappingDescriptor,
    validate_descriptor,
)

__all__ = [
    "PropertyMappingDescriptor",
    "validate_descriptor",
]
