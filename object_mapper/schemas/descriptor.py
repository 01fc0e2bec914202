"""
Pydantic schema for property mapping descriptors.

A descriptor is transient input: it is validated here, compiled into a
pair of mapping functions, and then discarded.
"""

from collections.abc import Callable, Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from object_mapper.core.exceptions import (
    InvalidDescriptorException,
    InvalidDescriptorKind,
)
from object_mapper.utils.paths import MISSING


class PropertyMappingDescriptor(BaseModel):
    """
    Declarative rule copying one dotted path to another.

    Both ``reverse_transform`` and ``reverseTransform`` are accepted as keys.
    """

    from_: str = Field(
        ...,
        alias="from",
        min_length=1,
        description="Source path to read the value from")
    to: str | None = Field(
        default=None,
        description="Target path to assign to. Falls back to 'from' when empty.")
    transform: Callable[[Any], Any] | None = Field(
        default=None, description="Applied to the value on the forward path")
    reverse_transform: Callable[[Any], Any] | None = Field(
        default=None,
        alias="reverseTransform",
        description="Applied to the value on the reverse path")
    default: Any = Field(
        default=MISSING,
        description="Written forward when the source value is missing")

    model_config = ConfigDict(
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )

    @property
    def target(self) -> str:
        return self.to or self.from_

    @property
    def has_default(self) -> bool:
        return self.default is not MISSING


def validate_descriptor(descriptor: Any) -> PropertyMappingDescriptor:
    """
    Turn user input into a ``PropertyMappingDescriptor``.

    Raises:
        InvalidDescriptorException: NOT_AN_OBJECT when the input is not a
            mapping, MISSING_FROM when ``from`` is absent or None, and
            INVALID_FIELD when a field has the wrong type.
    """
    if isinstance(descriptor, PropertyMappingDescriptor):
        return descriptor

    if not isinstance(descriptor, Mapping):
        raise InvalidDescriptorException(
            InvalidDescriptorKind.NOT_AN_OBJECT,
            details={"received_type": type(descriptor).__name__},
        )

    if descriptor.get("from", descriptor.get("from_")) is None:
        raise InvalidDescriptorException(InvalidDescriptorKind.MISSING_FROM)

    try:
        return PropertyMappingDescriptor.model_validate(dict(descriptor))
    except ValidationError as exc:
        raise InvalidDescriptorException(
            InvalidDescriptorKind.INVALID_FIELD,
            details={
                "errors": exc.errors(
                    include_url=False, include_context=False, include_input=False),
            },
        ) from exc
