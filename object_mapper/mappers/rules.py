"""
Mapping rules and the property-mapping compiler.

Every rule the engine stores reduces to ``MappingFunction``:
``(source, accumulator) -> accumulator``. Hand-written functions and
compiled property mappings are indistinguishable once stored.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from object_mapper.schemas.descriptor import validate_descriptor
from object_mapper.utils.paths import MISSING, get_path, set_path

MappingFunction = Callable[[Any, Any], Any]


@dataclass(frozen=True)
class MappingRule:
    """One stored step; a side left as None is skipped in that direction."""

    forward: MappingFunction | None = None
    backward: MappingFunction | None = None


def compile_property_mapping(
    descriptor: Any,
    skip_falsy_defaults: bool = False,
) -> tuple[MappingFunction, MappingFunction]:
    """
    Compile a property mapping descriptor into ``(forward, backward)``.

    The forward function reads ``from`` and writes ``to``; the backward
    function reads ``to`` and writes ``from``. Defaults apply forward only.

    Raises:
        InvalidDescriptorException: If the descriptor is rejected.
    """
    parsed = validate_descriptor(descriptor)

    default = parsed.default
    if skip_falsy_defaults and not default:
        default = MISSING

    forward = _property_function(parsed.from_, parsed.target, parsed.transform, default)
    backward = _property_function(parsed.target, parsed.from_, parsed.reverse_transform, MISSING)
    return forward, backward


def _property_function(
    read_path: str,
    write_path: str,
    transform: Callable[[Any], Any] | None,
    default: Any,
) -> MappingFunction:
    def apply(source: Any, target: Any) -> Any:
        value = get_path(source, read_path)
        if value is MISSING:
            if default is not MISSING:
                set_path(target, write_path, default)
            return target

        set_path(target, write_path, transform(value) if transform is not None else value)
        return target

    apply.__name__ = f"map_{read_path}_to_{write_path}"
    return apply
