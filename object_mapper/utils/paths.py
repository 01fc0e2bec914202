"""
Dotted-path access into nested object graphs.

Path grammar: segments joined by ``.`` (``"articles.0.title"``).

Addressing rules:
  - On a ``Mapping`` a segment is a key, always a string, even when numeric.
  - On a list/tuple (any non-string ``Sequence``) a purely numeric segment
    is an index; any other segment does not resolve.
  - On any other object a segment is an attribute name, so pydantic models
    and dataclasses can be read and written.
  - Scalars (str, bytes, numbers) have no children.

``set_path`` creates missing intermediates as ``dict``, or as ``list`` when
the segment that follows is purely numeric.
"""

from collections.abc import Mapping, MutableMapping, MutableSequence, Sequence
from typing import Any

from object_mapper.core.exceptions import InvalidPathException

_SCALAR_TYPES = (str, bytes, bytearray, int, float, complex, bool)


class _Missing:
    """Marker for a location that holds no value."""

    _instance: "_Missing | None" = None

    def __new__(cls) -> "_Missing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> "_Missing":
        return self

    def __deepcopy__(self, memo: dict) -> "_Missing":
        return self

    def __reduce__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()


def is_missing(value: Any) -> bool:
    """True for an absent location or a ``None`` that ``set_path`` may replace."""
    return value is MISSING or value is None


def get_path(root: Any, path: str) -> Any:
    """
    Resolve ``path`` against ``root``.

    Returns ``MISSING`` as soon as a segment is absent or the current
    value cannot be indexed. The empty path returns ``root`` itself.

    Usage:
        get_path({"author": {"name": "Lukasz"}}, "author.name")  # "Lukasz"
    """
    if path == "":
        return root

    current = root
    for segment in path.split("."):
        current = _get_segment(current, segment)
        if current is MISSING:
            return MISSING
    return current


def set_path(root: Any, path: str, value: Any) -> None:
    """
    Write ``value`` into ``root`` at ``path``, overwriting what is there.

    Raises:
        InvalidPathException: If the path is empty or runs through a value
            that cannot hold children (e.g. a string).
    """
    if path == "":
        raise InvalidPathException(path, reason="Path is empty.")

    segments = path.split(".")
    current = root
    for segment, next_segment in zip(segments, segments[1:]):
        child = _get_segment(current, segment)
        if is_missing(child):
            child = [] if _is_index(next_segment) else {}
            _set_segment(current, segment, child, path)
        current = child

    _set_segment(current, segments[-1], value, path)


# ─── Internal ─────────────────────────────────────────────────────────


def _is_index(segment: str) -> bool:
    return segment.isascii() and segment.isdigit()


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, _SCALAR_TYPES)


def _get_segment(container: Any, segment: str) -> Any:
    if container is None or isinstance(container, _SCALAR_TYPES):
        return MISSING
    if isinstance(container, Mapping):
        return container.get(segment, MISSING)
    if _is_sequence(container):
        if not _is_index(segment):
            return MISSING
        index = int(segment)
        return container[index] if index < len(container) else MISSING
    return getattr(container, segment, MISSING)


def _set_segment(container: Any, segment: str, value: Any, path: str) -> None:
    if isinstance(container, MutableMapping):
        container[segment] = value
        return

    if isinstance(container, MutableSequence):
        if not _is_index(segment):
            raise InvalidPathException(
                path, reason=f"'{segment}' is not a list index.")
        index = int(segment)
        if index >= len(container):
            container.extend([None] * (index + 1 - len(container)))
        container[index] = value
        return

    if (
        container is None
        or isinstance(container, _SCALAR_TYPES)
        or isinstance(container, (Mapping, Sequence))
    ):
        raise InvalidPathException(
            path,
            reason=f"'{type(container).__name__}' cannot hold '{segment}'.",
        )

    try:
        setattr(container, segment, value)
    except (AttributeError, TypeError, ValueError) as exc:
        raise InvalidPathException(
            path,
            reason=f"Cannot set attribute '{segment}' on "
                   f"'{type(container).__name__}'.",
            details={"reason": str(exc)},
        ) from exc
