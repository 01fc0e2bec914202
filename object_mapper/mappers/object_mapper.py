"""
Rule-based bidirectional object mapper.

Rules are applied in the order they were added; when two rules write the
same target path the later one wins. A custom mapping function must
return the accumulator it was given, otherwise every later rule receives
whatever it returned instead.
"""

from collections.abc import Iterable
from typing import Any, Literal

from object_mapper.config import get_settings
from object_mapper.core.logging import get_logger
from object_mapper.mappers.base_mapper import BaseMapper
from object_mapper.mappers.rules import (
    MappingFunction,
    MappingRule,
    compile_property_mapping,
)

logger = get_logger(__name__)

Direction = Literal["forward", "backward"]


class ObjectMapper(BaseMapper[Any, Any]):
    """
    Ordered list of mapping rules with a fluent builder API.

    Usage:
        mapper = (
            ObjectMapper()
            .add_property_mapping({"from": "author.name", "to": "authorName"})
            .add_simple_properties_assignments(["id", "title"])
        )
        dto = mapper.map(article)
        article = mapper.reverse_map(dto)
    """

    def __init__(self, skip_falsy_defaults: bool | None = None) -> None:
        """
        Args:
            skip_falsy_defaults: Treat falsy defaults (0, "", False) as unset.
                Falls back to the ``skip_falsy_defaults`` setting when None.
        """
        if skip_falsy_defaults is None:
            skip_falsy_defaults = get_settings().skip_falsy_defaults
        self._skip_falsy_defaults = skip_falsy_defaults
        self.mappings: list[MappingRule] = []

    # ── Builder ───────────────────────────────────────────────────────

    def add_mapping(self, mapping_fn: MappingFunction | None) -> "ObjectMapper":
        self.mappings.append(MappingRule(forward=mapping_fn))
        return self

    def add_reverse_mapping(self, reverse_fn: MappingFunction | None) -> "ObjectMapper":
        self.mappings.append(MappingRule(backward=reverse_fn))
        return self

    def add_both_mappings(
        self,
        mapping_fn: MappingFunction | None,
        reverse_fn: MappingFunction | None,
    ) -> "ObjectMapper":
        """Append a forward rule, then a separate reverse rule."""
        self.add_mapping(mapping_fn)
        self.add_reverse_mapping(reverse_fn)
        return self

    def add_property_mapping(self, descriptor: Any) -> "ObjectMapper":
        """
        Compile a property mapping descriptor and append both directions.

        The descriptor is a mapping (or ``PropertyMappingDescriptor``) with
        ``from`` and optionally ``to``, ``transform``, ``reverse_transform``
        and ``default``.

        Raises:
            InvalidDescriptorException: Before any rule is appended.
        """
        forward, backward = compile_property_mapping(
            descriptor, skip_falsy_defaults=self._skip_falsy_defaults)
        self.add_both_mappings(forward, backward)

        logger.debug(
            "Property mapping added",
            extra={"rule": forward.__name__, "rule_count": len(self.mappings)},
        )
        return self

    def add_simple_properties_assignments(self, names: Iterable[str]) -> "ObjectMapper":
        """Copy each named property unchanged, under the same name."""
        for name in names:
            self.add_property_mapping({"from": name, "to": name})
        return self

    # ── Mapping ───────────────────────────────────────────────────────

    def map(self, source: Any, target: Any = None) -> Any:
        if target is None:
            target = {}
        return self._run(source, target, "forward")

    def reverse_map(self, target: Any, source: Any = None) -> Any:
        if source is None:
            source = {}
        return self._run(target, source, "backward")

    def _run(self, read_side: Any, accumulator: Any, direction: Direction) -> Any:
        """
        Fold one side of every rule over ``accumulator``.

        Failures propagate unchanged; rules applied before the failing one
        stay applied.
        """
        for index, rule in enumerate(self.mappings):
            mapping_fn = rule.forward if direction == "forward" else rule.backward
            if mapping_fn is None:
                continue
            try:
                accumulator = mapping_fn(read_side, accumulator)
            except Exception:
                logger.error(
                    "Mapping rule failed",
                    extra={"rule_index": index, "direction": direction},
                    exc_info=True,
                )
                raise

        logger.debug(
            "Mapping complete",
            extra={"direction": direction, "rule_count": len(self.mappings)},
        )
        return accumulator
