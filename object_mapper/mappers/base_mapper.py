"""
Abstract bidirectional mapper.

Every mapper implements ``map`` (source → target) and ``reverse_map``
(target → source); ``map_many`` / ``reverse_map_many`` batch over them.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Generic, TypeVar

SourceT = TypeVar("SourceT")
TargetT = TypeVar("TargetT")


class BaseMapper(ABC, Generic[SourceT, TargetT]):
    """Contract that every bidirectional mapper must fulfil."""

    @abstractmethod
    def map(self, source: SourceT, target: TargetT | None = None) -> TargetT:
        """
        Transform a source object into the target shape.

        When ``target`` is given it is filled in place and returned.
        """
        ...

    @abstractmethod
    def reverse_map(self, target: TargetT, source: SourceT | None = None) -> SourceT:
        """Transform a target object back into the source shape."""
        ...

    def map_many(self, sources: Iterable[SourceT]) -> list[TargetT]:
        """
        Transform a batch of source objects, each into a fresh target.
        """
        return [self.map(s) for s in sources]

    def reverse_map_many(self, targets: Iterable[TargetT]) -> list[SourceT]:
        return [self.reverse_map(t) for t in targets]
