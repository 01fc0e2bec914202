"""
Pytest configuration & shared fixtures.
"""

import logging
from collections.abc import Iterator

import pytest

from object_mapper.config import get_settings
from object_mapper.mappers.object_mapper import ObjectMapper


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Fresh settings per test; root and package loggers restored afterwards."""
    for name in ("OBJECT_MAPPER_LOG_LEVEL", "OBJECT_MAPPER_LOG_FORMAT",
                 "OBJECT_MAPPER_SKIP_FALSY_DEFAULTS"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()

    loggers = [logging.getLogger(), logging.getLogger("object_mapper")]
    saved = [(lg, list(lg.handlers), lg.level, lg.propagate) for lg in loggers]

    yield

    for lg, handlers, level, propagate in saved:
        lg.handlers[:] = handlers
        lg.setLevel(level)
        lg.propagate = propagate
    get_settings.cache_clear()


@pytest.fixture
def mapper() -> ObjectMapper:
    return ObjectMapper()


@pytest.fixture
def user() -> dict:
    return {"firstName": "Tommy", "lastName": "Lee Jones"}
