"""
Usage example: ``python -m object_mapper``.

Maps a small article payload and prints the result as JSON.
"""

import json

from object_mapper.config import get_settings
from object_mapper.core.logging import get_logger, setup_logging
from object_mapper.mappers.object_mapper import ObjectMapper

logger = get_logger(__name__)

EXAMPLE_SOURCE = {
    "author": {
        "name": "Lukasz",
        "surname": "Kuzynski",
    },
    "tags": ["rpc", "http", "api"],
}


def build_example_mapper() -> ObjectMapper:
    return (
        ObjectMapper()
        .add_property_mapping({"from": "author.name", "to": "authorName"})
        .add_property_mapping({"from": "tags.0", "to": "lastTag"})
    )


def main() -> None:
    settings = get_settings()
    setup_logging(level=settings.log_level, log_format=settings.log_format)

    result = build_example_mapper().map(EXAMPLE_SOURCE)
    logger.info("Example mapped", extra={"keys": sorted(result)})
    print(json.dumps(result, indent=2))


if __name__ == "__main__":
    main()
