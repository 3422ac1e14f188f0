"""
YAML wire codec for application records.

Decoding accepts the same documents for create and search requests; absent
fields come back empty so that search queries can leave them unconstrained.
Encoding keeps field order and maintainer order exactly as stored.
"""

from __future__ import annotations

import logging
from typing import Iterable

import yaml
from pydantic import ValidationError

from appmeta.domain.errors import ApplicationDecodeError
from appmeta.domain.models import ApplicationMetadata

logger = logging.getLogger(__name__)

YAML_MEDIA_TYPE = "application/x-yaml"


class _RecordLoader(yaml.SafeLoader):
    pass


# Plain scalars stay text ("1.10", "010", "true", "2020-01-01"); only null
# and merge keys keep their implicit tags.
_KEPT_IMPLICIT_TAGS = {"tag:yaml.org,2002:null", "tag:yaml.org,2002:merge"}
_RecordLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag in _KEPT_IMPLICIT_TAGS]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


class _RecordDumper(yaml.SafeDumper):
    pass


def _represent_str(dumper: yaml.SafeDumper, data: str) -> yaml.ScalarNode:
    # Multi-line text is emitted as a literal block.
    if "\n" in data:
        return dumper.represent_scalar("tag:yaml.org,2002:str", data, style="|")
    return dumper.represent_scalar("tag:yaml.org,2002:str", data)


_RecordDumper.add_representer(str, _represent_str)


def decode_application(body: bytes | str) -> ApplicationMetadata:
    """
    Parse a YAML document into an application record.

    Raises:
        ApplicationDecodeError: If the body is not valid YAML, is not a
            mapping, or carries values of the wrong type.
    """
    try:
        raw = yaml.load(body, Loader=_RecordLoader)
    except yaml.YAMLError as e:
        logger.info(f"YAML parse error: {e}")
        raise ApplicationDecodeError("Malformed YAML document") from e

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        logger.info(f"YAML document is a {type(raw).__name__}, expected a mapping")
        raise ApplicationDecodeError("YAML document must be a mapping")

    try:
        return ApplicationMetadata.model_validate(raw)
    except ValidationError as e:
        logger.info(f"YAML field type error: {e.errors()}")
        raise ApplicationDecodeError("Wrong field types in YAML document") from e


def encode_applications(apps: Iterable[ApplicationMetadata]) -> str:
    """
    Render records as a YAML sequence. An empty input renders as "[]".
    """
    data = [app.model_dump() for app in apps]
    return yaml.dump(
        data,
        Dumper=_RecordDumper,
        sort_keys=False,
        default_flow_style=False,
        allow_unicode=True,
        width=4096,
    )
