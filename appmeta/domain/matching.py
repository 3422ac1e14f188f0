from __future__ import annotations

import logging
from typing import Iterable, List, Sequence

from appmeta.domain.models import SCALAR_FIELDS, ApplicationMetadata, Maintainer

logger = logging.getLogger(__name__)


def value_matches(known: str, wanted: str) -> bool:
    """
    Compare a single scalar value against its query counterpart.

    An empty query value is a wildcard.
    """
    return known == wanted or wanted == ""


def fields_match(known: ApplicationMetadata, query: ApplicationMetadata) -> bool:
    """
    Check every scalar field of `known` against `query`, ignoring fields the
    query leaves empty. Maintainers are handled by `maintainers_match`.
    """
    for field in SCALAR_FIELDS:
        known_value = getattr(known, field)
        wanted = getattr(query, field)
        if not value_matches(known_value, wanted):
            logger.debug(
                f"Field {field!r} mismatch for {known.title!r}: "
                f"known={known_value!r} wanted={wanted!r}"
            )
            return False
    return True


def maintainer_matches(known: Maintainer, query: Maintainer) -> bool:
    return value_matches(known.name, query.name) and value_matches(known.email, query.email)


def maintainers_match(known: Sequence[Maintainer], query: Sequence[Maintainer]) -> bool:
    """
    Every query maintainer must be satisfied by at least one known maintainer.

    Known maintainers without a query counterpart are ignored, and an empty
    query list matches anything.
    """
    for wanted in query:
        if not any(maintainer_matches(k, wanted) for k in known):
            logger.debug(f"No known maintainer matches {wanted.name!r} <{wanted.email}>")
            return False
    return True


def record_matches(known: ApplicationMetadata, query: ApplicationMetadata) -> bool:
    return fields_match(known, query) and maintainers_match(known.maintainers, query.maintainers)


def filter_applications(
    knowns: Iterable[ApplicationMetadata],
    query: ApplicationMetadata,
) -> List[ApplicationMetadata]:
    """
    Return the records in `knowns` that match `query`, in their original order.
    """
    return [known for known in knowns if record_matches(known, query)]
