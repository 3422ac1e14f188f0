"""
Required-field validation for application records.

Records must pass validation before they are handed to the store. Search
queries are never validated; their empty fields are wildcards.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List

from appmeta.domain.models import SCALAR_FIELDS, ApplicationMetadata

ROOT_NAMESPACE = "ApplicationMetadata"

# Pragmatic address check: one "@", no whitespace, a dotted domain.
EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


@dataclass(frozen=True)
class ValidationIssue:
    namespace: str
    value: str

    def describe(self) -> str:
        return f"{self.namespace} has invalid value {self.value}"


def _namespace(*parts: str) -> str:
    return ".".join((ROOT_NAMESPACE,) + parts)


def is_valid_email(value: str) -> bool:
    return bool(EMAIL_PATTERN.match(value))


def find_validation_issues(app: ApplicationMetadata) -> List[ValidationIssue]:
    """
    Collect every required-field violation in `app`, in field order.

    Scalars must be non-empty, the maintainer list must be non-empty, and each
    maintainer needs a name and a syntactically valid email.
    """
    issues: List[ValidationIssue] = []

    for field in ("title", "version"):
        if not getattr(app, field):
            issues.append(ValidationIssue(_namespace(field.capitalize()), ""))

    if not app.maintainers:
        issues.append(ValidationIssue(_namespace("Maintainers"), "[]"))
    for i, maintainer in enumerate(app.maintainers):
        prefix = f"Maintainers[{i}]"
        if not maintainer.name:
            issues.append(ValidationIssue(_namespace(prefix, "Name"), ""))
        if not maintainer.email or not is_valid_email(maintainer.email):
            issues.append(ValidationIssue(_namespace(prefix, "Email"), maintainer.email))

    # Remaining scalars follow maintainers in wire order.
    for field in SCALAR_FIELDS[2:]:
        if not getattr(app, field):
            issues.append(ValidationIssue(_namespace(field.capitalize()), ""))

    return issues
