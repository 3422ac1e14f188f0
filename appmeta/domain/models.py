"""
Pydantic models for the application metadata service.

This module defines the record shapes handled by the service:
- Maintainer entries nested inside an application record
- Application metadata records (stored records and search queries share one shape)

The same model is used for both roles. A stored record has every field
populated; a query leaves fields it does not constrain at their empty
defaults ("" for scalars, [] for maintainers).
"""

from __future__ import annotations

from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field, field_validator


# Scalar fields compared by the matcher, in wire order.
SCALAR_FIELDS = (
    "title",
    "version",
    "company",
    "website",
    "source",
    "license",
    "description",
)


# ---------------------------------------------------------------------------
# Record Models
# ---------------------------------------------------------------------------


class Maintainer(BaseModel):
    """
    A single maintainer's contact information.

    Maintainers are immutable once created and belong to exactly one
    application record.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str = Field(
        default="",
        description="Maintainer's display name.",
    )
    email: str = Field(
        default="",
        description="Maintainer's email address.",
    )

    @field_validator("name", "email", mode="before")
    @classmethod
    def _null_to_empty(cls, value: Any) -> Any:
        return "" if value is None else value


class ApplicationMetadata(BaseModel):
    """
    Metadata describing a single application.

    Field declaration order is the wire order; the encoder relies on it.
    `title` is the uniqueness key within the store.
    """

    model_config = ConfigDict(extra="ignore")

    title: str = Field(
        default="",
        description="Unique application title.",
    )
    version: str = Field(
        default="",
        description="Application version string (e.g., '0.0.1').",
    )
    maintainers: List[Maintainer] = Field(
        default_factory=list,
        description="Ordered list of maintainers for this application.",
    )
    company: str = Field(
        default="",
        description="Company publishing the application.",
    )
    website: str = Field(
        default="",
        description="URL of the application's website.",
    )
    source: str = Field(
        default="",
        description="URL of the application's source repository.",
    )
    license: str = Field(
        default="",
        description="License identifier (e.g., 'Apache-2.0').",
    )
    description: str = Field(
        default="",
        description="Free-form description, usually markdown.",
    )

    @field_validator(*SCALAR_FIELDS, mode="before")
    @classmethod
    def _null_scalar_to_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("maintainers", mode="before")
    @classmethod
    def _null_list_to_empty(cls, value: Any) -> Any:
        return [] if value is None else value
