"""
Adopter record models using Pydantic.

All models are frozen; a loaded dataset cannot be changed after assembly.
Serialization aliases give the camelCase keys the site expects.
"""

from datetime import date
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class AdoptionStatus(str, Enum):
    """Scala 3 adoption state reported by an adopter."""

    NOT_PLANNED = "not planned"
    PLANNED = "planned"
    PARTIAL = "partial"
    FULL = "full"


class Category(str, Enum):
    """Kind of organisation an adopter is."""

    PRODUCT_COMPANY = "product company"
    OSS_PROJECT = "OSS project"
    CONSULTING_COMPANY = "consulting company"


class Adopter(BaseModel):
    """A verified adopter loaded from one record file."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1, description="Display name")
    logo_url: str = Field(
        min_length=1, serialization_alias="logoUrl", description="Logo image URL"
    )
    website: str = Field(min_length=1, description="Website URL")
    description: str = Field(min_length=1, description="Short description")
    adoption_status: AdoptionStatus | None = Field(
        default=None,
        serialization_alias="scala3AdoptionStatus",
        description="Adoption state, None when unknown",
    )
    category: Category = Field(description="Organisation category")
    size: int | float = Field(description="Ranking weight, no unit or range")
    sources: tuple[str, ...] = Field(
        default=(), description="References backing the adoption claim"
    )


class UnverifiedAdopter(BaseModel):
    """An entry of the unverified list: name and website only."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    website: str = Field(min_length=1)


class AdoptersContent(BaseModel):
    """
    The assembled adopters dataset.

    Attributes:
        adopters: Verified adopters, by size descending then name.
        unverified: Unverified entries, by name.
        last_updated: Date the dataset was generated.
    """

    model_config = ConfigDict(frozen=True)

    adopters: tuple[Adopter, ...]
    unverified: tuple[UnverifiedAdopter, ...] = ()
    last_updated: date = Field(serialization_alias="lastUpdated")

    def to_global_data(self) -> dict[str, Any]:
        """
        Render the dataset as the JSON-ready mapping the site consumes.

        Returns:
            Mapping with ``adopters``, ``unverified`` and ``lastUpdated`` keys.
        """
        return self.model_dump(mode="json", by_alias=True)
