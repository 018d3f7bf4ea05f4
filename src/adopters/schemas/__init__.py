"""
Typed records produced by the adopters loader.

Values only reach these models after passing the field validators in
adopters.validation.
"""

from adopters.schemas.models import (
    Adopter,
    AdoptersContent,
    AdoptionStatus,
    Category,
    UnverifiedAdopter,
)

__all__ = [
    "Adopter",
    "AdoptersContent",
    "AdoptionStatus",
    "Category",
    "UnverifiedAdopter",
]
