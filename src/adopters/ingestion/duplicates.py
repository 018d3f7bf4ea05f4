"""
Duplicate detection for the unverified list.

Names and websites are compared case-insensitively, both against earlier
unverified entries and against the verified adopters.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field

from adopters.errors import DuplicateError
from adopters.schemas.models import Adopter, UnverifiedAdopter


@dataclass
class UnverifiedRegistry:
    """
    Lookup sets for one pass over the unverified list.

    Build a fresh registry for every load with from_adopters().
    """

    verified_names: frozenset[str]
    verified_websites: frozenset[str]
    seen_names: set[str] = field(default_factory=set)
    seen_websites: set[str] = field(default_factory=set)

    @classmethod
    def from_adopters(cls, adopters: Iterable[Adopter]) -> "UnverifiedRegistry":
        """
        Create a registry seeded with the verified adopters.

        Args:
            adopters: Verified adopters of the current load.

        Returns:
            Registry with empty unverified sets.
        """
        adopters = list(adopters)
        return cls(
            verified_names=frozenset(a.name.lower() for a in adopters),
            verified_websites=frozenset(a.website.lower() for a in adopters),
        )

    def register(self, entry: UnverifiedAdopter, source_id: str) -> UnverifiedAdopter:
        """
        Check an entry against everything seen so far and record it.

        Checks run in a fixed order: name among unverified entries, website
        among unverified entries, name among verified adopters, website
        among verified adopters.

        Args:
            entry: Validated unverified entry.
            source_id: File the entry came from, for error messages.

        Returns:
            The entry, unchanged.

        Raises:
            DuplicateError: On the first failing check.
        """
        name = entry.name.lower()
        website = entry.website.lower()

        if name in self.seen_names:
            msg = f'Duplicate name "{entry.name}" in {source_id}'
            raise DuplicateError(msg, check="unverified-name", value=entry.name)
        if website in self.seen_websites:
            msg = f'Duplicate website "{entry.website}" in {source_id}'
            raise DuplicateError(msg, check="unverified-website", value=entry.website)
        if name in self.verified_names:
            msg = f'Unverified adopter "{entry.name}" duplicates verified adopter name'
            raise DuplicateError(msg, check="verified-name", value=entry.name)
        if website in self.verified_websites:
            msg = (
                f'Unverified adopter website "{entry.website}" '
                "duplicates a verified adopter"
            )
            raise DuplicateError(msg, check="verified-website", value=entry.website)

        self.seen_names.add(name)
        self.seen_websites.add(website)
        return entry
