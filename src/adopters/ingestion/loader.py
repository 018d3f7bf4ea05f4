"""
Directory loader for adopter records.

Reads every record file of the adopters directory, validates it field by
field, checks the unverified list for duplicates and assembles the dataset.
Any invalid record aborts the whole load.
"""

from collections.abc import Iterable
from datetime import date
from pathlib import Path
from typing import Any

import yaml

from adopters.config.settings import LoaderConfig
from adopters.errors import ConfigurationError, SchemaError
from adopters.ingestion.duplicates import UnverifiedRegistry
from adopters.schemas.models import Adopter, AdoptersContent, UnverifiedAdopter
from adopters.utils.logging import get_logger, log_context
from adopters.validation.fields import (
    expect_non_empty_text,
    expect_number,
    parse_adoption_status,
    parse_category,
    parse_sources,
)

log = get_logger(__name__)


def _read_yaml(path: Path, source_id: str) -> Any:
    """Parse a YAML file, reporting decode and syntax errors against the record."""
    try:
        return yaml.safe_load(path.read_text(encoding="utf-8"))
    except (UnicodeDecodeError, yaml.YAMLError) as e:
        msg = f"{source_id} is not valid UTF-8 YAML: {e}"
        raise SchemaError(msg, source_id=source_id) from e


def _record_files(adopters_dir: Path, config: LoaderConfig) -> list[Path]:
    """List record files sorted by name, without the unverified list."""
    return sorted(
        path
        for path in adopters_dir.iterdir()
        if path.is_file()
        and path.name.endswith(config.extension)
        and path.name != config.others_filename
    )


def parse_adopter(data: Any, source_id: str) -> Adopter:
    """
    Validate one parsed record document into an Adopter.

    Args:
        data: Output of yaml.safe_load for the record file.
        source_id: Record file name, used in error messages.

    Returns:
        Validated adopter.

    Raises:
        SchemaError: If the document or any field is invalid.
    """
    if data is None:
        data = {}
    if not isinstance(data, dict):
        msg = f"{source_id} must contain a YAML object"
        raise SchemaError(msg, source_id=source_id)

    return Adopter(
        name=expect_non_empty_text(data.get("name"), "name", source_id),
        logo_url=expect_non_empty_text(data.get("logoUrl"), "logoUrl", source_id),
        website=expect_non_empty_text(data.get("website"), "website", source_id),
        description=expect_non_empty_text(
            data.get("description"), "description", source_id
        ),
        adoption_status=parse_adoption_status(
            data.get("scala3AdoptionStatus"), source_id
        ),
        category=parse_category(data.get("category"), source_id),
        size=expect_number(data.get("size"), "size", source_id),
        sources=parse_sources(data.get("sources"), source_id),
    )


def parse_unverified(
    data: Any, source_id: str, registry: UnverifiedRegistry
) -> list[UnverifiedAdopter]:
    """
    Validate the unverified list and check it for duplicates.

    Args:
        data: Output of yaml.safe_load for the unverified list file.
        source_id: File name, used in error messages.
        registry: Lookup sets seeded with the verified adopters.

    Returns:
        Entries in file order.

    Raises:
        SchemaError: If the document is not a list or an entry is invalid.
        DuplicateError: If an entry collides with an earlier one.
    """
    if data is None:
        data = []
    if not isinstance(data, list):
        msg = f"{source_id} must contain a YAML list"
        raise SchemaError(msg, source_id=source_id)

    entries: list[UnverifiedAdopter] = []
    for idx, item in enumerate(data):
        if not isinstance(item, dict):
            msg = f"Entry #{idx} in {source_id} must be an object with name and website"
            raise SchemaError(msg, source_id=source_id, field=f"others[{idx}]")
        entry = UnverifiedAdopter(
            name=expect_non_empty_text(
                item.get("name"), f"name (others[{idx}])", source_id
            ),
            website=expect_non_empty_text(
                item.get("website"), f"website (others[{idx}])", source_id
            ),
        )
        entries.append(registry.register(entry, source_id))
    return entries


def sort_adopters(adopters: Iterable[Adopter]) -> tuple[Adopter, ...]:
    """Order adopters by size descending, then by name."""
    return tuple(sorted(adopters, key=lambda a: (-a.size, a.name)))


def sort_unverified(entries: Iterable[UnverifiedAdopter]) -> tuple[UnverifiedAdopter, ...]:
    """Order unverified entries by name."""
    return tuple(sorted(entries, key=lambda e: e.name))


def load_adopters(
    site_dir: Path | str,
    config: LoaderConfig | None = None,
    *,
    today: date | None = None,
) -> AdoptersContent:
    """
    Load the adopters dataset from a site directory.

    Args:
        site_dir: Site root containing the adopters directory.
        config: Directory layout. Defaults to ``adopters/*.yaml`` with
            ``adopters/_others.yaml`` as the unverified list.
        today: Date stamped on the dataset. Defaults to the current date.

    Returns:
        The assembled, immutable dataset.

    Raises:
        ConfigurationError: If the directory is missing or holds no records.
        SchemaError: If any record or unverified entry is invalid.
        DuplicateError: If the unverified list contains a duplicate.
    """
    config = config or LoaderConfig()
    adopters_dir = config.resolve(Path(site_dir))
    if not adopters_dir.is_dir():
        msg = f"Missing adopters directory at {adopters_dir}"
        raise ConfigurationError(msg)

    with log_context(adopters_dir=str(adopters_dir)):
        log.info("Loading adopters")

        loaded: list[Adopter] = []
        for path in _record_files(adopters_dir, config):
            loaded.append(parse_adopter(_read_yaml(path, path.name), path.name))
            log.debug("Validated record", file=path.name)

        if not loaded:
            msg = f"No adopter entries found at {adopters_dir}"
            raise ConfigurationError(msg)
        adopters = sort_adopters(loaded)

        unverified: tuple[UnverifiedAdopter, ...] = ()
        others_path = adopters_dir / config.others_filename
        if others_path.is_file():
            registry = UnverifiedRegistry.from_adopters(adopters)
            data = _read_yaml(others_path, config.others_filename)
            unverified = sort_unverified(
                parse_unverified(data, config.others_filename, registry)
            )
        else:
            log.debug("No unverified list", file=config.others_filename)

        content = AdoptersContent(
            adopters=adopters,
            unverified=unverified,
            last_updated=today or date.today(),
        )
        log.info(
            "Loaded adopters",
            adopters=len(content.adopters),
            unverified=len(content.unverified),
        )

    return content
