"""Pytest configuration and shared fixtures."""

from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest
import yaml


@pytest.fixture
def site_dir(tmp_path: Path) -> Path:
    """Create a site directory with an empty adopters directory."""
    (tmp_path / "adopters").mkdir()
    return tmp_path


@pytest.fixture
def adopters_dir(site_dir: Path) -> Path:
    """Return the adopters directory of the test site."""
    return site_dir / "adopters"


@pytest.fixture
def make_record() -> Callable[..., dict[str, Any]]:
    """Return a factory for valid record documents with overrides."""

    def _make(**overrides: Any) -> dict[str, Any]:
        record: dict[str, Any] = {
            "name": "Acme",
            "logoUrl": "https://acme.example/logo.png",
            "website": "https://acme.example",
            "description": "Builds rockets in Scala.",
            "scala3AdoptionStatus": "full",
            "category": "product company",
            "size": 10,
            "sources": ["https://acme.example/blog/scala-3"],
        }
        record.update(overrides)
        return record

    return _make


@pytest.fixture
def write_yaml(adopters_dir: Path) -> Callable[[str, Any], Path]:
    """Return a helper writing a YAML document into the adopters directory."""

    def _write(filename: str, data: Any) -> Path:
        path = adopters_dir / filename
        path.write_text(yaml.safe_dump(data, sort_keys=False), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def populated_site(
    site_dir: Path,
    write_yaml: Callable[[str, Any], Path],
    make_record: Callable[..., dict[str, Any]],
) -> Path:
    """Create a site with two verified adopters of equal size."""
    write_yaml(
        "zeta.yaml",
        make_record(
            name="Zeta",
            website="https://zeta.example",
            logoUrl="https://zeta.example/logo.svg",
            category="product company",
            size=10,
        ),
    )
    write_yaml(
        "acme.yaml",
        make_record(name="Acme", category="OSS Project", size=10),
    )
    return site_dir
