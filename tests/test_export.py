"""Tests for the global data export."""

import json
from collections.abc import Callable
from datetime import date
from pathlib import Path
from typing import Any

from adopters import load_adopters
from adopters.export import write_global_data


class TestGlobalData:
    """Tests for AdoptersContent.to_global_data."""

    def test_shape(self, populated_site: Path, write_yaml: Callable[[str, Any], Path]) -> None:
        """Test the keys and canonical values the site receives."""
        write_yaml("_others.yaml", [{"name": "Foo", "website": "foo.com"}])
        content = load_adopters(populated_site, today=date(2024, 5, 17))

        data = content.to_global_data()

        assert set(data) == {"adopters", "unverified", "lastUpdated"}
        assert data["lastUpdated"] == "2024-05-17"
        assert data["unverified"] == [{"name": "Foo", "website": "foo.com"}]
        acme = data["adopters"][0]
        assert acme == {
            "name": "Acme",
            "logoUrl": "https://acme.example/logo.png",
            "website": "https://acme.example",
            "description": "Builds rockets in Scala.",
            "scala3AdoptionStatus": "full",
            "category": "OSS project",
            "size": 10,
            "sources": ["https://acme.example/blog/scala-3"],
        }
        assert data["adopters"][1]["category"] == "product company"

    def test_unknown_status_is_null(
        self,
        site_dir: Path,
        write_yaml: Callable[[str, Any], Path],
        make_record: Callable[..., dict[str, Any]],
    ) -> None:
        """Test that an unknown status is exported as null."""
        write_yaml("acme.yaml", make_record(scala3AdoptionStatus=""))
        data = load_adopters(site_dir).to_global_data()
        assert data["adopters"][0]["scala3AdoptionStatus"] is None


class TestWriteGlobalData:
    """Tests for write_global_data."""

    def test_writes_json(self, populated_site: Path, tmp_path: Path) -> None:
        """Test that the file round-trips to the global data mapping."""
        content = load_adopters(populated_site, today=date(2024, 5, 17))
        output = tmp_path / "build" / "nested" / "adopters.json"

        written = write_global_data(content, output)

        assert written == output
        assert json.loads(output.read_text(encoding="utf-8")) == content.to_global_data()

    def test_keeps_unicode(
        self,
        site_dir: Path,
        tmp_path: Path,
        write_yaml: Callable[[str, Any], Path],
        make_record: Callable[..., dict[str, Any]],
    ) -> None:
        """Test that non-ASCII text is written as-is."""
        write_yaml("acme.yaml", make_record(name="Société Générale"))
        output = tmp_path / "adopters.json"
        write_global_data(load_adopters(site_dir), output)
        assert "Société Générale" in output.read_text(encoding="utf-8")
