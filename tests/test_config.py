"""Tests for loader configuration."""

from pathlib import Path

import pytest

from adopters.config import LoaderConfig, load_config
from adopters.errors import ConfigurationError


class TestLoaderConfig:
    """Tests for LoaderConfig."""

    def test_defaults(self) -> None:
        """Test the standard site layout."""
        config = LoaderConfig()
        assert config.adopters_dir == Path("adopters")
        assert config.extension == ".yaml"
        assert config.others_filename == "_others.yaml"

    def test_resolve(self, tmp_path: Path) -> None:
        """Test resolving the records directory against a site directory."""
        assert LoaderConfig().resolve(tmp_path) == tmp_path / "adopters"

    def test_extension_needs_dot(self) -> None:
        """Test that an extension without a leading dot is rejected."""
        with pytest.raises(ValueError, match="must start with '.'"):
            LoaderConfig(extension="yaml")

    def test_others_filename_extension(self) -> None:
        """Test that the unverified list must use the record extension."""
        with pytest.raises(ValueError, match="others_filename must end with"):
            LoaderConfig(extension=".yml", others_filename="_others.yaml")

    def test_frozen(self) -> None:
        """Test that the config cannot be modified."""
        config = LoaderConfig()
        with pytest.raises(ValueError):
            config.extension = ".yml"  # type: ignore[misc]


class TestLoadConfig:
    """Tests for load_config."""

    def test_load_overrides(self, tmp_path: Path) -> None:
        """Test loading a layout from YAML."""
        config_path = tmp_path / "adopters.yaml"
        config_path.write_text(
            "adopters_dir: content/adopters\nextension: .yml\nothers_filename: unverified.yml\n",
            encoding="utf-8",
        )
        config = load_config(config_path)
        assert config.adopters_dir == Path("content/adopters")
        assert config.extension == ".yml"
        assert config.others_filename == "unverified.yml"

    def test_empty_file_uses_defaults(self, tmp_path: Path) -> None:
        """Test that an empty config file gives the default layout."""
        config_path = tmp_path / "adopters.yaml"
        config_path.write_text("", encoding="utf-8")
        assert load_config(config_path) == LoaderConfig()

    def test_invalid_utf8(self, tmp_path: Path) -> None:
        """Test that an undecodable config file raises ConfigurationError."""
        config_path = tmp_path / "adopters.yaml"
        config_path.write_bytes(b"adopters_dir: caf\xe9\n")
        with pytest.raises(ConfigurationError, match="Could not parse"):
            load_config(config_path)

    def test_missing_file(self, tmp_path: Path) -> None:
        """Test that a missing config file raises ConfigurationError."""
        with pytest.raises(ConfigurationError, match="Config file not found"):
            load_config(tmp_path / "missing.yaml")

    def test_not_a_mapping(self, tmp_path: Path) -> None:
        """Test that a list document is rejected."""
        config_path = tmp_path / "adopters.yaml"
        config_path.write_text("- adopters\n", encoding="utf-8")
        with pytest.raises(ConfigurationError, match="must contain a YAML mapping"):
            load_config(config_path)

    def test_invalid_values(self, tmp_path: Path) -> None:
        """Test that validation failures become ConfigurationError."""
        config_path = tmp_path / "adopters.yaml"
        config_path.write_text("extension: yaml\n", encoding="utf-8")
        with pytest.raises(ConfigurationError, match="Invalid config"):
            load_config(config_path)

    def test_malformed_yaml(self, tmp_path: Path) -> None:
        """Test that YAML syntax errors become ConfigurationError."""
        config_path = tmp_path / "adopters.yaml"
        config_path.write_text("extension: [\n", encoding="utf-8")
        with pytest.raises(ConfigurationError, match="Could not parse"):
            load_config(config_path)
