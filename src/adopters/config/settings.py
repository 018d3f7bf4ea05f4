"""
Typed loader configuration using Pydantic.

Describes where the adopter records live relative to the site directory.
"""

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class LoaderConfig(BaseModel):
    """Layout of the adopters directory."""

    model_config = ConfigDict(frozen=True)

    adopters_dir: Path = Field(
        default=Path("adopters"),
        description="Records directory, relative to the site directory",
    )
    extension: str = Field(default=".yaml", description="Record file extension")
    others_filename: str = Field(
        default="_others.yaml",
        description="Reserved file holding the unverified list",
    )

    @field_validator("extension")
    @classmethod
    def validate_extension(cls, v: str) -> str:
        """Ensure the extension includes its leading dot."""
        if not v.startswith(".") or len(v) < 2:
            msg = f"extension must start with '.', got: {v!r}"
            raise ValueError(msg)
        return v

    @field_validator("others_filename")
    @classmethod
    def validate_others_filename(cls, v: str, info: Any) -> str:
        """Ensure the unverified list uses the record extension."""
        extension = info.data.get("extension")
        if extension is not None and not v.endswith(extension):
            msg = f"others_filename must end with {extension!r}, got: {v!r}"
            raise ValueError(msg)
        return v

    def resolve(self, site_dir: Path) -> Path:
        """
        Resolve the records directory against a site directory.

        Args:
            site_dir: Root of the site.

        Returns:
            Path to the records directory.
        """
        return site_dir / self.adopters_dir
