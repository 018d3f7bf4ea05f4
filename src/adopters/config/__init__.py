"""
Loader configuration with a typed Pydantic model.

Defaults match the standard site layout; a YAML file can override them.
"""

from adopters.config.loader import load_config
from adopters.config.settings import LoaderConfig

__all__ = ["LoaderConfig", "load_config"]
