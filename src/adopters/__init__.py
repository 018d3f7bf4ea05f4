"""
Adopters: dataset loader for the adopters directory.

This package validates contributor-submitted adopter records, checks the
unverified list for duplicates, and assembles the dataset the site renders.
"""

from importlib.metadata import version

from adopters.errors import ConfigurationError, DuplicateError, SchemaError
from adopters.ingestion.loader import load_adopters
from adopters.schemas.models import AdoptersContent

__version__ = version("adopters")

__all__ = [
    "AdoptersContent",
    "ConfigurationError",
    "DuplicateError",
    "SchemaError",
    "__version__",
    "load_adopters",
]
