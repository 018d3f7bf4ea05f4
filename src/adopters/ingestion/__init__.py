"""
Ingestion layer for the adopters directory.

All record files are read through this module so that every value crosses
the same validation boundary before reaching the dataset.
"""

from adopters.ingestion.duplicates import UnverifiedRegistry
from adopters.ingestion.loader import load_adopters, sort_adopters, sort_unverified

__all__ = ["UnverifiedRegistry", "load_adopters", "sort_adopters", "sort_unverified"]
