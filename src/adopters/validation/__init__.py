"""Field validation and reporting for adopter records."""

from adopters.validation.fields import (
    expect_non_empty_text,
    expect_number,
    expect_text,
    parse_adoption_status,
    parse_category,
    parse_sources,
)
from adopters.validation.reporter import ConsoleReporter

__all__ = [
    "ConsoleReporter",
    "expect_non_empty_text",
    "expect_number",
    "expect_text",
    "parse_adoption_status",
    "parse_category",
    "parse_sources",
]
