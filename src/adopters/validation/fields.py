"""
Field validators for untyped YAML values.

Each function takes a value straight from ``yaml.safe_load`` together with
the record it came from, and returns a typed, normalized value or raises
SchemaError naming both the field and the record.
"""

import math
from datetime import date
from typing import Any

from adopters.errors import SchemaError
from adopters.schemas.models import AdoptionStatus, Category

STATUS_FIELD = "scala3AdoptionStatus"
CATEGORY_FIELD = "category"
SOURCES_FIELD = "sources"

# Accepted lowercase spelling -> canonical value
ALLOWED_STATUSES: dict[str, AdoptionStatus] = {
    "not planned": AdoptionStatus.NOT_PLANNED,
    "planned": AdoptionStatus.PLANNED,
    "partial": AdoptionStatus.PARTIAL,
    "full": AdoptionStatus.FULL,
}

ALLOWED_CATEGORIES: dict[str, Category] = {
    "product company": Category.PRODUCT_COMPANY,
    "oss project": Category.OSS_PROJECT,
    "consulting company": Category.CONSULTING_COMPANY,
}


def _allowed(table: dict[str, Any]) -> str:
    return ", ".join(member.value for member in table.values())


def expect_text(value: Any, field: str, source_id: str) -> str:
    """
    Require a string and return it trimmed.

    Empty strings are accepted; see expect_non_empty_text.
    """
    if isinstance(value, (bool, date)):
        msg = (
            f'Field "{field}" in {source_id} must be a string; YAML read '
            f"it as {type(value).__name__} {value}, so put the value in quotes"
        )
        raise SchemaError(msg, source_id=source_id, field=field)
    if not isinstance(value, str):
        msg = f'Field "{field}" in {source_id} must be a string'
        raise SchemaError(msg, source_id=source_id, field=field)
    return value.strip()


def expect_non_empty_text(value: Any, field: str, source_id: str) -> str:
    """Require a string that is not blank and return it trimmed."""
    text = expect_text(value, field, source_id)
    if not text:
        msg = f'Field "{field}" in {source_id} must not be empty'
        raise SchemaError(msg, source_id=source_id, field=field)
    return text


def _parse_numeric_text(text: str) -> int | float | None:
    # int() and float() also take digit separators and non-ASCII digits
    if not text.isascii() or "_" in text:
        return None
    try:
        return int(text)
    except ValueError:
        pass
    try:
        parsed = float(text)
    except ValueError:
        return None
    return parsed if math.isfinite(parsed) else None


def expect_number(value: Any, field: str, source_id: str) -> int | float:
    """
    Require a finite number, given directly or as numeric text.

    Booleans are rejected even though Python treats them as integers.

    Args:
        value: Raw YAML value.
        field: Field name for error messages.
        source_id: Record identifier for error messages.

    Returns:
        The number, as int when it is integral text or an int value.

    Raises:
        SchemaError: If the value is not a finite number.
    """
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, float) and math.isfinite(value):
        return value
    if isinstance(value, str) and value.strip():
        parsed = _parse_numeric_text(value.strip())
        if parsed is not None:
            return parsed
    msg = f'Field "{field}" in {source_id} must be a number'
    raise SchemaError(msg, source_id=source_id, field=field)


def parse_adoption_status(value: Any, source_id: str) -> AdoptionStatus | None:
    """
    Normalize an adoption status.

    Missing or blank values mean the status is unknown and yield None.

    Raises:
        SchemaError: If the value is not one of the allowed statuses.
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    key = expect_text(value, STATUS_FIELD, source_id).lower()
    status = ALLOWED_STATUSES.get(key)
    if status is None:
        msg = (
            f'Invalid {STATUS_FIELD} "{value}" in {source_id}. '
            f"Allowed values: {_allowed(ALLOWED_STATUSES)}"
        )
        raise SchemaError(msg, source_id=source_id, field=STATUS_FIELD)
    return status


def parse_category(value: Any, source_id: str) -> Category:
    """
    Normalize a category. Unlike the status, a category is always required.

    Raises:
        SchemaError: If the value is missing, blank or not an allowed category.
    """
    key = expect_text(value, CATEGORY_FIELD, source_id).lower()
    category = ALLOWED_CATEGORIES.get(key)
    if category is None:
        msg = (
            f'Invalid {CATEGORY_FIELD} "{value}" in {source_id}. '
            f"Allowed values: {_allowed(ALLOWED_CATEGORIES)}"
        )
        raise SchemaError(msg, source_id=source_id, field=CATEGORY_FIELD)
    return category


def parse_sources(value: Any, source_id: str) -> tuple[str, ...]:
    """
    Normalize the sources field to a tuple of trimmed strings.

    Accepts nothing (empty tuple), a single string, or a list of strings.
    """
    if value is None:
        return ()
    if isinstance(value, str):
        return (expect_text(value, SOURCES_FIELD, source_id),)
    if isinstance(value, list):
        return tuple(
            expect_text(entry, f"{SOURCES_FIELD}[{idx}]", source_id)
            for idx, entry in enumerate(value)
        )
    msg = f'Field "{SOURCES_FIELD}" in {source_id} must be a list of strings'
    raise SchemaError(msg, source_id=source_id, field=SOURCES_FIELD)
