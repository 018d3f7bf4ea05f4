"""
Export of the adopters dataset as site global data.

Writes the same JSON mapping the site receives at build time.
"""

import json
from pathlib import Path

from adopters.schemas.models import AdoptersContent
from adopters.utils.logging import get_logger

log = get_logger(__name__)


def write_global_data(content: AdoptersContent, output_path: Path) -> Path:
    """
    Write a loaded dataset as JSON.

    Args:
        content: Dataset returned by load_adopters.
        output_path: Destination file. Parent directories are created.

    Returns:
        Path of the written file.
    """
    output_path.parent.mkdir(parents=True, exist_ok=True)
    payload = json.dumps(content.to_global_data(), indent=2, ensure_ascii=False)
    output_path.write_text(payload + "\n", encoding="utf-8")

    log.info(
        "Exported global data",
        path=str(output_path),
        adopters=len(content.adopters),
        unverified=len(content.unverified),
    )
    return output_path
