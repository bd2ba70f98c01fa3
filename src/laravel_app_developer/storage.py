"""Writes rendered development plans into the configured output directory."""

from __future__ import annotations

import logging
from pathlib import Path, PurePath

logger = logging.getLogger(__name__)

DEFAULT_PLAN_FILE = "DEVELOPMENT_PLAN.md"


def validate_file_name(file_name: str) -> str:
    """Accept a bare file name only; anything with a directory part is rejected."""
    if not file_name or file_name in (".", ".."):
        raise ValueError(f"Invalid output file name: {file_name!r}")
    if PurePath(file_name).name != file_name or "/" in file_name or "\\" in file_name:
        raise ValueError(f"Output file must be a file name without directories: {file_name!r}")
    return file_name


def save_plan(content: str, output_directory: Path, file_name: str = DEFAULT_PLAN_FILE) -> Path:
    """Write ``content`` to ``output_directory/file_name``, creating the directory if needed."""
    file_name = validate_file_name(file_name)
    output_directory = Path(output_directory)
    output_directory.mkdir(parents=True, exist_ok=True)

    path = output_directory / file_name
    path.write_text(content, encoding="utf-8")
    logger.info("Wrote development plan to %s (%d bytes)", path, len(content.encode("utf-8")))
    return path
