"""Append rendered Markdown to the staging README and publish it."""

from __future__ import annotations

import os
from pathlib import Path

from .errors import StagingFileError


def append_and_rename(staging: str | Path, output: str | Path, header: str, body: str) -> Path:
    """Append `header` then `body` to an existing staging file and rename it to `output`."""
    staging_path = Path(staging)
    output_path = Path(output)
    if not staging_path.is_file():
        raise StagingFileError(f"staging file {staging_path} does not exist")

    try:
        with staging_path.open("a", encoding="utf-8") as handle:
            handle.write(header)
            handle.write(body)
        os.replace(staging_path, output_path)
    except OSError as exc:
        raise StagingFileError(f"could not publish {staging_path} as {output_path}: {exc}") from exc
    return output_path


__all__ = ["append_and_rename"]
