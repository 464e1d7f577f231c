"""Utility helpers for working with files and content hashes."""

from __future__ import annotations

import hashlib
import shutil
from pathlib import Path
from typing import Iterator

SKILL_FILENAME = "SKILL.md"


def iter_skill_dirs(root: Path) -> Iterator[Path]:
    """Yield sub-directories of ``root`` that contain a SKILL.md file."""
    for child in sorted(root.iterdir()):
        if child.is_dir() and (child / SKILL_FILENAME).is_file():
            yield child


def compute_text_sha256(text: str) -> str:
    """Compute SHA256 hash for a piece of text."""
    return hashlib.sha256(text.encode("utf-8")).hexdigest()


def copy_skill_dir(source: Path, target: Path) -> None:
    """Copy a whole skill directory, resources included."""
    shutil.copytree(source, target)
