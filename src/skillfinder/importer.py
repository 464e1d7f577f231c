"""Copy skills from another skills directory into the local collection."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from skillfinder.utils.files import copy_skill_dir, iter_skill_dirs

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class ImportReport:
    added: list[str] = field(default_factory=list)
    conflicts: list[str] = field(default_factory=list)
    dry_run: bool = True


def import_skills(source_dir: Path, target_dir: Path, *, dry_run: bool = True) -> ImportReport:
    """Copy every skill directory of ``source_dir`` not already in ``target_dir``.

    Existing directory names are left untouched and reported as conflicts.
    With ``dry_run`` nothing is written.
    """
    if not source_dir.is_dir():
        raise FileNotFoundError(f"Source directory not found: {source_dir}")
    if target_dir.exists() and not target_dir.is_dir():
        raise NotADirectoryError(f"Target is not a directory: {target_dir}")

    existing = {child.name for child in target_dir.iterdir()} if target_dir.is_dir() else set()
    report = ImportReport(dry_run=dry_run)

    if not dry_run:
        target_dir.mkdir(parents=True, exist_ok=True)

    for skill_dir in iter_skill_dirs(source_dir):
        if skill_dir.name in existing:
            LOGGER.warning("Skipping %s: already exists in %s", skill_dir.name, target_dir)
            report.conflicts.append(skill_dir.name)
            continue

        if not dry_run:
            copy_skill_dir(skill_dir, target_dir / skill_dir.name)
        LOGGER.debug("Imported %s", skill_dir.name)
        report.added.append(skill_dir.name)

    return report
