"""Read-only access to a directory of skills."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List

from skillfinder.utils.files import SKILL_FILENAME

LOGGER = logging.getLogger(__name__)

RESOURCES_DIRNAME = "resources"
RESOURCE_SUFFIX = ".md"


class SkillCollection:
    """A skills directory: one sub-directory per skill, each with a SKILL.md.

    Every read is best-effort. Missing or unreadable paths come back as an empty
    list or None, so callers treat them as "this member does not exist".
    """

    def __init__(self, root: Path | str) -> None:
        self.root = Path(root)

    def __repr__(self) -> str:
        return f"SkillCollection({str(self.root)!r})"

    def exists(self) -> bool:
        return self.root.is_dir()

    def members(self) -> List[str]:
        """Names of the sub-directories under the root, sorted."""
        try:
            return sorted(child.name for child in self.root.iterdir() if child.is_dir())
        except OSError as exc:
            LOGGER.debug("Cannot list skills directory %s: %s", self.root, exc)
            return []

    def skill_path(self, member: str) -> Path:
        return self.root / member / SKILL_FILENAME

    def read_skill(self, member: str) -> str | None:
        """Text of the member's SKILL.md, or None when it cannot be read."""
        return self._read_text(self.skill_path(member))

    def resource_files(self, member: str) -> List[str]:
        """Markdown files in the member's resources folder, sorted."""
        resource_dir = self.root / member / RESOURCES_DIRNAME
        try:
            names = [child.name for child in resource_dir.iterdir() if child.is_file()]
        except OSError:
            return []
        return sorted(name for name in names if name.endswith(RESOURCE_SUFFIX))

    def read_resource(self, member: str, filename: str) -> str | None:
        return self._read_text(self.root / member / RESOURCES_DIRNAME / filename)

    @staticmethod
    def _read_text(path: Path) -> str | None:
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            LOGGER.debug("Cannot read %s: %s", path, exc)
            return None


def as_collection(source: SkillCollection | Path | str) -> SkillCollection:
    if isinstance(source, SkillCollection):
        return source
    return SkillCollection(source)
