"""Application configuration defaults."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

SKILLS_DIR_ENV = "SKILLFINDER_SKILLS_DIR"


def _get_default_skills_dir() -> Path:
    """Get the default skills directory based on environment and working directory."""
    from_env = os.environ.get(SKILLS_DIR_ENV)
    if from_env:
        return Path(from_env).expanduser()

    # When running from a checkout, prefer a local skills/ folder
    local_dir = Path("skills")
    if local_dir.is_dir():
        return local_dir

    return Path.home() / ".skillfinder" / "skills"


@dataclass(slots=True)
class AppConfig:
    skills_dir: Path | None = None
    search_limit: int = 20

    def __post_init__(self) -> None:
        if self.skills_dir is None:
            self.skills_dir = _get_default_skills_dir()

    def resolve_skills_dir(self, base_dir: Path | None = None) -> Path:
        if self.skills_dir is None:
            self.skills_dir = _get_default_skills_dir()
        skills_dir = Path(self.skills_dir).expanduser()
        if skills_dir.is_absolute() or base_dir is None:
            return skills_dir
        return base_dir / skills_dir
