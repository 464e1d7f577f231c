"""Load full skill documents, optionally with their resource files."""

from __future__ import annotations

import logging

from skillfinder.ingestion.collection import SkillCollection
from skillfinder.models import SkillEntry, SkillIndex

LOGGER = logging.getLogger(__name__)

RESOURCE_SEPARATOR = "\n\n---\n\n# Resource: {filename}\n\n"


def find_entry(index: SkillIndex, name: str) -> SkillEntry | None:
    """Look a skill up by directory name or skill name, ignoring case."""
    wanted = name.strip().lower()
    for entry in index.entries:
        if entry.dir_name.lower() == wanted:
            return entry
    for entry in index.entries:
        if entry.name.lower() == wanted:
            return entry
    return None


def load_skill(
    entry: SkillEntry,
    collection: SkillCollection,
    include_resources: bool = False,
) -> str:
    """Return the SKILL.md text of ``entry``.

    With ``include_resources`` the markdown resources are appended in
    alphabetical order, each under a ``# Resource: <file>`` heading.
    """
    content = collection.read_skill(entry.dir_name)
    if content is None:
        raise FileNotFoundError(collection.skill_path(entry.dir_name))

    if not (include_resources and entry.has_resources):
        return content

    parts = [content]
    for filename in collection.resource_files(entry.dir_name):
        resource = collection.read_resource(entry.dir_name, filename)
        if resource is None:
            LOGGER.warning("Skipping unreadable resource %s/%s", entry.dir_name, filename)
            continue
        parts.append(RESOURCE_SEPARATOR.format(filename=filename) + resource)
    return "".join(parts)
