"""YAML frontmatter extraction for SKILL.md documents.

A skill document starts with a header block::

    ---
    name: skill-name
    description: What this skill does and when to use it
    metadata:
      category: testing
    allowedTools: [Bash, Read]
    ---

Documents without a well-formed header are not skills. That is a routine
outcome, so it is returned as a failed ``FrontmatterResult`` instead of raised.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Dict, List

import yaml

from skillfinder.models import SkillMetadata
from skillfinder.utils.text import collapse_line_breaks

_FRONTMATTER_RE = re.compile(r"^---\n(.*?)\n---", re.DOTALL)

# Spellings accepted for the capability list
_ALLOWED_TOOLS_KEYS = ("allowedTools", "allowed-tools", "allowed_tools")


@dataclass(frozen=True, slots=True)
class FrontmatterResult:
    """Either parsed metadata or the reason the header was rejected."""

    metadata: SkillMetadata | None = None
    reason: str | None = None

    @property
    def ok(self) -> bool:
        return self.metadata is not None


def _rejected(reason: str) -> FrontmatterResult:
    return FrontmatterResult(reason=reason)


def _as_mapping(value: Any) -> Dict[str, Any] | None:
    if isinstance(value, dict):
        return value
    return None


def _as_string_list(value: Any) -> List[str] | None:
    if isinstance(value, list) and all(isinstance(item, str) for item in value):
        return value
    return None


def _find_allowed_tools(header: Dict[str, Any]) -> List[str] | None:
    for key in _ALLOWED_TOOLS_KEYS:
        if key in header:
            return _as_string_list(header[key])
    return None


def extract_metadata(text: str) -> FrontmatterResult:
    """Parse the frontmatter header at the start of ``text``."""
    match = _FRONTMATTER_RE.match(text.replace("\r\n", "\n"))
    if match is None:
        return _rejected("no frontmatter block")

    try:
        parsed = yaml.safe_load(match.group(1))
    except (yaml.YAMLError, ValueError) as exc:
        # timestamp-shaped values that are not real dates raise ValueError
        return _rejected(f"invalid YAML: {exc}")

    header = _as_mapping(parsed)
    if header is None:
        return _rejected("frontmatter is not a mapping")

    name = header.get("name")
    if not isinstance(name, str) or not name.strip():
        return _rejected("missing or non-string 'name'")

    description = header.get("description")
    if isinstance(description, str):
        description = collapse_line_breaks(description)
    else:
        description = ""

    return FrontmatterResult(
        metadata=SkillMetadata(
            name=name,
            description=description,
            metadata=_as_mapping(header.get("metadata")),
            allowed_tools=_find_allowed_tools(header),
        )
    )


def parse_frontmatter(text: str) -> SkillMetadata | None:
    """Return the skill metadata of ``text``, or None when it has no valid header."""
    return extract_metadata(text).metadata
