"""Core SkillFinder data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Tuple


@dataclass(frozen=True, slots=True)
class SkillMetadata:
    """Typed view of a skill's frontmatter header."""

    name: str
    description: str = ""
    metadata: Dict[str, Any] | None = None
    allowed_tools: List[str] | None = None


@dataclass(frozen=True, slots=True)
class SkillEntry:
    """One indexed skill directory."""

    dir_name: str
    metadata: SkillMetadata
    search_tokens: frozenset[str]
    has_resources: bool = False
    resource_files: Tuple[str, ...] = ()

    @property
    def name(self) -> str:
        return self.metadata.name

    @property
    def description(self) -> str:
        return self.metadata.description


@dataclass(frozen=True, slots=True)
class SkillIndex:
    """Entries plus the IDF weight of every token seen across them."""

    entries: Tuple[SkillEntry, ...] = ()
    idf_scores: Mapping[str, float] = field(default_factory=dict)
    total_docs: int = 0


@dataclass(frozen=True, slots=True)
class SkillRecord:
    """Name and description of a skill, as compared by the duplicate detector."""

    dir_name: str
    name: str
    description: str


@dataclass(slots=True)
class NearDuplicate:
    pair: Tuple[SkillRecord, SkillRecord]
    similarity: float


@dataclass(slots=True)
class DuplicateReport:
    exact_duplicates: List[List[SkillRecord]] = field(default_factory=list)
    near_duplicates: List[NearDuplicate] = field(default_factory=list)
