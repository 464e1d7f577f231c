"""Skill indexing pipeline."""

from __future__ import annotations

import logging
import math
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List

from skillfinder.ingestion.collection import SkillCollection, as_collection
from skillfinder.ingestion.frontmatter import extract_metadata
from skillfinder.models import SkillEntry, SkillIndex, SkillMetadata
from skillfinder.utils.text import tokenize

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class IndexStats:
    indexed: int = 0
    skipped: int = 0
    skipped_dirs: list[str] = field(default_factory=list)

    def increment(self, status: str, dir_name: str) -> None:
        if status == "indexed":
            self.indexed += 1
        else:
            self.skipped += 1
            self.skipped_dirs.append(dir_name)


def search_tokens_for(metadata: SkillMetadata) -> frozenset[str]:
    """Union of the name and description tokens."""
    return frozenset(tokenize(metadata.name)) | frozenset(tokenize(metadata.description))


def compute_idf(token_sets: Iterable[frozenset[str]]) -> Dict[str, float]:
    """IDF weight ``ln(N / df)`` for every token present in at least one set."""
    document_frequency: Counter[str] = Counter()
    total_docs = 0
    for tokens in token_sets:
        total_docs += 1
        document_frequency.update(tokens)
    return {token: math.log(total_docs / df) for token, df in document_frequency.items()}


class Indexer:
    """Scans a skill collection and builds an in-memory search index."""

    def __init__(self, collection: SkillCollection) -> None:
        self.collection = collection
        self.stats = IndexStats()

    def build(self) -> SkillIndex:
        self.stats = IndexStats()
        if not self.collection.exists():
            LOGGER.warning("Skills directory not found: %s", self.collection.root)
            return SkillIndex()

        entries: List[SkillEntry] = []
        for dir_name in self.collection.members():
            entry = self._index_single(dir_name)
            if entry is None:
                self.stats.increment("skipped", dir_name)
                continue
            entries.append(entry)
            self.stats.increment("indexed", dir_name)

        # IDF needs the complete entry set
        idf_scores = compute_idf(entry.search_tokens for entry in entries)
        LOGGER.info(
            "Indexed %d skills from %s (%d skipped, %d distinct tokens)",
            len(entries),
            self.collection.root,
            self.stats.skipped,
            len(idf_scores),
        )
        return SkillIndex(entries=tuple(entries), idf_scores=idf_scores, total_docs=len(entries))

    def _index_single(self, dir_name: str) -> SkillEntry | None:
        content = self.collection.read_skill(dir_name)
        if content is None:
            LOGGER.debug("Skipping %s: no readable SKILL.md", dir_name)
            return None

        result = extract_metadata(content)
        if result.metadata is None:
            LOGGER.debug("Skipping %s: %s", dir_name, result.reason)
            return None

        resource_files = self.collection.resource_files(dir_name)
        return SkillEntry(
            dir_name=dir_name,
            metadata=result.metadata,
            search_tokens=search_tokens_for(result.metadata),
            has_resources=bool(resource_files),
            resource_files=tuple(resource_files),
        )


def build_index(source: SkillCollection | Path | str) -> SkillIndex:
    """Build the search index for a skills directory. Never raises on I/O problems."""
    return Indexer(as_collection(source)).build()
