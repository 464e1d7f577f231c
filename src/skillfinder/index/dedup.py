"""Exact and near-duplicate detection across a skill collection."""

from __future__ import annotations

import logging
from itertools import combinations
from pathlib import Path
from typing import Dict, List

from skillfinder.ingestion.collection import SkillCollection, as_collection
from skillfinder.ingestion.frontmatter import parse_frontmatter
from skillfinder.models import DuplicateReport, NearDuplicate, SkillRecord
from skillfinder.utils.files import compute_text_sha256
from skillfinder.utils.text import word_set

LOGGER = logging.getLogger(__name__)

NEAR_DUPLICATE_THRESHOLD = 0.8


def jaccard_similarity(a: str, b: str) -> float:
    """Word-set overlap of two texts, between 0 and 1."""
    words_a = word_set(a)
    words_b = word_set(b)
    if not words_a and not words_b:
        return 1.0
    if not words_a or not words_b:
        return 0.0
    return len(words_a & words_b) / len(words_a | words_b)


def collect_records(collection: SkillCollection) -> List[SkillRecord]:
    """Name and description of every member with a valid header."""
    records: List[SkillRecord] = []
    for dir_name in collection.members():
        content = collection.read_skill(dir_name)
        if content is None:
            continue
        metadata = parse_frontmatter(content)
        if metadata is None:
            continue
        records.append(SkillRecord(dir_name=dir_name, name=metadata.name, description=metadata.description))
    return records


def _exact_groups(records: List[SkillRecord]) -> List[List[SkillRecord]]:
    groups: Dict[str, List[SkillRecord]] = {}
    for record in records:
        digest = compute_text_sha256(f"{record.name}\n{record.description}")
        groups.setdefault(digest, []).append(record)
    return [group for group in groups.values() if len(group) > 1]


def _near_pairs(records: List[SkillRecord]) -> List[NearDuplicate]:
    pairs: List[NearDuplicate] = []
    for a, b in combinations(records, 2):
        # Identical pairs belong to the exact groups
        if a.name == b.name and a.description == b.description:
            continue
        if not a.description or not b.description:
            continue
        similarity = jaccard_similarity(a.description, b.description)
        if similarity > NEAR_DUPLICATE_THRESHOLD:
            pairs.append(NearDuplicate(pair=(a, b), similarity=round(similarity, 2)))
    return pairs


def find_duplicates(source: SkillCollection | Path | str) -> DuplicateReport:
    """Report exact duplicate groups and near-duplicate pairs. Never raises on I/O problems."""
    records = collect_records(as_collection(source))
    report = DuplicateReport(exact_duplicates=_exact_groups(records), near_duplicates=_near_pairs(records))
    LOGGER.info(
        "Checked %d skills: %d exact duplicate group(s), %d near-duplicate pair(s)",
        len(records),
        len(report.exact_duplicates),
        len(report.near_duplicates),
    )
    return report
