"""Keyword search over a skill index."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List

from skillfinder.models import SkillEntry, SkillIndex
from skillfinder.utils.text import tokenize

DEFAULT_LIMIT = 20
MIN_SCORE = 0.5
NAME_BONUS = 2.0
DESCRIPTION_BONUS = 1.0
PARTIAL_MATCH_FACTOR = 0.5
MIN_PARTIAL_LENGTH = 2

STOP_WORDS = frozenset(
    [
        "a", "an", "the", "build", "write", "create", "use", "using", "when",
        "this", "for", "from", "with", "that", "are", "has", "its", "was",
        "will", "your", "you", "is", "it", "in", "on", "of", "to", "be",
        "by", "at", "as", "and", "help", "need", "want", "how", "do", "can",
        "me", "i", "my", "show", "about", "what", "should", "please",
    ]
)


@dataclass(slots=True)
class SearchResult:
    name: str
    dir_name: str
    description: str
    score: float
    has_resources: bool


def query_tokens(query: str) -> List[str]:
    """Distinct meaningful tokens of ``query``, in first-seen order.

    Stop-words are dropped unless the query has nothing else.
    """
    raw_tokens = tokenize(query, expand_hyphens=False)
    meaningful = [token for token in raw_tokens if token not in STOP_WORDS] or raw_tokens
    return list(dict.fromkeys(meaningful))


def _best_token_score(query_token: str, entry: SkillEntry, weight: float) -> float:
    best = 0.0
    for token in entry.search_tokens:
        if token == query_token:
            return weight
        if (
            len(query_token) >= MIN_PARTIAL_LENGTH
            and len(token) >= MIN_PARTIAL_LENGTH
            and (query_token in token or token in query_token)
        ):
            best = weight * PARTIAL_MATCH_FACTOR
    return best


def _bonus_phrase(query: str) -> str:
    return " ".join(dict.fromkeys(query.lower().split()))


def score_entry(index: SkillIndex, entry: SkillEntry, tokens: List[str], query: str) -> float:
    """Relevance of one entry; unmatched query tokens do not dilute the score."""
    default_weight = math.log((index.total_docs or 1) + 1)
    score = 0.0
    matched = 0
    for token in tokens:
        token_score = _best_token_score(token, entry, index.idf_scores.get(token, default_weight))
        if token_score > 0:
            matched += 1
            score += token_score

    query_lower = _bonus_phrase(query)
    if query_lower in entry.name.lower():
        score += NAME_BONUS
    if query_lower in entry.description.lower():
        score += DESCRIPTION_BONUS

    return score / max(matched, 1)


def search_skills(index: SkillIndex, query: str, limit: int = DEFAULT_LIMIT) -> List[SearchResult]:
    """Rank the index against ``query``; best matches first, at most ``limit`` results."""
    tokens = query_tokens(query)
    if not tokens:
        return []

    results: List[SearchResult] = []
    for entry in index.entries:
        score = score_entry(index, entry, tokens, query)
        if score < MIN_SCORE:
            continue
        results.append(
            SearchResult(
                name=entry.name,
                dir_name=entry.dir_name,
                description=entry.description,
                score=round(score, 2),
                has_resources=entry.has_resources,
            )
        )

    results.sort(key=lambda result: result.score, reverse=True)
    return results[: max(int(limit), 0)]
