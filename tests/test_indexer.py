"""Tests for the skill index builder."""

from __future__ import annotations

import dataclasses
import math
from pathlib import Path

import pytest

from conftest import write_skill
from skillfinder.index.indexer import Indexer, IndexStats, build_index, compute_idf, search_tokens_for
from skillfinder.ingestion.collection import SkillCollection
from skillfinder.models import SkillMetadata


def _entry(index, dir_name):
    return next(entry for entry in index.entries if entry.dir_name == dir_name)


class TestIndexStats:
    """Test IndexStats tracking."""

    def test_init_defaults(self) -> None:
        """Test default initialization."""
        stats = IndexStats()
        assert stats.indexed == 0
        assert stats.skipped == 0
        assert stats.skipped_dirs == []

    def test_increment(self) -> None:
        """Test counting indexed and skipped directories."""
        stats = IndexStats()
        stats.increment("indexed", "a")
        stats.increment("skipped", "b")

        assert stats.indexed == 1
        assert stats.skipped == 1
        assert stats.skipped_dirs == ["b"]


class TestComputeIdf:
    """Test compute_idf function."""

    def test_rare_tokens_weigh_more(self) -> None:
        """Should give rarer tokens a higher weight."""
        idf = compute_idf([frozenset({"a", "b"}), frozenset({"a"}), frozenset({"a", "c"})])

        assert idf["a"] == pytest.approx(0.0)
        assert idf["b"] == pytest.approx(math.log(3))
        assert idf["b"] > idf["a"]

    def test_empty(self) -> None:
        """Should return an empty map for no documents."""
        assert compute_idf([]) == {}


class TestSearchTokensFor:
    """Test search_tokens_for function."""

    def test_union_of_name_and_description(self) -> None:
        """Should tokenize name and description together."""
        tokens = search_tokens_for(SkillMetadata(name="react-hooks", description="State management"))

        assert tokens == frozenset({"react-hooks", "react", "hooks", "state", "management"})


class TestBuildIndex:
    """Test build_index over a skills directory."""

    def test_counts_valid_skills(self, skills_dir: Path) -> None:
        """Should index the six valid skills and nothing else."""
        index = build_index(skills_dir)

        assert len(index.entries) == 6
        assert index.total_docs == 6
        assert {entry.dir_name for entry in index.entries} == {
            "allowed-tools",
            "basic-skill",
            "empty-description",
            "multiline-description",
            "skill-with-hyphenated-resources",
            "skill-with-resources",
        }

    def test_skips_invalid_and_missing_frontmatter(self, skills_dir: Path) -> None:
        """Should leave out skills with bad or no headers."""
        dir_names = {entry.dir_name for entry in build_index(skills_dir).entries}

        assert "invalid-frontmatter" not in dir_names
        assert "no-frontmatter" not in dir_names
        assert "empty-folder" not in dir_names

    def test_extracts_fields(self, skills_dir: Path) -> None:
        """Should carry name, description and metadata."""
        basic = _entry(build_index(skills_dir), "basic-skill")

        assert basic.name == "basic-skill"
        assert basic.description == "A basic test skill for unit testing"
        assert basic.metadata.metadata == {"category": "testing", "difficulty": "easy"}

    def test_search_tokens(self, skills_dir: Path) -> None:
        """Should hold compound and part tokens of name and description."""
        basic = _entry(build_index(skills_dir), "basic-skill")

        assert isinstance(basic.search_tokens, frozenset)
        assert {"basic-skill", "basic", "skill", "unit", "testing"} <= basic.search_tokens

    def test_resources_detected(self, skills_dir: Path) -> None:
        """Should list markdown resource files."""
        index = build_index(skills_dir)
        with_resources = _entry(index, "skill-with-resources")
        basic = _entry(index, "basic-skill")

        assert with_resources.has_resources
        assert with_resources.resource_files == ("examples.md", "guide.md")
        assert not basic.has_resources
        assert basic.resource_files == ()

    def test_hyphenated_resource_names(self, skills_dir: Path) -> None:
        """Should detect resources with hyphenated file names."""
        entry = _entry(build_index(skills_dir), "skill-with-hyphenated-resources")

        assert entry.has_resources
        assert "implementation-playbook.md" in entry.resource_files
        assert "quick-start-guide.md" in entry.resource_files

    def test_multiline_description(self, skills_dir: Path) -> None:
        """Should fold the description into one line."""
        entry = _entry(build_index(skills_dir), "multiline-description")

        assert entry.description == "A multiline description written as a YAML folded scalar."
        assert "\n" not in entry.description

    def test_missing_description(self, skills_dir: Path) -> None:
        """Should index skills without a description."""
        entry = _entry(build_index(skills_dir), "empty-description")

        assert entry.description == ""

    def test_allowed_tools(self, skills_dir: Path) -> None:
        """Should carry the capability list."""
        entry = _entry(build_index(skills_dir), "allowed-tools")

        assert entry.metadata.allowed_tools == ["Bash", "Read"]

    def test_idf_weights(self, skills_dir: Path) -> None:
        """Rare tokens should outweigh common ones."""
        index = build_index(skills_dir)

        assert index.idf_scores["unit"] == pytest.approx(math.log(6 / 1))
        assert index.idf_scores["skill"] == pytest.approx(math.log(6 / 4))
        assert index.idf_scores["unit"] > index.idf_scores["skill"] >= 0

    def test_missing_directory(self, tmp_path: Path) -> None:
        """Should return an empty index without raising."""
        index = build_index(tmp_path / "nonexistent")

        assert index.entries == ()
        assert index.total_docs == 0
        assert dict(index.idf_scores) == {}

    def test_impossible_date_skipped(self, skills_dir: Path) -> None:
        """Should skip a skill with a bad date and keep its siblings."""
        write_skill(skills_dir, "bad-date", "---\nname: bad-date\ncreated: 2024-13-45\n---\n")

        index = build_index(skills_dir)

        assert index.total_docs == 6
        assert "bad-date" not in {entry.dir_name for entry in index.entries}

    def test_accepts_string_path(self, skills_dir: Path) -> None:
        """Should accept a plain string path."""
        assert build_index(str(skills_dir)).total_docs == 6

    def test_entries_are_immutable(self, skills_dir: Path) -> None:
        """Should not allow entries to be modified."""
        entry = build_index(skills_dir).entries[0]

        with pytest.raises(dataclasses.FrozenInstanceError):
            entry.has_resources = True  # type: ignore[misc]


class TestIndexer:
    """Test Indexer statistics."""

    def test_stats_after_build(self, skills_dir: Path) -> None:
        """Should count indexed and skipped directories."""
        indexer = Indexer(SkillCollection(skills_dir))
        indexer.build()

        assert indexer.stats.indexed == 6
        assert indexer.stats.skipped == 3
        assert sorted(indexer.stats.skipped_dirs) == ["empty-folder", "invalid-frontmatter", "no-frontmatter"]

    def test_rebuild_resets_stats(self, skills_dir: Path) -> None:
        """Should not accumulate counts across builds."""
        indexer = Indexer(SkillCollection(skills_dir))
        indexer.build()
        indexer.build()

        assert indexer.stats.indexed == 6
