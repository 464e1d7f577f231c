"""Shared fixtures: a small skills directory on disk."""

from __future__ import annotations

from pathlib import Path

import pytest

SKILLS = {
    "basic-skill": (
        "---\n"
        "name: basic-skill\n"
        "description: A basic test skill for unit testing\n"
        "metadata:\n"
        "  category: testing\n"
        "  difficulty: easy\n"
        "---\n\n"
        "# Basic Skill\n\n"
        "This is a basic skill used for testing.\n"
    ),
    "skill-with-resources": (
        "---\n"
        "name: skill-with-resources\n"
        "description: A skill that ships extra resource documents\n"
        "---\n\n"
        "# Skill With Resources\n\n"
        "See the resources folder.\n"
    ),
    "multiline-description": (
        "---\n"
        "name: multiline-description\n"
        "description: >\n"
        "  A multiline description\n"
        "  written as a YAML folded scalar.\n"
        "---\n\n"
        "# Multiline\n"
    ),
    "skill-with-hyphenated-resources": (
        "---\n"
        "name: skill-with-hyphenated-resources\n"
        "description: Playbooks and quick start guides\n"
        "---\n\n"
        "# Hyphenated Resources\n"
    ),
    "empty-description": (
        "---\n"
        "name: empty-description\n"
        "---\n\n"
        "# Empty Description\n"
    ),
    "allowed-tools": (
        "---\n"
        "name: allowed-tools\n"
        "description: A skill restricted to a fixed tool list\n"
        "allowedTools:\n"
        "  - Bash\n"
        "  - Read\n"
        "---\n\n"
        "# Allowed Tools\n"
    ),
    "invalid-frontmatter": (
        "---\n"
        "name: [unclosed\n"
        "description: broken\n"
        "---\n\n"
        "# Invalid\n"
    ),
    "no-frontmatter": "# No Frontmatter\n\nJust markdown.\n",
}

RESOURCES = {
    "skill-with-resources": {
        "guide.md": "# Guide\n\nStep by step.\n",
        "examples.md": "# Examples\n\nSome examples.\n",
        "notes.txt": "not markdown\n",
    },
    "skill-with-hyphenated-resources": {
        "implementation-playbook.md": "# Playbook\n",
        "quick-start-guide.md": "# Quick Start\n",
    },
}


def write_skill(root: Path, dir_name: str, content: str) -> Path:
    skill_dir = root / dir_name
    skill_dir.mkdir(parents=True, exist_ok=True)
    (skill_dir / "SKILL.md").write_text(content, encoding="utf-8")
    return skill_dir


def skill_doc(name: str, description: str) -> str:
    return f"---\nname: {name}\ndescription: {description}\n---\n\n# {name}\n"


@pytest.fixture
def skills_dir(tmp_path: Path) -> Path:
    """Six valid skills, two invalid ones, a stray file and an empty folder."""
    root = tmp_path / "skills"
    root.mkdir()
    for dir_name, content in SKILLS.items():
        write_skill(root, dir_name, content)
    for dir_name, files in RESOURCES.items():
        resource_dir = root / dir_name / "resources"
        resource_dir.mkdir()
        for filename, content in files.items():
            (resource_dir / filename).write_text(content, encoding="utf-8")
    (root / "README.md").write_text("# Not a skill\n", encoding="utf-8")
    (root / "empty-folder").mkdir()
    return root
