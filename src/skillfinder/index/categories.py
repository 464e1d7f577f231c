"""Keyword-based grouping of skills into browsable categories."""

from __future__ import annotations

from typing import Dict, Iterable, List, Tuple

from skillfinder.models import SkillEntry

OTHER_CATEGORY = "Other"

# Order matters: the first category with a matching keyword wins
CATEGORY_KEYWORDS: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("Frontend", ("react", "angular", "vue", "svelte", "nextjs", "frontend", "css", "tailwind", "ui", "ux")),
    ("Backend", ("backend", "nodejs", "express", "nestjs", "fastapi", "django", "rails", "api", "rest", "graphql")),
    ("AI & LLM", ("ai", "llm", "agent", "prompt", "rag", "claude", "openai", "embedding", "ml")),
    ("DevOps & Infra", ("docker", "kubernetes", "terraform", "aws", "gcp", "azure", "deployment", "infrastructure")),
    ("Data & Databases", ("data", "database", "sql", "postgres", "mongodb", "redis", "analytics", "pipeline", "etl")),
    ("Security", ("security", "penetration", "vulnerability", "audit", "owasp", "xss", "encryption")),
    ("Testing", ("test", "tdd", "testing", "e2e", "vitest", "jest", "playwright")),
    ("Mobile", ("mobile", "react-native", "flutter", "ios", "android", "expo")),
    ("Automation", ("automation", "workflow", "n8n", "zapier", "scraping", "bot")),
    ("Python", ("python", "django", "flask", "fastapi", "pandas")),
    ("TypeScript & JS", ("typescript", "javascript", "deno", "bun")),
    ("Architecture", ("architecture", "microservices", "system-design", "patterns", "monorepo")),
)


def categorize(dir_name: str, description: str) -> str:
    text = f"{dir_name} {description}".lower()
    for category, keywords in CATEGORY_KEYWORDS:
        if any(keyword in text for keyword in keywords):
            return category
    return OTHER_CATEGORY


def build_categories(entries: Iterable[SkillEntry]) -> Dict[str, List[str]]:
    """Map each category to the directory names of the skills it holds."""
    categories: Dict[str, List[str]] = {}
    for entry in entries:
        categories.setdefault(categorize(entry.dir_name, entry.description), []).append(entry.dir_name)
    return categories


def format_categories(categories: Dict[str, List[str]], total: int) -> str:
    lines = [f"{total} skills in {len(categories)} categories:", ""]
    for category, names in sorted(categories.items(), key=lambda item: (-len(item[1]), item[0])):
        lines.append(f"- **{category}** ({len(names)}): {', '.join(sorted(names))}")
    return "\n".join(lines)
