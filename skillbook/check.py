"""
Consistency checks between skills-meta.json and the SKILL.md sources.

Nothing here blocks a sync. `skillbook check` reports:
- duplicate skill or category ids
- skills whose category is not a known category id
- skills with no SKILL.md
- SKILL.md frontmatter whose `category:` disagrees with the catalog
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Union

import yaml

from skillbook.models.catalog import Catalog
from skillbook.normalize import skill_source_path

logger = logging.getLogger(__name__)


@dataclass
class CheckIssue:
    """One problem found in the catalog."""
    kind: str  # duplicate_id, unknown_category, missing_source, category_mismatch
    skill_id: str
    message: str

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind, "skill_id": self.skill_id, "message": self.message}


@dataclass
class CheckReport:
    skills: int = 0
    issues: List[CheckIssue] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.issues

    def by_kind(self, kind: str) -> List[CheckIssue]:
        return [i for i in self.issues if i.kind == kind]


def read_frontmatter(content: str) -> Dict[str, Any]:
    """Parse YAML frontmatter. Returns {} when absent or invalid."""
    if not content.startswith("---"):
        return {}
    parts = content.split("\n---", 1)
    if len(parts) < 2:
        return {}
    try:
        data = yaml.safe_load(parts[0][3:]) or {}
    except yaml.YAMLError as e:
        logger.warning(f"Invalid frontmatter: {e}")
        return {}
    return data if isinstance(data, dict) else {}


def check_catalog(catalog: Catalog, skills_root: Union[str, Path]) -> CheckReport:
    """Run all checks against a catalog."""
    report = CheckReport(skills=len(catalog.skills))

    seen_categories = set()
    for category in catalog.categories:
        if category.id in seen_categories:
            report.issues.append(CheckIssue(
                "duplicate_id", "", f"Category id '{category.id}' appears more than once"
            ))
        seen_categories.add(category.id)

    seen_skills = set()
    for skill in catalog.skills:
        if skill.id in seen_skills:
            report.issues.append(CheckIssue(
                "duplicate_id", skill.id, f"Skill id '{skill.id}' appears more than once"
            ))
        seen_skills.add(skill.id)

        if skill.category not in seen_categories:
            report.issues.append(CheckIssue(
                "unknown_category", skill.id,
                f"Category '{skill.category}' is not defined in categories",
            ))

        source = skill_source_path(skills_root, skill.id)
        try:
            content = source.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError):
            report.issues.append(CheckIssue(
                "missing_source", skill.id, f"{source} not found or unreadable"
            ))
            continue

        declared = read_frontmatter(content).get("category")
        if declared is not None and str(declared) != skill.category:
            report.issues.append(CheckIssue(
                "category_mismatch", skill.id,
                f"SKILL.md says category '{declared}', catalog says '{skill.category}'",
            ))

    return report
