"""
Recompute derived catalog fields from the SKILL.md sources.

The only derived field is lineCount. Reading never raises: a missing or
unreadable SKILL.md keeps whatever count the catalog already stored.
"""

from pathlib import Path
from typing import Union

from skillbook.config import SKILL_FILENAME
from skillbook.models.catalog import Catalog, Skill


def skill_source_path(skills_root: Union[str, Path], skill_id: str) -> Path:
    """Location of a skill's source document: <skills_root>/<id>/SKILL.md."""
    return Path(skills_root) / skill_id / SKILL_FILENAME


def count_skill_lines(skills_root: Union[str, Path], skill_id: str, fallback: int) -> int:
    """Count lines in a skill's SKILL.md.

    A final segment without a trailing newline still counts as a line,
    and a trailing newline adds an empty last line.
    """
    source = skill_source_path(skills_root, skill_id)
    try:
        # newline="" keeps a lone \r from counting as a line break
        with open(source, encoding="utf-8", newline="") as f:
            content = f.read()
    except (OSError, UnicodeDecodeError):
        return fallback
    return len(content.split("\n"))


def refresh_line_count(skill: Skill, skills_root: Union[str, Path]) -> bool:
    """Update one skill's lineCount. Returns True if the value changed."""
    new_count = count_skill_lines(skills_root, skill.id, skill.line_count)
    changed = new_count != skill.line_count
    skill.line_count = new_count
    return changed


def normalize_catalog(catalog: Catalog, skills_root: Union[str, Path]) -> int:
    """Refresh lineCount for every skill.

    Returns:
        Number of skills whose count changed
    """
    return sum(1 for skill in catalog.skills if refresh_line_count(skill, skills_root))
