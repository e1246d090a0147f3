"""
Legacy mirror generator.

Writes one flattened markdown file per skill to
<legacy_dir>/<category>/<id>.md with the YAML frontmatter removed, plus an
INDEX.md that groups the mirrored skills by category. Automation-only
skills are never mirrored.
"""

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Set, Union

from skillbook.config import DEFAULT_EXCLUDED_IDS
from skillbook.fileio import write_text_atomic
from skillbook.models.catalog import Catalog, Skill
from skillbook.normalize import skill_source_path

logger = logging.getLogger(__name__)


FRONTMATTER_MARKER = "---"

# Closing marker: "---" alone on a line, preceded by a newline
_CLOSING_MARKER = re.compile(r"\n---[ \t]*(?:\r?\n|$)")
_LEADING_BLANK_LINES = re.compile(r"\A(?:[ \t]*\r?\n)+")

INDEX_HEADER = "# Skill Book Index"
INDEX_PREAMBLE = [
    "Expert skills mirrored from the skillbook plugin.",
    "Find the entry matching your task below, then read that file",
    "from this directory before you start working.",
]
UNCATEGORIZED_LABEL = "Uncategorized"


@dataclass
class LegacyResult:
    """Result of writing the legacy mirror."""
    legacy_dir: str
    index_path: str
    synced: int = 0
    skipped: List[str] = field(default_factory=list)  # No SKILL.md, or a path outside the mirror
    excluded: List[str] = field(default_factory=list)
    written: Set[str] = field(default_factory=set)  # Absolute paths, the valid set

    def to_dict(self) -> Dict[str, Any]:
        return {
            "legacy_dir": self.legacy_dir,
            "index_path": self.index_path,
            "synced": self.synced,
            "skipped": self.skipped,
            "excluded": self.excluded,
            "written": sorted(self.written),
        }


def strip_frontmatter(content: str) -> str:
    """Remove a leading YAML frontmatter block.

    The block must open on the very first line with "---" and close with
    another "---" on its own line. Without both, the content comes back
    unchanged. Blank lines directly after the block are dropped too.
    """
    if not (content.startswith("---\n") or content.startswith("---\r\n")):
        return content

    match = _CLOSING_MARKER.search(content, len(FRONTMATTER_MARKER))
    if not match:
        return content

    body = content[match.end():]
    return _LEADING_BLANK_LINES.sub("", body)


def legacy_relpath(skill: Skill) -> str:
    """Mirror path of a skill relative to the legacy dir: <category>/<id>.md."""
    return f"{skill.category}/{skill.id}.md"


def eligible_skills(catalog: Catalog, excluded_ids: Iterable[str]) -> List[Skill]:
    """Skills that belong in the mirror, in catalog order."""
    excluded = set(excluded_ids)
    return [s for s in catalog.skills if s.id not in excluded]


def generate_index_md(
    catalog: Union[Catalog, Dict[str, Any]],
    excluded_ids: Optional[Iterable[str]] = None,
) -> str:
    """Generate INDEX.md content.

    Categories appear in catalog order, and only when at least one of their
    skills is eligible. Each skill gets a `### <category>/<id>.md` heading
    with its Korean description on the next line. Skills pointing at an
    unknown category are listed last under "Uncategorized".

    Args:
        catalog: Catalog object or the raw skills-meta.json mapping
        excluded_ids: Skill ids to leave out (defaults to the automation set)

    Returns:
        INDEX.md content
    """
    if excluded_ids is None:
        excluded_ids = DEFAULT_EXCLUDED_IDS

    catalog = Catalog.coerce(catalog)
    skills = eligible_skills(catalog, excluded_ids)

    lines = [INDEX_HEADER, ""]
    lines.extend(INDEX_PREAMBLE)
    lines.append("")

    for category in catalog.categories:
        members = [s for s in skills if s.category == category.id]
        if not members:
            continue
        lines.extend(_index_section(category.label or category.id, members))

    known = set(catalog.category_ids())
    orphans = [s for s in skills if s.category not in known]
    if orphans:
        lines.extend(_index_section(UNCATEGORIZED_LABEL, orphans))

    return "\n".join(lines)


def _index_section(label: str, skills: List[Skill]) -> List[str]:
    lines = [f"## {label}", ""]
    for skill in skills:
        lines.append(f"### {legacy_relpath(skill)}")
        lines.append(skill.description.ko)
        lines.append("")
    return lines


def _inside_category_dir(legacy_dir: Path, target: Path) -> bool:
    """True when target sits in a subdirectory of legacy_dir, not the root itself."""
    root = legacy_dir.resolve()
    resolved = target.resolve()
    return root in resolved.parents and resolved.parent != root


def write_legacy_mirror(
    catalog: Catalog,
    skills_root: Union[str, Path],
    legacy_dir: Union[str, Path],
    excluded_ids: Iterable[str],
    index_name: str = "INDEX.md",
) -> LegacyResult:
    """Write the mirrored skill files and INDEX.md.

    A skill whose SKILL.md is missing or unreadable is skipped with a
    warning, as is one whose category would place it outside a
    subdirectory of legacy_dir. The returned `written` set is the valid set the reconciler
    sweeps against.

    Args:
        catalog: Normalized catalog
        skills_root: Directory holding <id>/SKILL.md sources
        legacy_dir: Mirror root
        excluded_ids: Skill ids never mirrored
        index_name: File name of the index inside legacy_dir

    Returns:
        LegacyResult with counts and the set of written paths
    """
    excluded_ids = list(excluded_ids)
    legacy_dir = Path(legacy_dir)
    index_path = legacy_dir / index_name

    result = LegacyResult(legacy_dir=str(legacy_dir), index_path=str(index_path))
    result.excluded = [s.id for s in catalog.skills if s.id in set(excluded_ids)]

    for skill in eligible_skills(catalog, excluded_ids):
        source = skill_source_path(skills_root, skill.id)
        if not source.is_file():
            logger.warning(f"SKILL.md not found for '{skill.id}': {source}")
            result.skipped.append(skill.id)
            continue

        try:
            # newline="" so the mirror keeps the source's line endings
            with open(source, encoding="utf-8", newline="") as f:
                content = f.read()
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Could not read {source}: {e}")
            result.skipped.append(skill.id)
            continue

        target = legacy_dir / skill.category / f"{skill.id}.md"
        if not _inside_category_dir(legacy_dir, target):
            logger.warning(
                f"Mirror path for '{skill.id}' falls outside {legacy_dir}: {legacy_relpath(skill)}"
            )
            result.skipped.append(skill.id)
            continue

        write_text_atomic(target, strip_frontmatter(content))
        result.written.add(str(target))
        result.synced += 1

    write_text_atomic(index_path, generate_index_md(catalog, excluded_ids))

    return result
