"""
Skill catalog synchronization pipeline.

Reads skills-meta.json and brings every derived artifact in line with it:
1. Recompute lineCount from each SKILL.md
2. Generate the site's data.ts
3. Write the legacy mirror and INDEX.md (unless disabled)
4. Sweep stale files out of the legacy mirror
5. Bump plugin.json / marketplace.json (only when asked)

Usage:
    skillbook sync                   # Regenerate data.ts and the mirror
    skillbook sync --bump patch      # ...and bump descriptor versions
    skillbook sync --no-legacy       # Skip the legacy mirror
"""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from skillbook.config import SyncConfig
from skillbook.errors import InvalidInput, SkillbookError
from skillbook.fileio import dump_json, read_json, write_text_atomic
from skillbook.generators.data_ts import generate_data_ts
from skillbook.generators.legacy import LegacyResult, write_legacy_mirror
from skillbook.models.catalog import Catalog, catalog_to_json, load_catalog
from skillbook.normalize import normalize_catalog
from skillbook.reconcile import ReconcileResult, reconcile_legacy_dir
from skillbook.version import (
    BUMP_KINDS,
    bump_version,
    update_marketplace_json,
    update_plugin_json,
)

logger = logging.getLogger(__name__)


@dataclass
class BumpResult:
    """Result of a descriptor version bump."""
    kind: str
    old_version: str
    new_version: str
    total: int
    workflow: int
    domain: int
    written: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind,
            "old_version": self.old_version,
            "new_version": self.new_version,
            "total": self.total,
            "workflow": self.workflow,
            "domain": self.domain,
            "written": self.written,
        }


@dataclass
class SyncResult:
    """Result of a full sync run."""
    meta_path: str
    data_ts_path: str
    skills: int = 0
    line_counts_changed: int = 0
    orphans: List[str] = field(default_factory=list)
    meta_written: bool = False

    legacy: Optional[LegacyResult] = None
    reconcile: Optional[ReconcileResult] = None
    bump: Optional[BumpResult] = None

    @property
    def synced(self) -> int:
        return self.legacy.synced if self.legacy else 0

    @property
    def skipped(self) -> int:
        return len(self.legacy.skipped) if self.legacy else 0

    @property
    def removed(self) -> int:
        return self.reconcile.removed if self.reconcile else 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "meta_path": self.meta_path,
            "data_ts_path": self.data_ts_path,
            "skills": self.skills,
            "line_counts_changed": self.line_counts_changed,
            "orphans": self.orphans,
            "meta_written": self.meta_written,
            "legacy": self.legacy.to_dict() if self.legacy else None,
            "reconcile": self.reconcile.to_dict() if self.reconcile else None,
            "bump": self.bump.to_dict() if self.bump else None,
        }


def validate_bump_kind(kind: Optional[str]) -> None:
    if kind is not None and kind not in BUMP_KINDS:
        raise InvalidInput(
            f'Invalid bump type: "{kind}". Must be one of: patch, minor, major', value=kind
        )


def run_sync(
    config: SyncConfig,
    bump: Optional[str] = None,
    legacy: bool = True,
    write_meta: bool = False,
) -> SyncResult:
    """Run the whole pipeline.

    Args:
        config: Resolved sync configuration
        bump: "patch", "minor", "major", or None to leave versions alone
        legacy: Write and reconcile the legacy mirror
        write_meta: Write refreshed line counts back to skills-meta.json

    Returns:
        SyncResult with per-stage results

    Raises:
        InvalidInput: Bad bump kind (checked before anything is written)
        CatalogError: skills-meta.json missing or malformed
        SkillbookError: An artifact or descriptor could not be read or written
    """
    validate_bump_kind(bump)

    logger.info(f"Reading {config.meta_file}")
    catalog = load_catalog(config.meta_file)

    result = SyncResult(
        meta_path=str(config.meta_file),
        data_ts_path=str(config.data_ts_file),
        skills=len(catalog.skills),
    )

    logger.info("Counting lines from SKILL.md files")
    result.line_counts_changed = normalize_catalog(catalog, config.skills_root)

    for skill in catalog.orphan_skills():
        logger.warning(f"Skill '{skill.id}' references unknown category '{skill.category}'")
        result.orphans.append(skill.id)

    content = generate_data_ts(catalog)
    _write(config.data_ts_file, content)
    logger.info(f"Written: {config.data_ts_file}")

    if write_meta:
        _write(config.meta_file, catalog_to_json(catalog))
        result.meta_written = True
        logger.info(f"Written: {config.meta_file}")

    if legacy:
        try:
            result.legacy = write_legacy_mirror(
                catalog,
                config.skills_root,
                config.legacy_root,
                config.excluded_ids,
                index_name=config.index_name,
            )
        except OSError as e:
            raise SkillbookError(f"Cannot write legacy mirror: {e}") from e
        # Sweep only after every mirror write above has finished
        result.reconcile = reconcile_legacy_dir(
            config.legacy_root,
            result.legacy.written,
            result.legacy.index_path,
        )

    if bump:
        result.bump = bump_descriptors(config, catalog, bump)

    return result


def _write(path: Path, content: str) -> None:
    try:
        write_text_atomic(path, content)
    except OSError as e:
        raise SkillbookError(f"{path}: cannot write: {e}") from e


def _load_descriptor(path: Path) -> Dict[str, Any]:
    try:
        data = read_json(path)
    except FileNotFoundError:
        raise SkillbookError(f"{path}: descriptor not found")
    except json.JSONDecodeError as e:
        raise SkillbookError(f"{path}: invalid JSON: {e}")
    except (OSError, UnicodeDecodeError) as e:
        raise SkillbookError(f"{path}: cannot read descriptor: {e}")
    if not isinstance(data, dict):
        raise SkillbookError(f"{path}: expected a JSON object")
    return data


def bump_descriptors(
    config: SyncConfig,
    catalog: Catalog,
    kind: str,
    dry_run: bool = False,
) -> BumpResult:
    """Bump plugin.json and marketplace.json.

    Both documents are read and updated in memory before either is written,
    so a malformed version leaves both files untouched.

    Args:
        config: Resolved sync configuration
        catalog: Catalog supplying the skill counts
        kind: "patch", "minor" or "major"
        dry_run: Compute the result without writing

    Returns:
        BumpResult
    """
    validate_bump_kind(kind)

    plugin_doc = _load_descriptor(config.plugin_json_file)
    marketplace_doc = _load_descriptor(config.marketplace_json_file)

    old_version = str(plugin_doc.get("version", ""))
    new_version = bump_version(old_version, kind)

    total = len(catalog.skills)
    workflow = catalog.count_workflow(set(config.workflow_ids))
    domain = total - workflow

    logger.info(f"Bumping version: {old_version} -> {new_version} ({kind})")
    logger.info(f"Skills: {total} total, {workflow} workflow, {domain} domain")

    updated_plugin = update_plugin_json(plugin_doc, new_version, total, workflow, domain)
    updated_marketplace = update_marketplace_json(
        marketplace_doc, new_version, total, workflow, domain
    )

    result = BumpResult(
        kind=kind,
        old_version=old_version,
        new_version=new_version,
        total=total,
        workflow=workflow,
        domain=domain,
    )

    if dry_run:
        return result

    _write(config.plugin_json_file, dump_json(updated_plugin))
    result.written.append(str(config.plugin_json_file))
    _write(config.marketplace_json_file, dump_json(updated_marketplace))
    result.written.append(str(config.marketplace_json_file))

    return result
