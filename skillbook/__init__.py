"""
Skillbook - Skill catalog synchronization.

Keeps three representations of the skill knowledge base in step:
- tools/skills-meta.json, the source of truth
- the site's generated data.ts module
- a flattened legacy markdown mirror with an INDEX.md

Also bumps the plugin and marketplace descriptor versions on release.

No network access. Single process, single pass.
"""

__version__ = "0.1.0"

from skillbook.models.catalog import Catalog, Category, Skill, Bilingual, load_catalog
from skillbook.sync import run_sync, SyncResult

__all__ = [
    "Catalog",
    "Category",
    "Skill",
    "Bilingual",
    "load_catalog",
    "run_sync",
    "SyncResult",
]
