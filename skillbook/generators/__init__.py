"""
Artifact generators for the skill catalog.

- data_ts: the site's TypeScript data module
- legacy: the flattened markdown mirror and its INDEX.md
"""

from skillbook.generators.data_ts import generate_data_ts
from skillbook.generators.legacy import (
    LegacyResult,
    strip_frontmatter,
    generate_index_md,
    write_legacy_mirror,
)

__all__ = [
    "generate_data_ts",
    "LegacyResult",
    "strip_frontmatter",
    "generate_index_md",
    "write_legacy_mirror",
]
