"""
Skillbook Models - Data structures for the skill catalog.
"""

from skillbook.models.catalog import (
    Bilingual,
    Category,
    Skill,
    Catalog,
    SKILL_FIELDS,
    load_catalog,
    catalog_to_json,
)

__all__ = [
    "Bilingual",
    "Category",
    "Skill",
    "Catalog",
    "SKILL_FIELDS",
    "load_catalog",
    "catalog_to_json",
]
