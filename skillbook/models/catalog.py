"""
Catalog model for the skill knowledge base.

skills-meta.json is the source of truth. It holds:
- ui: per-language UI string tables
- categories: ordered grouping buckets
- skills: ordered skill entries with bilingual text fields

Everything downstream (data.ts, the legacy mirror, descriptor counts)
is derived from this document.
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from skillbook.errors import CatalogError


# Keys Skill knows about, in data.ts field order
SKILL_FIELDS = (
    "id",
    "name",
    "description",
    "category",
    "role",
    "principles",
    "processSteps",
    "antiPatterns",
    "lineCount",
    "path",
)

CATEGORY_FIELDS = ("id", "label", "icon", "description")
CATALOG_FIELDS = ("ui", "categories", "skills")


@dataclass
class Bilingual:
    """A {ko, en} text pair."""
    ko: str = ""
    en: str = ""
    extra: Dict[str, Any] = field(default_factory=dict)  # Other languages

    def to_dict(self) -> Dict[str, Any]:
        data = {"ko": self.ko, "en": self.en}
        data.update(self.extra)
        return data

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "Bilingual":
        data = data or {}
        return cls(
            ko=data.get("ko", ""),
            en=data.get("en", ""),
            extra={k: v for k, v in data.items() if k not in ("ko", "en")},
        )


@dataclass
class Category:
    """A grouping bucket for skills. List order is display order."""
    id: str
    label: str = ""
    icon: str = ""
    description: Bilingual = field(default_factory=Bilingual)
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "id": self.id,
            "label": self.label,
            "icon": self.icon,
            "description": self.description.to_dict(),
        }
        data.update(self.extra)
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Category":
        return cls(
            id=data.get("id", ""),
            label=data.get("label", ""),
            icon=data.get("icon", ""),
            description=Bilingual.from_dict(data.get("description")),
            extra={k: v for k, v in data.items() if k not in CATEGORY_FIELDS},
        )


@dataclass
class Skill:
    """One catalog entry."""
    id: str
    name: Bilingual = field(default_factory=Bilingual)
    description: Bilingual = field(default_factory=Bilingual)
    category: str = ""
    role: Bilingual = field(default_factory=Bilingual)
    principles: List[Bilingual] = field(default_factory=list)
    process_steps: int = 0
    anti_patterns: List[Bilingual] = field(default_factory=list)
    line_count: int = 0  # Derived, recomputed from SKILL.md each run
    path: str = ""

    # Keys we don't model, kept so a write-back doesn't drop them
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "id": self.id,
            "name": self.name.to_dict(),
            "description": self.description.to_dict(),
            "category": self.category,
            "role": self.role.to_dict(),
            "principles": [p.to_dict() for p in self.principles],
            "processSteps": self.process_steps,
            "antiPatterns": [a.to_dict() for a in self.anti_patterns],
            "lineCount": self.line_count,
            "path": self.path,
        }
        data.update(self.extra)
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Skill":
        return cls(
            id=data.get("id", ""),
            name=Bilingual.from_dict(data.get("name")),
            description=Bilingual.from_dict(data.get("description")),
            category=data.get("category", ""),
            role=Bilingual.from_dict(data.get("role")),
            principles=[Bilingual.from_dict(p) for p in data.get("principles", [])],
            process_steps=data.get("processSteps", 0),
            anti_patterns=[Bilingual.from_dict(a) for a in data.get("antiPatterns", [])],
            line_count=data.get("lineCount", 0),
            path=data.get("path", ""),
            extra={k: v for k, v in data.items() if k not in SKILL_FIELDS},
        )


@dataclass
class Catalog:
    """The whole skills-meta.json document."""
    ui: Dict[str, Dict[str, str]] = field(default_factory=dict)
    categories: List[Category] = field(default_factory=list)
    skills: List[Skill] = field(default_factory=list)
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "ui": {lang: dict(strings) for lang, strings in self.ui.items()},
            "categories": [c.to_dict() for c in self.categories],
            "skills": [s.to_dict() for s in self.skills],
        }
        data.update(self.extra)
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Catalog":
        return cls(
            ui={lang: dict(strings) for lang, strings in data.get("ui", {}).items()},
            categories=[Category.from_dict(c) for c in data.get("categories", [])],
            skills=[Skill.from_dict(s) for s in data.get("skills", [])],
            extra={k: v for k, v in data.items() if k not in CATALOG_FIELDS},
        )

    @classmethod
    def coerce(cls, catalog: Union["Catalog", Dict[str, Any]]) -> "Catalog":
        """Accept either a Catalog or the raw JSON mapping."""
        if isinstance(catalog, Catalog):
            return catalog
        return cls.from_dict(catalog)

    def category_ids(self) -> List[str]:
        return [c.id for c in self.categories]

    def orphan_skills(self) -> List[Skill]:
        """Skills whose category is not a known category id."""
        known = set(self.category_ids())
        return [s for s in self.skills if s.category not in known]

    def count_workflow(self, workflow_ids) -> int:
        """Number of skills whose id is in the workflow set."""
        return sum(1 for s in self.skills if s.id in workflow_ids)


def load_catalog(path: Union[str, Path]) -> Catalog:
    """Load skills-meta.json.

    Args:
        path: Path to the catalog JSON file

    Returns:
        Catalog object

    Raises:
        CatalogError: If the file is missing, unreadable or not a JSON object
    """
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        raise CatalogError("catalog file not found", path=str(path))
    except json.JSONDecodeError as e:
        raise CatalogError(f"invalid JSON: {e}", path=str(path))
    except (OSError, UnicodeDecodeError) as e:
        raise CatalogError(f"cannot read catalog: {e}", path=str(path))

    if not isinstance(data, dict):
        raise CatalogError(
            f"expected a JSON object, got {type(data).__name__}", path=str(path)
        )

    try:
        return Catalog.from_dict(data)
    except (AttributeError, TypeError) as e:
        raise CatalogError(f"unexpected catalog shape: {e}", path=str(path))


def catalog_to_json(catalog: Catalog) -> str:
    """Serialize a catalog the way skills-meta.json is stored."""
    return json.dumps(catalog.to_dict(), indent=2, ensure_ascii=False) + "\n"
