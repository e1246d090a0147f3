"""
Skillbook sync configuration.

Per-plugin settings stored in .skillbook/config.json.

Paths are relative to the plugin root unless absolute. A leading ~ is
expanded, which is how the legacy mirror ends up under the user's home
directory rather than inside the repository.
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List


# Behavioral rule skills (not deep domain)
DEFAULT_WORKFLOW_IDS = [
    "saas-strategy",
    "ai-agent",
    "clean-architecture",
    "frontend",
    "css-animation",
    "testing",
    "security",
    "data-visualization",
    "feature-spec",
    "growth-hack",
    "onboarding",
    "app-store-optimization",
    "brand-identity",
]

# Automation-only skills, never mirrored to the legacy tree
DEFAULT_EXCLUDED_IDS = ["health", "manage", "sync"]

SKILL_FILENAME = "SKILL.md"


@dataclass
class SyncConfig:
    """Where the sync engine reads from and writes to."""
    meta_path: str = "tools/skills-meta.json"
    data_ts_path: str = "../skillbook-site/app/data.ts"
    plugin_json_path: str = ".claude-plugin/plugin.json"
    marketplace_json_path: str = ".claude-plugin/marketplace.json"
    skills_dir: str = "skills"
    legacy_dir: str = "~/.claude/skillbook"
    index_name: str = "INDEX.md"

    workflow_ids: List[str] = field(default_factory=lambda: list(DEFAULT_WORKFLOW_IDS))
    excluded_ids: List[str] = field(default_factory=lambda: list(DEFAULT_EXCLUDED_IDS))

    # Set by load_config, not persisted
    root: str = "."

    def to_dict(self) -> Dict[str, Any]:
        return {
            "meta_path": self.meta_path,
            "data_ts_path": self.data_ts_path,
            "plugin_json_path": self.plugin_json_path,
            "marketplace_json_path": self.marketplace_json_path,
            "skills_dir": self.skills_dir,
            "legacy_dir": self.legacy_dir,
            "index_name": self.index_name,
            "workflow_ids": self.workflow_ids,
            "excluded_ids": self.excluded_ids,
        }

    @classmethod
    def from_dict(cls, data: dict, root: str = ".") -> "SyncConfig":
        defaults = cls()
        return cls(
            meta_path=data.get("meta_path", defaults.meta_path),
            data_ts_path=data.get("data_ts_path", defaults.data_ts_path),
            plugin_json_path=data.get("plugin_json_path", defaults.plugin_json_path),
            marketplace_json_path=data.get("marketplace_json_path", defaults.marketplace_json_path),
            skills_dir=data.get("skills_dir", defaults.skills_dir),
            legacy_dir=data.get("legacy_dir", defaults.legacy_dir),
            index_name=data.get("index_name", defaults.index_name),
            workflow_ids=list(data.get("workflow_ids", defaults.workflow_ids)),
            excluded_ids=list(data.get("excluded_ids", defaults.excluded_ids)),
            root=root,
        )

    def resolve(self, value: str) -> Path:
        """Resolve a configured path against the plugin root."""
        path = Path(value).expanduser()
        if path.is_absolute():
            return path
        return (Path(self.root) / path).resolve()

    @property
    def meta_file(self) -> Path:
        return self.resolve(self.meta_path)

    @property
    def data_ts_file(self) -> Path:
        return self.resolve(self.data_ts_path)

    @property
    def plugin_json_file(self) -> Path:
        return self.resolve(self.plugin_json_path)

    @property
    def marketplace_json_file(self) -> Path:
        return self.resolve(self.marketplace_json_path)

    @property
    def skills_root(self) -> Path:
        return self.resolve(self.skills_dir)

    @property
    def legacy_root(self) -> Path:
        return self.resolve(self.legacy_dir)

    @property
    def index_file(self) -> Path:
        return self.legacy_root / self.index_name


def get_config_path(root: str) -> Path:
    """Get the config file path for a plugin root."""
    return Path(root) / ".skillbook" / "config.json"


def load_config(root: str = ".") -> SyncConfig:
    """Load sync configuration. Returns defaults if not found."""
    config_file = get_config_path(root)

    if not config_file.exists():
        return SyncConfig(root=str(root))

    try:
        with open(config_file, encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            return SyncConfig(root=str(root))
        return SyncConfig.from_dict(data, root=str(root))
    except (json.JSONDecodeError, KeyError):
        return SyncConfig(root=str(root))


def save_config(root: str, config: SyncConfig) -> None:
    """Save sync configuration."""
    config_file = get_config_path(root)

    # Ensure .skillbook directory exists
    config_file.parent.mkdir(parents=True, exist_ok=True)

    with open(config_file, "w", encoding="utf-8") as f:
        json.dump(config.to_dict(), f, indent=2)
