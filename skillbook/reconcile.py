"""
Mark-and-sweep cleanup of the legacy mirror.

Mark: the set of files the current run just wrote (computed by the
mirror generator). Sweep: walk the mirror, delete every other .md file
except the index, then drop directories left empty.

The sweep must only start once every mirror write of the run is done.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, List, Union


@dataclass
class ReconcileResult:
    """What the sweep removed."""
    removed_files: List[str] = field(default_factory=list)
    removed_dirs: List[str] = field(default_factory=list)

    @property
    def removed(self) -> int:
        return len(self.removed_files)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "removed_files": self.removed_files,
            "removed_dirs": self.removed_dirs,
        }


def _key(path: Union[str, Path]) -> str:
    return os.path.normcase(os.path.abspath(str(path)))


def reconcile_legacy_dir(
    root: Union[str, Path],
    valid_paths: Iterable[Union[str, Path]],
    index_path: Union[str, Path],
) -> ReconcileResult:
    """Delete stale markdown files under root.

    Deletion is best effort: entries that vanish mid-walk or refuse to be
    removed are skipped silently. The root directory itself is never
    removed.

    Args:
        root: Legacy mirror directory
        valid_paths: Files written by this run
        index_path: Index file, always kept

    Returns:
        ReconcileResult listing removed files and directories
    """
    root = Path(root)
    result = ReconcileResult()
    if not root.is_dir():
        return result

    keep = {_key(p) for p in valid_paths}
    keep.add(_key(index_path))

    _sweep(root, keep, result, is_root=True)
    return result


def _sweep(directory: Path, keep: set, result: ReconcileResult, is_root: bool = False) -> None:
    try:
        entries = list(directory.iterdir())
    except OSError:
        return

    for entry in entries:
        try:
            if entry.is_dir() and not entry.is_symlink():
                _sweep(entry, keep, result)
            elif entry.suffix == ".md" and _key(entry) not in keep:
                entry.unlink()
                result.removed_files.append(str(entry))
        except OSError:
            continue

    if is_root:
        return

    try:
        if not any(directory.iterdir()):
            directory.rmdir()
            result.removed_dirs.append(str(directory))
    except OSError:
        pass
