"""
File helpers shared by the generators and the descriptor updater.

Outputs are computed fully in memory and then swapped into place, so an
interrupted run never leaves a truncated data.ts or plugin.json behind.
"""

import json
import os
import tempfile
from pathlib import Path
from typing import Any, Union


def write_text_atomic(filepath: Union[str, Path], content: str) -> Path:
    """Write text via a temp file in the same directory, then rename.

    Args:
        filepath: Target file path
        content: Full file content

    Returns:
        The target path
    """
    filepath = Path(filepath)
    parent = filepath.parent
    parent.mkdir(parents=True, exist_ok=True)

    fd, tmp_path = tempfile.mkstemp(dir=str(parent), prefix=f".{filepath.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
            f.write(content)
        os.replace(tmp_path, str(filepath))
    except Exception:
        # Clean up temp file on failure
        try:
            os.unlink(tmp_path)
        except OSError:
            pass
        raise
    return filepath


def read_json(filepath: Union[str, Path]) -> Any:
    """Load a JSON document."""
    with open(filepath, encoding="utf-8") as f:
        return json.load(f)


def dump_json(data: Any) -> str:
    """Serialize the way descriptor files are stored: 2-space indent, trailing newline."""
    return json.dumps(data, indent=2, ensure_ascii=False) + "\n"
