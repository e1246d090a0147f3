"""
Formatting primitives for generated TypeScript source.

The call site decides between one-line and multi-line bilingual output.
Nothing here looks at string length or content to pick a form, so the
generated text stays byte-for-byte reproducible.
"""

from typing import Any, Dict, Union

from skillbook.models.catalog import Bilingual


BilingualLike = Union[Bilingual, Dict[str, Any]]


def ts_str(value: str) -> str:
    """Render a string as a double-quoted TypeScript literal.

    Backslashes are escaped first, then double quotes, then newlines.
    """
    escaped = (
        value
        .replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
    )
    return f'"{escaped}"'


def _pair(obj: BilingualLike) -> Bilingual:
    if isinstance(obj, Bilingual):
        return obj
    return Bilingual.from_dict(obj)


def bilingual_one_line(obj: BilingualLike) -> str:
    """Render { ko, en } as a single-line object literal."""
    pair = _pair(obj)
    return f"{{ ko: {ts_str(pair.ko)}, en: {ts_str(pair.en)} }}"


def bilingual_multi_line(obj: BilingualLike, indent: str) -> str:
    """Render { ko, en } across lines.

    The opening brace is left for the caller to place; each property is
    indented two spaces past `indent` and the closing brace sits at `indent`.
    """
    pair = _pair(obj)
    return "\n".join([
        "{",
        f"{indent}  ko: {ts_str(pair.ko)},",
        f"{indent}  en: {ts_str(pair.en)},",
        f"{indent}}}",
    ])
