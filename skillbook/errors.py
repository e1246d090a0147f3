"""
Error types for skillbook.

Fatal conditions (bad bump kind, malformed version, unreadable catalog)
raise one of these. Per-skill problems are logged and counted instead.
"""

from typing import Optional


class SkillbookError(Exception):
    """Base class for all skillbook errors."""


class InvalidInput(SkillbookError, ValueError):
    """Raised when a caller-supplied value is malformed."""
    def __init__(self, message: str, value: Optional[str] = None):
        self.message = message
        self.value = value
        super().__init__(message)


class CatalogError(SkillbookError):
    """Raised when the catalog JSON cannot be read or parsed."""
    def __init__(self, message: str, path: Optional[str] = None):
        self.message = message
        self.path = path
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.path:
            return f"{self.path}: {self.message}"
        return self.message
