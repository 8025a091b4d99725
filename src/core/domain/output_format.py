"""Output formats supported by the CLI.

Kept in the domain layer so the CLI (option parsing) and the renderers share
a single source of truth without importing each other.
"""

from __future__ import annotations

from enum import Enum


class OutputFormat(str, Enum):
    """Encodings the script listing can be rendered to."""

    TABLE = "table"
    LIST = "list"
    JSON = "json"

    @classmethod
    def default(cls) -> "OutputFormat":
        """Return the format used when `--format` is omitted."""

        return cls.TABLE
