"""Selection of the scripts that end up in the listing.

The CLI only hands over the manifest and the optional pattern; filtering and
ordering live here so they can be tested without touching the terminal.
"""

from __future__ import annotations

from core.domain.models import Manifest, ScriptEntry
from core.logging import get_logger

logger = get_logger(__name__)


def matches_filter(name: str, pattern: str | None) -> bool:
    """Case-insensitive substring match; no pattern keeps every name."""

    if not pattern:
        return True
    return pattern.lower() in name.lower()


def select_scripts(manifest: Manifest, pattern: str | None = None) -> list[ScriptEntry]:
    """Filter `manifest.scripts` by `pattern` and sort by name (codepoint order)."""

    entries = [
        ScriptEntry(name=name, command=command)
        for name, command in manifest.scripts.items()
        if matches_filter(name, pattern)
    ]
    entries.sort(key=lambda entry: entry.name)

    logger.debug(
        "Selected %d of %d scripts (filter=%r)",
        len(entries),
        len(manifest.scripts),
        pattern,
    )
    return entries
