"""System prompt loading — an unreadable prompt file silently means no prompt."""

from pathlib import Path


def load_system_prompt(path: Path | None) -> str | None:
    """Return the contents of path, or None if no path is given or it cannot be read."""
    if path is None:
        return None
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return None
