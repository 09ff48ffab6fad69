"""Environment placeholders in raw config values.

`${NAME}` is replaced by the value of NAME; `${NAME:-fallback}` uses fallback
when NAME is unset. Placeholders are expanded in string values only. Mapping
keys (server names, header and env var names) are left as written.
"""

import os
import re
from collections.abc import Callable

_PLACEHOLDER = re.compile(
    r"\$\{(?P<name>[A-Za-z_][A-Za-z0-9_]*)(?::-(?P<fallback>[^}]*))?\}"
)

type RawValue = (
    str | int | float | bool | None | list["RawValue"] | dict[str, "RawValue"]
)


def collect_missing_vars(data: RawValue) -> list[str]:
    """Names of unset variables referenced without a fallback, first seen first."""
    missing: list[str] = []

    def record(text: str) -> str:
        for match in _PLACEHOLDER.finditer(text):
            name = match["name"]
            if (
                match["fallback"] is None
                and name not in os.environ
                and name not in missing
            ):
                missing.append(name)
        return text

    _map_strings(data, record)
    return missing


def interpolate(data: RawValue) -> RawValue:
    """Return a copy of data with every placeholder expanded.

    Raises KeyError for an unset variable without fallback; run
    `collect_missing_vars` first to report all of them at once.
    """
    return _map_strings(data, lambda text: _PLACEHOLDER.sub(_expand, text))


def _expand(match: re.Match[str]) -> str:
    fallback = match["fallback"]
    if fallback is None:
        return os.environ[match["name"]]
    return os.environ.get(match["name"], fallback)


def _map_strings(data: RawValue, transform: Callable[[str], str]) -> RawValue:
    if isinstance(data, str):
        return transform(data)
    if isinstance(data, list):
        return [_map_strings(item, transform) for item in data]
    if isinstance(data, dict):
        return {key: _map_strings(value, transform) for key, value in data.items()}
    return data
