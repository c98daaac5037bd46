"""Logic for deep merging configuration dictionaries."""

from typing import Any

# List-valued keys whose entries accumulate instead of being replaced.
ADDITIVE_KEYS = frozenset({"skip_kinds"})


def deep_merge(base: dict[str, Any], update: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries.

    - Objects are merged recursively.
    - Arrays in 'update' replace 'base' arrays, except for ``ADDITIVE_KEYS``,
      which are merged, deduplicated and sorted.
    """
    result = {
        key: list(value) if isinstance(value, list) else value
        for key, value in base.items()
    }
    for key, value in update.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        elif (
            key in ADDITIVE_KEYS
            and isinstance(value, list)
            and isinstance(result.get(key), list)
        ):
            result[key] = sorted(set(result[key]) | set(value))
        else:
            result[key] = value
    return result
