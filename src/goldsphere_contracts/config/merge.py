"""Layer merging for configuration trees.

Mappings merge key by key with the override winning; lists and scalars
are replaced wholesale. Inputs are never mutated.
"""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from copy import deepcopy
from typing import Any


def deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """Return a new tree with *override* layered over *base*.

    >>> deep_merge({"a": {"x": 1, "y": 2}, "l": [1, 2]}, {"a": {"y": 3}, "l": [9]})
    {'a': {'x': 1, 'y': 3}, 'l': [9]}
    """
    result: dict[str, Any] = deepcopy(dict(base))
    for key, value in override.items():
        current = result.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            result[key] = deep_merge(current, value)
        else:
            result[key] = deepcopy(value)
    return result


def set_path(tree: MutableMapping[str, Any], path: str, value: Any) -> None:
    """Assign *value* at dot-separated *path*, creating missing mappings.

    Raises:
        TypeError: If an intermediate segment holds a non-mapping value.
    """
    *parents, leaf = path.split(".")
    node: MutableMapping[str, Any] = tree
    walked: list[str] = []
    for segment in parents:
        walked.append(segment)
        child = node.get(segment)
        if child is None:
            child = {}
            node[segment] = child
        elif not isinstance(child, MutableMapping):
            msg = f"Expected a mapping at {'.'.join(walked)}, found {type(child).__name__}"
            raise TypeError(msg)
        node = child
    node[leaf] = value
