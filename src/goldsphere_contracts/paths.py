"""Dot-path helpers shared by the config resolver and the validator.

A dot-path names a nested field by joining parent keys with ``.``
(``security.fraudDetection.enabled``). List indexes appear as plain
integers (``products.3.weight``).
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import BaseModel


def split_path(path: str) -> list[str]:
    """Split a dot-path into its segments, rejecting empty segments."""
    parts = path.split(".")
    if not path or any(not p for p in parts):
        msg = f"Invalid dot-path: {path!r}"
        raise ValueError(msg)
    return parts


def join_loc(loc: Iterable[str | int]) -> str:
    """Join a location tuple (as found in pydantic errors) into a dot-path."""
    return ".".join(str(p) for p in loc)


def get_path(obj: Any, path: str) -> Any:
    """Read the value at *path* from nested mappings, lists, or models.

    Model segments may use either the wire alias or the attribute name.
    Returns None when any segment is missing.
    """
    current = obj
    for segment in split_path(path):
        if current is None:
            return None
        if isinstance(current, BaseModel):
            current = _model_attr(current, segment)
        elif isinstance(current, Mapping):
            current = current.get(segment)
        elif isinstance(current, list) and segment.isdigit():
            idx = int(segment)
            current = current[idx] if idx < len(current) else None
        else:
            return None
    return current


def _model_attr(model: BaseModel, segment: str) -> Any:
    for name, info in type(model).model_fields.items():
        if segment in (name, info.alias):
            return getattr(model, name)
    extra = model.model_extra or {}
    return extra.get(segment)
