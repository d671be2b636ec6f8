"""Shared helper utilities for interacting with the FBX SDK."""

from __future__ import annotations

import os
from typing import Any, Sequence, Tuple

Vector3 = Tuple[float, float, float]

_NESTED_ENUM_CONTAINERS = ("EType", "ECloneType", "EPivotSet")


def resolve_enum_value(enum_holder: Any, target_name: str) -> Any:
    """Return an enum value by name, handling SDK layout differences.

    Autodesk regularly shuffles where enumeration members live between
    releases.  Sometimes they are attributes on the class, other times they
    are nested under helper containers such as ``EType`` or ``ECloneType``.
    This helper performs a best-effort lookup so callers can request an enum
    using a friendly name without needing to know the exact SDK flavour they
    are running against.
    """

    if hasattr(enum_holder, target_name):
        return getattr(enum_holder, target_name)

    for attr_name in dir(enum_holder):
        if attr_name.lower() == target_name.lower():
            return getattr(enum_holder, attr_name)

    for container in _NESTED_ENUM_CONTAINERS:
        nested = getattr(enum_holder, container, None)
        if nested is None:
            continue
        for attr_name in dir(nested):
            if attr_name.lower() == target_name.lower():
                return getattr(nested, attr_name)

    raise AttributeError(
        f"Unable to resolve enum value '{target_name}' from {enum_holder!r}"
    )


def vector_to_tuple(vector: Sequence[float]) -> Vector3:
    """Convert ``FbxDouble3``/``FbxVector4`` style objects into a 3-tuple.

    Only the first three components are kept; the ``w`` of an ``FbxVector4``
    is dropped.
    """

    values = [vector[index] for index in range(3)]
    return (float(values[0]), float(values[1]), float(values[2]))


def file_stem(path: str) -> str:
    """Return the file name of ``path`` without directory or extension."""

    return os.path.splitext(os.path.basename(path))[0]
