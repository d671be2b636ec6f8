"""Reload checks for exported scenes."""

from __future__ import annotations

from typing import List, Sequence

from ..models import ExportResult, VerificationReport
from . import sdk
from .assembler import container_name
from .exceptions import FBXLoadError


def verify_export(result: ExportResult, expected_names: Sequence[str]) -> VerificationReport:
    """Reload ``result.path`` and compare the container's children with ``expected_names``."""

    manager = sdk.create_manager()
    try:
        try:
            scene = sdk.import_scene(manager, result.path)
        except FBXLoadError as exc:
            raise FBXLoadError(f"Failed to reload exported FBX for validation: {exc}") from exc

        actual_names = _container_children(scene.GetRootNode(), container_name(result.path))
        remaining = list(actual_names)
        missing: List[str] = []
        for name in expected_names:
            if name in remaining:
                remaining.remove(name)
            else:
                missing.append(name)

        return VerificationReport(
            path=result.path,
            expected=len(expected_names),
            actual=len(actual_names),
            missing=missing,
        )
    finally:
        sdk.destroy_manager(manager)


def _container_children(root, name: str) -> List[str]:
    if root is None:
        return []
    for idx in range(root.GetChildCount()):
        child = root.GetChild(idx)
        if child is not None and (child.GetName() or "") == name:
            return [
                child.GetChild(i).GetName() or ""
                for i in range(child.GetChildCount())
            ]
    return []
