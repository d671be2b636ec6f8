"""Autodesk FBX SDK helpers."""

from __future__ import annotations

from .exceptions import (
    SAVE_PREPARE,
    SAVE_WRITE,
    FBXLoadError,
    FBXSaveError,
    FBXSDKNotAvailableError,
)


def import_fbx_module():
    """Import the Autodesk FBX SDK Python module.

    Encapsulates the import so code can provide a helpful error when it is
    missing instead of failing at module import time.
    """

    try:
        import fbx  # type: ignore
        import FbxCommon  # type: ignore
    except ImportError as exc:  # pragma: no cover - dependent on external SDK
        raise FBXSDKNotAvailableError(
            "Autodesk FBX SDK Python bindings are not available. "
            "Install the SDK and ensure the 'fbx' and 'FbxCommon' modules are on PYTHONPATH."
        ) from exc

    return fbx, FbxCommon


def create_manager():
    """Create an `fbx.FbxManager` with default IO settings attached."""

    fbx, _ = import_fbx_module()
    manager = fbx.FbxManager.Create()
    ios = fbx.FbxIOSettings.Create(manager, fbx.IOSROOT)
    manager.SetIOSettings(ios)
    return manager


def import_scene(manager, path: str, name: str = "Scene"):
    """Read the FBX file at ``path`` into a new scene owned by ``manager``.

    Raises :class:`FBXLoadError` when the file cannot be opened or parsed.
    """

    fbx, _ = import_fbx_module()
    scene = fbx.FbxScene.Create(manager, name)
    importer = fbx.FbxImporter.Create(manager, "")
    try:
        if not importer.Initialize(path, -1, manager.GetIOSettings()):
            raise FBXLoadError(
                f"Unable to open FBX file '{path}'{_status_suffix(importer)}"
            )
        if not importer.Import(scene):
            raise FBXLoadError(
                f"Failed to read FBX scene from '{path}'{_status_suffix(importer)}"
            )
    except FBXLoadError:
        scene.Destroy()
        raise
    finally:
        importer.Destroy()
    return scene


def create_scene(manager, name: str = ""):
    """Create an empty scene owned by ``manager``."""

    fbx, _ = import_fbx_module()
    return fbx.FbxScene.Create(manager, name)


def export_scene(manager, scene, path: str) -> None:
    """Write ``scene`` to ``path`` in the native FBX writer format.

    Raises :class:`FBXSaveError` with ``reason="prepare"`` when the exporter
    cannot open the destination and ``reason="write"`` when the export
    itself fails.
    """

    fbx, _ = import_fbx_module()
    exporter = fbx.FbxExporter.Create(manager, "")
    try:
        registry = manager.GetIOPluginRegistry()
        file_format = registry.GetNativeWriterFormat()
        if not exporter.Initialize(path, file_format, manager.GetIOSettings()):
            raise FBXSaveError(
                f"Cannot prepare '{path}' for writing{_status_suffix(exporter)}",
                path=path,
                reason=SAVE_PREPARE,
            )
        if not exporter.Export(scene):
            raise FBXSaveError(
                f"Exporter failed while writing '{path}'{_status_suffix(exporter)}",
                path=path,
                reason=SAVE_WRITE,
            )
    finally:
        exporter.Destroy()


def destroy_manager(manager):
    """Destroy the manager and every scene it still owns."""

    manager.Destroy()


def _status_suffix(io_object) -> str:
    """Return ``": <SDK error string>"`` when the importer/exporter exposes one."""

    get_status = getattr(io_object, "GetStatus", None)
    if not callable(get_status):
        return ""
    message = get_status().GetErrorString()
    return f": {message}" if message else ""
