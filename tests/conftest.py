from __future__ import annotations

import sys
import types
from pathlib import Path
from typing import Iterable, Optional, Sequence

import pytest

import fake_fbx


@pytest.fixture(autouse=True)
def fbx_module(monkeypatch):
    """Install the in-memory ``fbx`` module for every test."""

    fake_fbx.reset()
    monkeypatch.setitem(sys.modules, "fbx", fake_fbx)
    monkeypatch.setitem(sys.modules, "FbxCommon", types.ModuleType("FbxCommon"))
    yield fake_fbx
    fake_fbx.reset()


@pytest.fixture
def scene(fbx_module):
    manager = fbx_module.FbxManager.Create()
    return fbx_module.FbxScene.Create(manager, "source")


def add_node(
    scene,
    parent,
    name: str,
    attribute: Optional[str] = None,
    *,
    geometric: Optional[Sequence[Iterable[float]]] = None,
    materials: Sequence[str] = (),
):
    """Create a node under ``parent`` with an optional attribute of class ``attribute``."""

    node = fake_fbx.FbxNode(scene, name)
    if attribute is not None:
        attr_cls = getattr(fake_fbx, attribute)
        node.SetNodeAttribute(attr_cls(scene, f"{name}_{attribute}"))
    if geometric is not None:
        translation, rotation, scaling = geometric
        pivot = fake_fbx.FbxNode.EPivotSet.eSourcePivot
        node.SetGeometricTranslation(pivot, translation)
        node.SetGeometricRotation(pivot, rotation)
        node.SetGeometricScaling(pivot, scaling)
    for material_name in materials:
        node.AddMaterial(fake_fbx.FbxSurfacePhong(scene, material_name))
    parent.AddChild(node)
    return node


def build_mesh_grid(scene, count: int, *, prefix: str = "mesh"):
    """Put ``count`` mesh nodes under two group nodes of the scene root."""

    root = scene.GetRootNode()
    left = add_node(scene, root, "left")
    right = add_node(scene, root, "right")
    nodes = []
    for index in range(count):
        parent = left if index % 2 == 0 else right
        nodes.append(add_node(scene, parent, f"{prefix}_{index:05d}", "FbxMesh"))
    return nodes


def write_source(scene, path: Path) -> str:
    fake_fbx.store_scene(str(path), scene)
    return str(path)
