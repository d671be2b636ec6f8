"""Single-node deep cloning into another scene."""

from __future__ import annotations

import logging

from ..models import NodeTransform
from ..utils import resolve_enum_value, vector_to_tuple
from . import sdk
from .exceptions import AttributeCloneError, InvalidInputError
from .traversal import attribute_type_name

logger = logging.getLogger(__name__)


def read_geometric_transform(node) -> NodeTransform:
    """Return the node's geometric translation, rotation and scaling."""

    fbx, _ = sdk.import_fbx_module()
    pivot = resolve_enum_value(fbx.FbxNode, "eSourcePivot")
    return NodeTransform(
        translation=vector_to_tuple(node.GetGeometricTranslation(pivot)),
        rotation=vector_to_tuple(node.GetGeometricRotation(pivot)),
        scaling=vector_to_tuple(node.GetGeometricScaling(pivot)),
    )


def read_local_transform(node) -> NodeTransform:
    return NodeTransform(
        translation=vector_to_tuple(node.LclTranslation.Get()),
        rotation=vector_to_tuple(node.LclRotation.Get()),
        scaling=vector_to_tuple(node.LclScaling.Get()),
    )


def clone_node(source_node, target_scene):
    """Create a copy of ``source_node`` inside ``target_scene``.

    The copy gets the source's name, its geometric-pivot transform as local
    transform, a deep clone of its attribute and deep clones of its materials
    in slot order. Children are not copied.
    """

    if source_node is None:
        raise InvalidInputError("Cannot clone a missing node.")
    if target_scene is None:
        raise InvalidInputError(
            f"Cannot clone node '{source_node.GetName()}' into a missing scene."
        )

    fbx, _ = sdk.import_fbx_module()
    deep_clone = resolve_enum_value(fbx.FbxObject, "eDeepClone")
    name = source_node.GetName()

    transform = read_geometric_transform(source_node)
    cloned_node = fbx.FbxNode.Create(target_scene, name)
    cloned_node.LclTranslation.Set(fbx.FbxDouble3(*transform.translation))
    cloned_node.LclRotation.Set(fbx.FbxDouble3(*transform.rotation))
    cloned_node.LclScaling.Set(fbx.FbxDouble3(*transform.scaling))

    attribute = source_node.GetNodeAttribute()
    if attribute is not None:
        attr_type = attribute_type_name(source_node)
        cloned_attr = attribute.Clone(deep_clone, target_scene)
        if not isinstance(cloned_attr, fbx.FbxNodeAttribute):
            raise AttributeCloneError(
                f"Deep clone of {attr_type or 'unknown'} attribute on node '{name}' "
                f"produced {type(cloned_attr).__name__}, not a node attribute.",
                node_name=name,
                attribute_type=attr_type,
            )
        cloned_node.SetNodeAttribute(cloned_attr)

    for index in range(source_node.GetMaterialCount()):
        material = source_node.GetMaterial(index)
        if material is None:
            continue
        cloned_material = material.Clone(deep_clone, target_scene)
        if not isinstance(cloned_material, fbx.FbxSurfaceMaterial):
            raise AttributeCloneError(
                f"Deep clone of material '{material.GetName()}' on node '{name}' "
                f"produced {type(cloned_material).__name__}, not a surface material.",
                node_name=name,
                attribute_type="Material",
            )
        cloned_node.AddMaterial(cloned_material)

    logger.debug(
        "Cloned node '%s' (%s, %d materials)",
        name,
        attribute_type_name(source_node) or "no attribute",
        cloned_node.GetMaterialCount(),
    )
    return cloned_node
