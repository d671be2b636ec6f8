from fbx_splitter.core.traversal import (
    attribute_type_name,
    iter_nodes,
    traverse,
    walk,
)

from conftest import add_node


def _sample_tree(scene):
    root = scene.GetRootNode()
    a = add_node(scene, root, "a", "FbxNull")
    a1 = add_node(scene, a, "a1", "FbxMesh")
    add_node(scene, a1, "a1x", "FbxLight")
    add_node(scene, a, "a2", "FbxMesh")
    add_node(scene, a, "a3")
    b = add_node(scene, root, "b", "FbxMesh")
    add_node(scene, b, "b1", "FbxSkeleton")
    return root


def test_walk_is_preorder_by_child_index(scene):
    root = _sample_tree(scene)

    names = [node.GetName() for node, _ in walk(root)]

    assert names == ["RootNode", "a", "a1", "a1x", "a2", "a3", "b", "b1"]


def test_siblings_share_depth_one_below_parent(scene):
    root = _sample_tree(scene)

    depths = {node.GetName(): depth for node, depth in walk(root)}

    assert depths == {
        "RootNode": 0,
        "a": 1,
        "a1": 2,
        "a1x": 3,
        "a2": 2,
        "a3": 2,
        "b": 1,
        "b1": 2,
    }
    for node, depth in walk(root):
        for idx in range(node.GetChildCount()):
            assert depths[node.GetChild(idx).GetName()] == depth + 1


def test_traverse_visits_every_node_once(scene):
    root = _sample_tree(scene)
    seen = []

    traverse(root, lambda node, depth: seen.append(id(node)))

    assert len(seen) == len(set(seen)) == 8


def test_missing_root_is_a_noop():
    calls = []

    traverse(None, lambda node, depth: calls.append(node))

    assert calls == []
    assert list(walk(None)) == []


def test_missing_child_slots_are_skipped(scene):
    root = scene.GetRootNode()
    add_node(scene, root, "kept")
    root.AddChild(None)

    assert [node.GetName() for node in iter_nodes(root)] == ["RootNode", "kept"]


def test_deep_chain_does_not_recurse(scene):
    parent = scene.GetRootNode()
    for index in range(5000):
        parent = add_node(scene, parent, f"n{index}")

    last_node, last_depth = list(walk(scene.GetRootNode()))[-1]

    assert last_node.GetName() == "n4999"
    assert last_depth == 5000


def test_node_without_attribute_has_empty_type_tag(scene):
    root = _sample_tree(scene)

    assert attribute_type_name(root) == ""
    assert attribute_type_name(root.GetChild(1)) == "Mesh"
