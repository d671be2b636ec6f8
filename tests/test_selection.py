from fbx_splitter.core.selection import NodeSelector, select_nodes
from fbx_splitter.core.traversal import traverse

from conftest import add_node


def test_selects_mesh_nodes_in_visitation_order(scene):
    root = scene.GetRootNode()
    group = add_node(scene, root, "group", "FbxNull")
    add_node(scene, group, "body", "FbxMesh")
    add_node(scene, group, "lamp", "FbxLight")
    add_node(scene, root, "floor", "FbxMesh")

    selector = select_nodes(root)

    assert [node.GetName() for node in selector.candidates] == ["body", "floor"]
    stats = selector.stats
    assert stats.total_nodes == 5
    assert stats.selected_nodes == 2
    assert stats.max_depth == 2
    assert stats.selected_nodes + stats.skipped_nodes == stats.total_nodes


def test_selection_ignores_name_and_materials(scene):
    root = scene.GetRootNode()
    add_node(scene, root, "Mesh_named_light", "FbxLight", materials=["steel"])
    add_node(scene, root, "plain")

    stats = select_nodes(root).stats

    assert stats.selected_nodes == 0
    assert stats.max_depth == 0
    assert stats.total_nodes == 3


def test_custom_prefix(scene):
    root = scene.GetRootNode()
    add_node(scene, root, "sun", "FbxLight")
    add_node(scene, root, "box", "FbxMesh")

    selector = select_nodes(root, "Light")

    assert [node.GetName() for node in selector.candidates] == ["sun"]


def test_selector_is_a_traversal_visitor(scene):
    root = scene.GetRootNode()
    add_node(scene, add_node(scene, root, "a"), "deep", "FbxMesh")
    selector = NodeSelector()

    traverse(root, selector.visit)

    assert selector.total_nodes == 3
    assert selector.max_depth == 2


def test_empty_scene_reports_root_only(scene):
    stats = select_nodes(scene.GetRootNode()).stats

    assert (stats.total_nodes, stats.selected_nodes, stats.max_depth) == (1, 0, 0)
