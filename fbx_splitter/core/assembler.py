"""Assembly and export of one output scene per chunk."""

from __future__ import annotations

import logging
from typing import Any, List, Sequence, Tuple

from ..models import Chunk, ExportResult
from ..utils import file_stem
from . import sdk
from .cloning import clone_node
from .exceptions import AttributeCloneError, FBXSaveError, InvalidInputError

logger = logging.getLogger(__name__)


def container_name(output_path: str) -> str:
    """Name of the node that groups the clones of one output scene."""

    return file_stem(output_path)


def build_chunk_scene(
    session,
    candidates: Sequence[Any],
    chunk: Chunk,
) -> Tuple[Any, List[str]]:
    """Create the output scene for ``chunk`` and fill it with clones.

    Returns the new scene and the names of candidates that had to be skipped.
    The scene belongs to ``session``; hand it back with ``session.release``.
    """

    fbx, _ = sdk.import_fbx_module()
    export_scene = session.create_output_scene()
    try:
        container = fbx.FbxNode.Create(export_scene, container_name(chunk.output_path))
        export_scene.GetRootNode().AddChild(container)

        skipped: List[str] = []
        for position, node in enumerate(chunk.take(candidates), start=chunk.start):
            try:
                cloned = clone_node(node, export_scene)
            except InvalidInputError as exc:
                label = node.GetName() if node is not None else f"<candidate {position}>"
                logger.warning("Skipping %s in chunk %d: %s", label, chunk.index, exc)
                skipped.append(label)
                continue
            except AttributeCloneError as exc:
                raise AttributeCloneError(
                    f"Chunk {chunk.index} ({chunk.output_path}): {exc}",
                    node_name=exc.node_name,
                    attribute_type=exc.attribute_type,
                ) from exc
            container.AddChild(cloned)
    except BaseException:
        session.release(export_scene)
        raise

    return export_scene, skipped


def assemble_chunk(session, candidates: Sequence[Any], chunk: Chunk) -> ExportResult:
    """Build the output scene for ``chunk`` and export it to its path."""

    export_scene, skipped = build_chunk_scene(session, candidates, chunk)
    try:
        session.export(export_scene, chunk.output_path)
    except FBXSaveError as exc:
        raise FBXSaveError(
            f"Unable to save chunk {chunk.index} [{chunk.start}, {chunk.end}): {exc}",
            path=chunk.output_path,
            reason=exc.reason,
            chunk=chunk,
        ) from exc
    finally:
        session.release(export_scene)

    written = chunk.size - len(skipped)
    logger.info(
        "Wrote %d nodes [%d, %d) to '%s'",
        written,
        chunk.start,
        chunk.end,
        chunk.output_path,
    )
    return ExportResult(
        chunk=chunk,
        path=chunk.output_path,
        node_count=written,
        skipped_nodes=skipped,
    )
