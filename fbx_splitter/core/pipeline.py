"""High level split orchestration."""

from __future__ import annotations

import logging
import os
from typing import List, Optional

from ..models import Chunk, RunReport, SplitOptions
from .assembler import assemble_chunk
from .batching import plan_chunks
from .exceptions import (
    SAVE_VERIFY,
    AttributeCloneError,
    ConfigurationError,
    FBXSaveError,
    OutputExistsError,
)
from .selection import select_nodes
from .session import SceneSession
from .verification import verify_export

logger = logging.getLogger(__name__)


class SplitPipeline:
    """Loads the input scene, selects nodes and writes one scene per chunk.

    ``report`` is filled in as soon as selection finishes, so the statistics
    are available to the caller even when a later export step raises.
    """

    def __init__(self, options: SplitOptions) -> None:
        self.options = options.validate()
        self.report: Optional[RunReport] = None

    def run(self) -> RunReport:
        options = self.options
        with SceneSession(options.input_path) as session:
            context = session.context
            selector = select_nodes(context.root_node, options.type_prefix)
            stats = selector.stats
            logger.info(
                "Selected %d of %d nodes (max depth %d)",
                stats.selected_nodes,
                stats.total_nodes,
                stats.max_depth,
            )

            report = self.report = RunReport(
                input_path=options.input_path,
                root_name=context.root_name,
                stats=stats,
                dry_run=options.dry_run,
            )
            if options.dry_run:
                logger.info("Dry run requested; no output written")
                return report

            report.chunks = plan_chunks(
                stats.selected_nodes,
                options.output_path,
                max_size=options.max_nodes_per_batch,
                split=options.split,
            )
            if not report.chunks:
                logger.info("No matching nodes; nothing to write")
                return report

            _check_input_not_overwritten(options.input_path, report.chunks)
            if not options.overwrite:
                existing = _existing_paths(chunk.output_path for chunk in report.chunks)
                if existing:
                    raise OutputExistsError(existing)

            candidates = selector.candidates
            for chunk in report.chunks:
                try:
                    result = assemble_chunk(session, candidates, chunk)
                except FBXSaveError as exc:
                    report.error = str(exc)
                    exc.completed = list(report.results)
                    logger.error(
                        "Export stopped at chunk %d of %d: %s",
                        chunk.index + 1,
                        len(report.chunks),
                        exc,
                    )
                    raise
                except AttributeCloneError as exc:
                    report.error = str(exc)
                    logger.error("Cloning failed: %s", exc)
                    raise
                report.results.append(result)

                if options.verify:
                    expected = [node.GetName() for node in chunk.take(candidates) if node is not None]
                    verification = verify_export(result, expected)
                    report.verifications.append(verification)
                    if not verification.ok:
                        report.error = (
                            f"Exported scene '{result.path}' does not match: expected "
                            f"{verification.expected} nodes, found {verification.actual}, "
                            f"missing {verification.missing}"
                        )
                        raise FBXSaveError(
                            report.error,
                            path=result.path,
                            reason=SAVE_VERIFY,
                            chunk=chunk,
                            completed=report.results,
                        )

        return report


def _check_input_not_overwritten(input_path: str, chunks: List[Chunk]) -> None:
    source = os.path.realpath(input_path)
    for chunk in chunks:
        if os.path.realpath(chunk.output_path) == source:
            raise ConfigurationError(
                f"Output '{chunk.output_path}' for chunk {chunk.index} would overwrite "
                f"the input file '{input_path}'"
            )


def _existing_paths(paths) -> List[str]:
    return [path for path in paths if os.path.exists(path)]
