"""Command-line interface for fbx_splitter."""

from __future__ import annotations

import argparse
import logging
import sys
from enum import IntEnum
from pathlib import Path
from typing import Iterable, Optional

from .core.exceptions import (
    AttributeCloneError,
    ConfigurationError,
    FBXLoadError,
    FBXSaveError,
    FBXSDKNotAvailableError,
    OutputExistsError,
)
from .core.pipeline import SplitPipeline
from .logging_config import setup_logging
from .models import DEFAULT_BATCH_SIZE, DEFAULT_TYPE_PREFIX, RunReport, SplitOptions

logger = logging.getLogger(__name__)

FBX_EXTENSION = ".fbx"


class ExitCode(IntEnum):
    OK = 0
    USAGE = 2
    INPUT_ERROR = 3
    OUTPUT_ERROR = 4
    INTERNAL_ERROR = 5


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Copy the mesh nodes of an FBX file into one or more flat FBX scenes."
    )
    parser.add_argument("input", type=Path, help="FBX file to read.")
    parser.add_argument("output", type=Path, help="FBX file to write (base name when splitting).")
    parser.add_argument(
        "-f",
        "--force",
        action="store_true",
        help="Overwrite output files that already exist.",
    )
    parser.add_argument(
        "-n",
        "--dry-run",
        action="store_true",
        help="Only report node statistics; do not write anything.",
    )
    parser.add_argument(
        "-s",
        "--split",
        action="store_true",
        help="Write the selected nodes in batches, one file per batch.",
    )
    parser.add_argument(
        "--batch-size",
        type=int,
        default=DEFAULT_BATCH_SIZE,
        help=f"Maximum nodes per batch file (default: {DEFAULT_BATCH_SIZE}).",
    )
    parser.add_argument(
        "--type-prefix",
        default=DEFAULT_TYPE_PREFIX,
        help=f"Attribute type prefix that selects nodes (default: {DEFAULT_TYPE_PREFIX}).",
    )
    parser.add_argument(
        "--verify",
        action="store_true",
        help="Reload each written file and check that every node made it.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    parser.add_argument("--log-file", type=Path, help="Also write log records to this file.")
    return parser


def main(argv: Optional[Iterable[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(
        logging.DEBUG if args.verbose else logging.INFO,
        str(args.log_file) if args.log_file else None,
    )

    input_path: Path = args.input
    output_path: Path = args.output

    if input_path.resolve() == output_path.resolve():
        parser.error("Input and output filenames are the same.")
    if input_path.suffix.lower() != FBX_EXTENSION or output_path.suffix.lower() != FBX_EXTENSION:
        parser.error("Input and output filenames must have the .fbx extension.")
    if not input_path.exists():
        parser.error(f"File not found: {input_path}")

    options = SplitOptions(
        input_path=str(input_path),
        output_path=str(output_path),
        overwrite=args.force,
        dry_run=args.dry_run,
        split=args.split,
        max_nodes_per_batch=args.batch_size,
        type_prefix=args.type_prefix,
        verify=args.verify,
    )

    pipeline: Optional[SplitPipeline] = None
    try:
        pipeline = SplitPipeline(options)
        report = pipeline.run()
    except (FBXSDKNotAvailableError, ConfigurationError) as exc:
        parser.error(str(exc))
    except FBXLoadError as exc:
        print(f"Error: Unable to open file {input_path}: {exc}", file=sys.stderr)
        return ExitCode.INPUT_ERROR
    except OutputExistsError as exc:
        _print_partial(pipeline)
        print(f"{exc}; skipping. Use --force to overwrite.")
        return ExitCode.OK
    except FBXSaveError as exc:
        _print_partial(pipeline)
        for path in (result.path for result in exc.completed):
            print(f"Saved: {path}")
        print(f"Error: {_failure_message(pipeline, exc)}", file=sys.stderr)
        return ExitCode.OUTPUT_ERROR
    except AttributeCloneError as exc:
        _print_partial(pipeline)
        print(f"Error: {_failure_message(pipeline, exc)}", file=sys.stderr)
        return ExitCode.INTERNAL_ERROR

    _print_report(report)
    return ExitCode.OK


def _print_stats(report: RunReport) -> None:
    if report.root_name:
        print(f"Root node name: {report.root_name}")
    print(f"Number of usable nodes : {report.stats.selected_nodes}")
    print(f"Number of all nodes : {report.stats.total_nodes}")
    print(f"Max FBX depth : {report.stats.max_depth}")


def _print_partial(pipeline: Optional[SplitPipeline]) -> None:
    """Print the statistics of a run that stopped after selection."""

    if pipeline is not None and pipeline.report is not None:
        _print_stats(pipeline.report)


def _failure_message(pipeline: Optional[SplitPipeline], exc: Exception) -> str:
    if pipeline is not None and pipeline.report is not None and pipeline.report.error:
        return pipeline.report.error
    return str(exc)


def _print_report(report: RunReport) -> None:
    _print_stats(report)

    if report.dry_run:
        return

    if not report.results:
        print("No matching nodes; nothing written.")
        return

    for result in report.results:
        extra = f", {len(result.skipped_nodes)} skipped" if result.skipped_nodes else ""
        print(f"Saved: {result.path} ({result.node_count} nodes{extra})")
    print("FBX file processed and saved successfully.")


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
