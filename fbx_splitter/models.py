"""Domain models used across the splitter."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Optional, Sequence, Tuple

from .core.exceptions import ConfigurationError

Vector3 = Tuple[float, float, float]

DEFAULT_BATCH_SIZE = 5000
DEFAULT_TYPE_PREFIX = "Mesh"


@dataclass(frozen=True)
class NodeTransform:
    translation: Vector3
    rotation: Vector3
    scaling: Vector3


@dataclass(frozen=True)
class SelectionStats:
    """Counts gathered while walking the source scene."""

    total_nodes: int = 0
    selected_nodes: int = 0
    max_depth: int = 0

    @property
    def skipped_nodes(self) -> int:
        return self.total_nodes - self.selected_nodes


@dataclass(frozen=True)
class Chunk:
    """Contiguous range ``[start, end)`` of the candidate list and its output file."""

    index: int
    start: int
    end: int
    output_path: str

    @property
    def size(self) -> int:
        return self.end - self.start

    def take(self, candidates: Sequence[Any]) -> Sequence[Any]:
        return candidates[self.start:self.end]


@dataclass
class SplitOptions:
    """Settings for one run, as supplied by the command line."""

    input_path: str
    output_path: str
    overwrite: bool = False
    dry_run: bool = False
    split: bool = False
    max_nodes_per_batch: int = DEFAULT_BATCH_SIZE
    type_prefix: str = DEFAULT_TYPE_PREFIX
    verify: bool = False

    def validate(self) -> "SplitOptions":
        if isinstance(self.max_nodes_per_batch, bool) or not isinstance(self.max_nodes_per_batch, int):
            raise ConfigurationError(
                f"Batch size must be an integer, got {self.max_nodes_per_batch!r}"
            )
        if self.max_nodes_per_batch <= 0:
            raise ConfigurationError(
                f"Batch size must be positive, got {self.max_nodes_per_batch}"
            )
        if not self.type_prefix:
            raise ConfigurationError("Type prefix must not be empty")
        return self


@dataclass
class ExportResult:
    chunk: Chunk
    path: str
    node_count: int
    skipped_nodes: List[str] = field(default_factory=list)


@dataclass
class VerificationReport:
    path: str
    expected: int
    actual: int
    missing: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.expected == self.actual and not self.missing


@dataclass
class RunReport:
    input_path: str
    root_name: str
    stats: SelectionStats
    dry_run: bool = False
    chunks: List[Chunk] = field(default_factory=list)
    results: List[ExportResult] = field(default_factory=list)
    verifications: List[VerificationReport] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def written_paths(self) -> List[str]:
        return [result.path for result in self.results]
