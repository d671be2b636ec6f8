"""Project-specific exception types."""

from __future__ import annotations

from typing import Any, List, Optional


class FBXSDKNotAvailableError(ImportError):
    """Raised when the Autodesk FBX SDK Python bindings are missing."""


class FBXLoadError(RuntimeError):
    """Raised when a scene fails to load."""


SAVE_PREPARE = "prepare"
SAVE_WRITE = "write"
SAVE_VERIFY = "verify"


class FBXSaveError(RuntimeError):
    """Raised when an output scene cannot be exported.

    ``reason`` tells whether the destination could not be prepared
    (``"prepare"``), the exporter failed while writing (``"write"``) or the
    reloaded file did not match (``"verify"``). ``chunk`` is the chunk being
    written when the failure happened and ``completed`` lists the export
    results that were already on disk.
    """

    def __init__(
        self,
        message: str,
        *,
        path: Optional[str] = None,
        reason: str = SAVE_WRITE,
        chunk: Optional[Any] = None,
        completed: Optional[List[Any]] = None,
    ) -> None:
        super().__init__(message)
        self.path = path
        self.reason = reason
        self.chunk = chunk
        self.completed = list(completed or [])


class InvalidInputError(ValueError):
    """Raised when a scene or node handed to an operation is missing."""


class AttributeCloneError(RuntimeError):
    """Raised when a deep clone does not produce an object of the source's kind."""

    def __init__(self, message: str, *, node_name: str = "", attribute_type: str = "") -> None:
        super().__init__(message)
        self.node_name = node_name
        self.attribute_type = attribute_type


class ConfigurationError(ValueError):
    """Raised for invalid run settings such as a non-positive batch size."""


class OutputExistsError(FileExistsError):
    """Raised when an output file exists and overwriting was not requested."""

    def __init__(self, paths: List[str]) -> None:
        joined = ", ".join(paths)
        super().__init__(f"Output file already exists: {joined}")
        self.paths = list(paths)
