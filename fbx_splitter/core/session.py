"""Ownership of the FBX manager, the imported source scene and its output scenes."""

from __future__ import annotations

import contextlib
import logging
from dataclasses import dataclass
from typing import Any, List, Optional

from . import sdk

logger = logging.getLogger(__name__)


@dataclass
class SceneContext:
    """Holds the FBX manager, source scene, and convenience handles."""

    path: str
    manager: Any
    scene: Any
    root_node: Any

    @property
    def root_name(self) -> str:
        if self.root_node is None:
            return ""
        return self.root_node.GetName() or ""


class SceneSession(contextlib.AbstractContextManager["SceneSession"]):
    """One run's SDK state: the source scene plus the output scenes built from it.

    The source scene is only read. Output scenes are created through
    :meth:`create_output_scene`, written with :meth:`export` and given back
    with :meth:`release`; any left open are released on :meth:`close`.
    """

    def __init__(self, path: str) -> None:
        self._path = path
        self._manager: Optional[Any] = None
        self._scene: Optional[Any] = None
        self._outputs: List[Any] = []

    @property
    def path(self) -> str:
        return self._path

    @property
    def open_outputs(self) -> int:
        return len(self._outputs)

    @property
    def context(self) -> SceneContext:
        if self._manager is None or self._scene is None:
            raise RuntimeError("Session not loaded. Call load() before accessing context.")
        return SceneContext(
            path=self._path,
            manager=self._manager,
            scene=self._scene,
            root_node=self._scene.GetRootNode(),
        )

    def load(self) -> "SceneSession":
        if self._manager is not None:
            return self

        manager = sdk.create_manager()
        try:
            scene = sdk.import_scene(manager, self._path, "myScene")
        except BaseException:
            sdk.destroy_manager(manager)
            raise

        logger.info("Loaded FBX scene from '%s'", self._path)
        self._manager = manager
        self._scene = scene
        return self

    def create_output_scene(self):
        """Return a new empty scene carrying the source scene's axis system.

        The axis system is the only global setting carried over.
        """

        context = self.context
        output = sdk.create_scene(context.manager, "")
        axis_system = context.scene.GetGlobalSettings().GetAxisSystem()
        output.GetGlobalSettings().SetAxisSystem(axis_system)
        self._outputs.append(output)
        return output

    def export(self, output, path: str) -> None:
        """Write an output scene of this session to ``path``."""

        sdk.export_scene(self.context.manager, output, path)

    def release(self, output) -> None:
        if any(candidate is output for candidate in self._outputs):
            self._outputs = [candidate for candidate in self._outputs if candidate is not output]
        output.Destroy()

    def close(self) -> None:
        for output in list(self._outputs):
            self.release(output)
        if self._manager is not None:
            sdk.destroy_manager(self._manager)
            self._manager = None
            self._scene = None

    def __exit__(self, exc_type, exc, tb) -> Optional[bool]:
        self.close()
        return None

    # Allow usage as context manager via `with SceneSession(path) as session:`
    def __enter__(self) -> "SceneSession":
        return self.load()
