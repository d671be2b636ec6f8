"""Split the mesh nodes of an FBX scene into flat, optionally batched, FBX files."""

from .core import SceneSession
from .core.pipeline import SplitPipeline
from .models import RunReport, SelectionStats, SplitOptions

__all__ = ["SceneSession", "SplitPipeline", "SplitOptions", "RunReport", "SelectionStats"]
