"""Core infrastructure for FBX scene loading, selection and splitting."""

from .exceptions import (
    AttributeCloneError,
    ConfigurationError,
    FBXLoadError,
    FBXSaveError,
    FBXSDKNotAvailableError,
    InvalidInputError,
    OutputExistsError,
)
from .session import SceneContext, SceneSession

__all__ = [
    "SceneSession",
    "SceneContext",
    "FBXSDKNotAvailableError",
    "FBXLoadError",
    "FBXSaveError",
    "InvalidInputError",
    "AttributeCloneError",
    "ConfigurationError",
    "OutputExistsError",
]
