"""Clear-formatting transform: markdown/HTML back to plain prose."""

from .pipeline import (
    DEFAULT_PIPELINE,
    DEFAULT_STAGES,
    ClearPipeline,
    ClearStage,
    clear_formatting,
)

__all__ = [
    "DEFAULT_PIPELINE",
    "DEFAULT_STAGES",
    "ClearPipeline",
    "ClearStage",
    "clear_formatting",
]
