"""Snapshot copy jobs package."""

from .base import BaseJob
from .resolve_parameters import ResolutionStage, ResolveParametersJob

__all__ = [
    "BaseJob",
    "ResolutionStage",
    "ResolveParametersJob",
]
