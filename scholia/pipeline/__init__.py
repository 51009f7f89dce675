"""Pipeline components for Scholia."""

from scholia.pipeline.base import PipelineStage
from scholia.pipeline.context import PipelineContext, StageFailure
from scholia.pipeline.orchestrator import PipelineOrchestrator

__all__ = [
    "PipelineStage",
    "PipelineContext",
    "PipelineOrchestrator",
    "StageFailure",
]
