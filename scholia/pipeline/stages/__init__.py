"""Pipeline stages for Scholia."""

from scholia.pipeline.stages.load_stage import LoadStage
from scholia.pipeline.stages.parse_stage import ParseStage
from scholia.pipeline.stages.output_stage import OutputStage

__all__ = [
    "LoadStage",
    "ParseStage",
    "OutputStage",
]
