"""Base class for documentation pipeline stages."""

import time
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from scholia.pipeline.context import PipelineContext


class PipelineStage(ABC):
    """One step of a documentation run: load, parse or output.

    Subclasses implement `process`; the orchestrator calls `run`, which
    records `<name>_time` in the context metrics.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        pass

    @abstractmethod
    def process(self, context: "PipelineContext") -> "PipelineContext":
        """Advance the run by one step.

        Args:
            context: State of the run so far

        Returns:
            The same context, updated
        """
        pass

    def should_skip(self, context: "PipelineContext") -> bool:
        """Whether there is nothing for this stage to do."""
        return False

    def run(self, context: "PipelineContext") -> "PipelineContext":
        start = time.perf_counter()
        try:
            return self.process(context)
        finally:
            context.add_metric(f"{self.name}_time", time.perf_counter() - start)
