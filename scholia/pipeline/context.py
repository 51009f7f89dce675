"""Pipeline context for carrying state through stages."""

from dataclasses import dataclass, field
from typing import List, Any, Dict

from scholia.models import Document
from scholia.config import ScholiaConfig


@dataclass(frozen=True)
class StageFailure:
    """An exception raised by a stage, kept for callers that need more than text.

    A `ScholiaSyntaxError` here still carries its `file_path` and `line`.
    """

    stage: str
    error: Exception

    def __str__(self) -> str:
        return f"{self.stage}: {self.error}"


@dataclass
class PipelineContext:
    """Carries state through the pipeline stages."""

    # Input
    input_paths: List[str]
    output_dir: str
    config: ScholiaConfig

    # Stage outputs (populated as pipeline progresses)
    sources: List[str] = field(default_factory=list)
    documents: List[Document] = field(default_factory=list)
    output_paths: List[str] = field(default_factory=list)

    # Control flow
    should_stop: bool = False

    metrics: Dict[str, Any] = field(default_factory=dict)

    # Error tracking
    errors: List[str] = field(default_factory=list)
    failures: List[StageFailure] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    def add_error(self, error: str) -> None:
        """Add an error message."""
        self.errors.append(error)

    def add_failure(self, stage: str, error: Exception) -> StageFailure:
        """Record an exception raised by `stage`, and its message as an error."""
        failure = StageFailure(stage=stage, error=error)
        self.failures.append(failure)
        self.add_error(str(failure))
        return failure

    def add_warning(self, warning: str) -> None:
        """Add a warning message."""
        self.warnings.append(warning)

    def add_metric(self, key: str, value: Any) -> None:
        """Add or update a metric."""
        self.metrics[key] = value

    def increment_metric(self, key: str, amount: int = 1) -> None:
        """Increment a numeric metric."""
        current = self.metrics.get(key, 0)
        self.metrics[key] = current + amount

    @property
    def has_errors(self) -> bool:
        return len(self.errors) > 0

    @property
    def section_count(self) -> int:
        """Number of sections across all documents."""
        return sum(d.section_count for d in self.documents)
