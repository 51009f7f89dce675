"""Result models for Scholia."""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Dict, Any

from scholia.models.document import Document

if TYPE_CHECKING:
    from scholia.pipeline.context import StageFailure


@dataclass
class ScholiaResult:
    """Result of a documentation run."""

    success: bool
    output_paths: List[str]
    documents: List[Document]
    metrics: Dict[str, Any] = field(default_factory=dict)
    warnings: List[str] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)
    failures: List["StageFailure"] = field(default_factory=list)

    @property
    def document_count(self) -> int:
        """Get the number of parsed documents."""
        return len(self.documents)

    @property
    def section_count(self) -> int:
        """Get total section count across all documents."""
        return sum(d.section_count for d in self.documents)

    @property
    def has_warnings(self) -> bool:
        """Check if there are any warnings."""
        return len(self.warnings) > 0

    @property
    def has_errors(self) -> bool:
        """Check if there are any errors."""
        return len(self.errors) > 0

    def add_warning(self, warning: str) -> None:
        """Add a warning message."""
        self.warnings.append(warning)

    def add_error(self, error: str) -> None:
        """Add an error message."""
        self.errors.append(error)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "success": self.success,
            "output_paths": self.output_paths,
            "document_count": self.document_count,
            "section_count": self.section_count,
            "metrics": self.metrics,
            "warnings": self.warnings,
            "errors": self.errors,
        }
