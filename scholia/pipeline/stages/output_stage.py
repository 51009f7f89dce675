"""Output stage - writes documents to output files."""

from collections import Counter
from typing import TYPE_CHECKING

from scholia.pipeline.base import PipelineStage
from scholia.pipeline.context import PipelineContext
from scholia.exceptions import ScholiaPipelineError

if TYPE_CHECKING:
    from scholia.output.base import OutputFormatter


class OutputStage(PipelineStage):
    """Stage that writes parsed documents to the output directory."""

    def __init__(self, formatter: "OutputFormatter") -> None:
        """Initialize the output stage.

        Args:
            formatter: Output formatter to use
        """
        self._formatter = formatter

    @property
    def name(self) -> str:
        return "output"

    def process(self, context: PipelineContext) -> PipelineContext:
        """Write documents to output files.

        In multi-file mode, documents sharing a namespace are written under
        numbered names and reported as a warning.

        Args:
            context: Pipeline context

        Returns:
            Updated context with output paths
        """
        if not context.documents:
            context.add_warning("No documents to write")
            return context

        if context.config.multi_file:
            stems = Counter(self._formatter.document_stem(d) for d in context.documents)
            for stem, count in stems.items():
                if count > 1:
                    context.add_warning(
                        f"{count} documents share the name '{stem}'; "
                        f"later ones are written as {stem}-2, {stem}-3, ..."
                    )

        try:
            context.output_paths = self._formatter.write(
                documents=context.documents,
                output_dir=context.output_dir,
                config=context.config,
            )
        except OSError as e:
            raise ScholiaPipelineError(
                f"Could not write output to {context.output_dir}: {e}", self.name
            ) from e

        context.add_metric("output_paths", list(context.output_paths))
        return context
