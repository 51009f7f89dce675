"""Parse stage - parses source files into documents."""

from scholia.pipeline.base import PipelineStage
from scholia.pipeline.context import PipelineContext
from scholia.parsers.batch import parse_files


class ParseStage(PipelineStage):
    """Stage that parses every selected source file."""

    @property
    def name(self) -> str:
        return "parse"

    def should_skip(self, context: PipelineContext) -> bool:
        return not context.sources

    def process(self, context: PipelineContext) -> PipelineContext:
        """Parse the selected sources.

        Args:
            context: Pipeline context

        Returns:
            Updated context with documents

        Raises:
            ScholiaSyntaxError: If any file fails to parse; the message names
                the file and line
        """
        context.documents = parse_files(
            context.sources,
            options=context.config.parse_options,
            max_workers=context.config.max_workers,
        )

        context.add_metric("document_count", len(context.documents))
        context.add_metric("section_count", context.section_count)

        return context
