"""Load stage - selects the source files to document."""

import logging
import re
from pathlib import Path

from scholia.pipeline.base import PipelineStage
from scholia.pipeline.context import PipelineContext
from scholia.parsers import ParserFactory
from scholia.exceptions import ScholiaParseError

logger = logging.getLogger(__name__)


class LoadStage(PipelineStage):
    """Stage that checks inputs and drops excluded or unsupported files."""

    @property
    def name(self) -> str:
        return "load"

    def process(self, context: PipelineContext) -> PipelineContext:
        """Select sources from the input paths.

        Args:
            context: Pipeline context

        Returns:
            Updated context with sources
        """
        patterns = [re.compile(p) for p in context.config.exclude]

        sources = []
        excluded = 0
        for input_path in context.input_paths:
            path = Path(input_path)
            if not path.is_file():
                raise ScholiaParseError(
                    f"Input file not found: {input_path}",
                    file_path=input_path,
                )

            if any(p.search(input_path) for p in patterns):
                logger.info(f"Excluding {input_path}")
                excluded += 1
                continue

            if not ParserFactory.is_supported(path):
                context.add_warning(f"Skipping unsupported file: {input_path}")
                continue

            sources.append(input_path)

        if not sources:
            context.add_warning("No source files left to document")

        context.sources = sources

        context.add_metric("source_count", len(sources))
        context.add_metric("excluded_count", excluded)

        return context
