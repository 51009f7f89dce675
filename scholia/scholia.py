"""Main Scholia class - entry point for the library."""

import logging
from dataclasses import replace
from pathlib import Path
from typing import Optional, Callable, List, Sequence

from scholia.config import ScholiaConfig, ParseOptions
from scholia.models import Document, ScholiaResult
from scholia.output import OutputFormatter, create_formatter
from scholia.parsers import ClojureParser
from scholia.parsers.batch import parse_file, parse_files
from scholia.pipeline.orchestrator import PipelineOrchestrator
from scholia.pipeline.stages import LoadStage, ParseStage, OutputStage

logger = logging.getLogger(__name__)


class Scholia:
    """Main Scholia class for turning Clojure sources into documentation."""

    def __init__(
        self,
        config: Optional[ScholiaConfig] = None,
        output_formatter: Optional[OutputFormatter] = None,
    ) -> None:
        """Initialize Scholia.

        Args:
            config: Configuration object
            output_formatter: Custom output formatter; defaults to the one
                named by `config.output_format`
        """
        self._config = config or ScholiaConfig()
        self._output_formatter = output_formatter or create_formatter(
            self._config.output_format
        )

    @classmethod
    def builder(cls) -> "ScholiaBuilder":
        """Create a builder for fluent configuration.

        Returns:
            ScholiaBuilder instance
        """
        return ScholiaBuilder()

    def parse_text(self, text: str, filename: str = "<string>") -> Document:
        """Parse Clojure source text with this instance's parse flags.

        Args:
            text: Source text
            filename: Name recorded on the document

        Returns:
            Parsed document
        """
        return ClojureParser().parse_text(
            text, options=self._config.parse_options, filename=filename
        )

    def parse_file(self, file_path: str) -> Document:
        """Parse one source file."""
        return parse_file(file_path, self._config.parse_options)

    def parse_files(self, file_paths: Sequence[str]) -> List[Document]:
        """Parse source files in order, using the configured worker count."""
        return parse_files(
            file_paths,
            options=self._config.parse_options,
            max_workers=self._config.max_workers,
        )

    def document(
        self,
        input_files: Sequence[str],
        output_dir: str = "./docs",
        progress_callback: Optional[Callable[[str, float], None]] = None,
    ) -> ScholiaResult:
        """Parse source files and write their documentation.

        Args:
            input_files: Source files, in output order
            output_dir: Output directory for results
            progress_callback: Optional callback for progress updates

        Returns:
            ScholiaResult with documents, output paths and metrics
        """
        Path(output_dir).mkdir(parents=True, exist_ok=True)

        stages = [
            LoadStage(),
            ParseStage(),
            OutputStage(formatter=self._output_formatter),
        ]

        orchestrator = PipelineOrchestrator(
            stages=stages,
            config=self._config,
            progress_callback=progress_callback,
        )

        context = orchestrator.execute(
            input_paths=input_files,
            output_dir=output_dir,
        )

        if context.has_errors:
            logger.warning(f"Documentation run finished with {len(context.errors)} error(s)")

        return ScholiaResult(
            success=not context.has_errors,
            output_paths=context.output_paths,
            documents=context.documents,
            metrics=context.metrics,
            warnings=context.warnings,
            errors=context.errors,
            failures=context.failures,
        )

    @property
    def config(self) -> ScholiaConfig:
        """Get the configuration."""
        return self._config


class ScholiaBuilder:
    """Builder for fluent Scholia configuration."""

    def __init__(self) -> None:
        """Initialize the builder."""
        self._config: Optional[ScholiaConfig] = None
        self._output_formatter: Optional[OutputFormatter] = None
        self._parse_options: Optional[ParseOptions] = None

    def with_config(self, config: ScholiaConfig) -> "ScholiaBuilder":
        """Set configuration.

        Args:
            config: ScholiaConfig instance

        Returns:
            Self for chaining
        """
        self._config = config
        return self

    def with_output_formatter(self, formatter: OutputFormatter) -> "ScholiaBuilder":
        """Set output formatter.

        Args:
            formatter: OutputFormatter instance

        Returns:
            Self for chaining
        """
        self._output_formatter = formatter
        return self

    def with_parse_options(self, options: ParseOptions) -> "ScholiaBuilder":
        """Override the parse flags of the configuration.

        Args:
            options: ParseOptions instance

        Returns:
            Self for chaining
        """
        self._parse_options = options
        return self

    def build(self) -> Scholia:
        """Build the Scholia instance.

        Returns:
            Configured Scholia instance
        """
        config = self._config or ScholiaConfig()
        if self._parse_options is not None:
            config = replace(
                config,
                lift_inline_comments=self._parse_options.lift_inline_comments,
                exclude_lifted_comments=self._parse_options.exclude_lifted_comments,
                merge_adjacent_code=self._parse_options.merge_adjacent_code,
            )
        return Scholia(config=config, output_formatter=self._output_formatter)
