"""Pipeline orchestrator - runs the load, parse and output stages in order."""

import logging
import time
from typing import List, Optional, Callable, Sequence

from scholia.config import ScholiaConfig
from scholia.exceptions import ScholiaError
from scholia.pipeline.base import PipelineStage
from scholia.pipeline.context import PipelineContext

logger = logging.getLogger(__name__)


class PipelineOrchestrator:
    """Runs a fixed list of stages over one set of source files."""

    def __init__(
        self,
        stages: List[PipelineStage],
        config: ScholiaConfig,
        progress_callback: Optional[Callable[[str, float], None]] = None,
    ) -> None:
        """Initialize the pipeline orchestrator.

        Args:
            stages: Stages to run, in order
            config: Scholia configuration
            progress_callback: Called with a stage label and the fraction of
                stages done after each stage
        """
        self._stages = list(stages)
        self._config = config
        self._progress_callback = progress_callback

    def execute(
        self,
        input_paths: Sequence[str],
        output_dir: str,
    ) -> PipelineContext:
        """Run every stage on a set of source files.

        A stage that raises is recorded on the context as a `StageFailure`.
        The run stops there unless `continue_on_error` is set; a syntax error
        in one file therefore produces no output at all by default.

        Args:
            input_paths: Paths of source files, in output order
            output_dir: Output directory

        Returns:
            Pipeline context with documents, output paths, metrics and failures
        """
        start = time.perf_counter()
        context = PipelineContext(
            input_paths=list(input_paths),
            output_dir=output_dir,
            config=self._config,
        )

        for done, stage in enumerate(self._stages, start=1):
            if context.should_stop:
                logger.warning(f"Run stopped before stage: {stage.name}")
                break

            label = stage.name
            if stage.should_skip(context):
                logger.info(f"Skipping stage: {stage.name}")
                label = f"Skipped: {stage.name}"
            else:
                logger.info(f"Running stage: {stage.name}")
                try:
                    context = stage.run(context)
                except ScholiaError as e:
                    logger.error(f"Stage {stage.name} failed: {e}")
                    self._fail(context, stage, e)
                except Exception as e:
                    logger.exception(f"Unexpected error in stage {stage.name}")
                    self._fail(context, stage, e)
                else:
                    logger.debug(
                        f"Stage {stage.name} took {context.metrics[f'{stage.name}_time']:.3f}s"
                    )

            if self._progress_callback:
                self._progress_callback(label, done / len(self._stages))

        context.add_metric("total_time", time.perf_counter() - start)
        return context

    def _fail(self, context: PipelineContext, stage: PipelineStage, error: Exception) -> None:
        context.add_failure(stage.name, error)
        if not self._config.continue_on_error:
            context.should_stop = True
