from redrive.config.settings import Settings
from redrive.loader.corpus_loader import CorpusLoader
from redrive.logging.logger import Log
from redrive.matching.factory import MatcherFactory
from redrive.processor.pipeline import PipelineStep, RunContext
from redrive.processor.steps import (
    LoadIdentifiersStep,
    LoadRecordsStep,
    PrepareOutputStep,
    ResolveStep,
    WriteResultsStep,
)


class Processor:
    """Runs the redrive pipeline.

    Pipeline: prepare output -> load ids -> load records -> resolve -> write.
    """

    def __init__(self, steps: list[PipelineStep]) -> None:
        self._steps = steps

    def run(self, context: RunContext) -> RunContext:
        with Log.timed("Run"):
            for step in self._steps:
                with Log.timed(f"Step '{step.name}'"):
                    context = step.run(context)
        return context


def build_context(settings: Settings) -> RunContext:
    """Build the run context from configured paths."""
    return RunContext(
        ids_dir=settings.ids_dir,
        records_dir=settings.records_dir,
        new_ids_path=settings.new_ids_path,
        new_records_path=settings.new_records_path,
        clean_dir=settings.output_dir if settings.clean_output else None,
    )


def build_processor(settings: Settings) -> Processor:
    """Build a Processor with all required collaborators."""
    ids_loader = CorpusLoader(max_workers=settings.max_workers, skip_blank_lines=True)
    records_loader = CorpusLoader(max_workers=settings.max_workers)
    matcher = MatcherFactory.create(settings)
    return Processor(
        steps=[
            PrepareOutputStep(),
            LoadIdentifiersStep(ids_loader),
            LoadRecordsStep(records_loader),
            ResolveStep(matcher),
            WriteResultsStep(show_progress=settings.show_progress),
        ]
    )
