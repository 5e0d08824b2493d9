from redrive.loader.corpus_loader import CorpusLoader
from redrive.logging.logger import Log
from redrive.matching.base import BaseMatcher
from redrive.processor.pipeline import PipelineStep, RunContext
from redrive.sink.output import prepare_output
from redrive.sink.progress import ProgressReporter
from redrive.sink.result_sink import ResultSink


class PrepareOutputStep(PipelineStep):
    name = "prepare output"

    def run(self, context: RunContext) -> RunContext:
        prepare_output(
            context.new_records_path,
            context.new_ids_path,
            clean_dir=context.clean_dir,
        )
        return context


class LoadIdentifiersStep(PipelineStep):
    name = "load identifiers"

    def __init__(self, loader: CorpusLoader) -> None:
        self._loader = loader

    def run(self, context: RunContext) -> RunContext:
        context.identifiers = self._loader.load(context.ids_dir)
        return context


class LoadRecordsStep(PipelineStep):
    name = "load records"

    def __init__(self, loader: CorpusLoader) -> None:
        self._loader = loader

    def run(self, context: RunContext) -> RunContext:
        context.records = self._loader.load(context.records_dir)
        return context


class ResolveStep(PipelineStep):
    name = "resolve"

    def __init__(self, matcher: BaseMatcher) -> None:
        self._matcher = matcher

    def run(self, context: RunContext) -> RunContext:
        Log.info(
            f"Processing [{len(context.records)} records, "
            f"{len(context.identifiers)} ids] in {self._matcher.mode.value} mode"
        )
        context.results = self._matcher.resolve(context.records, context.identifiers)
        return context


class WriteResultsStep(PipelineStep):
    name = "write results"

    def __init__(self, show_progress: bool = True) -> None:
        self._show_progress = show_progress

    def run(self, context: RunContext) -> RunContext:
        if context.results is None:
            raise ValueError("RunContext.results must be set before writing")
        progress = ProgressReporter(len(context.identifiers), enabled=self._show_progress)
        sink = ResultSink(
            context.new_ids_path,
            context.new_records_path,
            on_written=progress.advance,
        )
        try:
            context.written = sink.write(context.results)
        finally:
            progress.close()

        dropped = len(context.identifiers) - context.written
        Log.info(f"Wrote {context.written} events, {dropped} ids had no matching event")
        return context
