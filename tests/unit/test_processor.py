from pathlib import Path
from unittest.mock import MagicMock

import pytest

from redrive.config.settings import Settings
from redrive.loader.corpus_loader import CorpusLoader
from redrive.matching.base import BaseMatcher
from redrive.matching.literal import LiteralMatcher
from redrive.matching.models import MatchMode, ReplacementResult
from redrive.matching.structured import StructuredMatcher
from redrive.processor.pipeline import RunContext
from redrive.processor.processor import Processor, build_context, build_processor
from redrive.processor.steps import (
    LoadIdentifiersStep,
    LoadRecordsStep,
    PrepareOutputStep,
    ResolveStep,
    WriteResultsStep,
)
from redrive.sink.exceptions import OutputConflictError


def _make_context(tmp_path: Path) -> RunContext:
    return RunContext(
        ids_dir=tmp_path / "ids",
        records_dir=tmp_path / "old",
        new_ids_path=tmp_path / "new" / "new_ids.txt",
        new_records_path=tmp_path / "new" / "new_events.txt",
    )


class TestProcessorRun:
    def test_runs_steps_in_order(self, tmp_path: Path) -> None:
        calls: list[str] = []
        steps = []
        for name in ("first", "second", "third"):
            step = MagicMock()
            step.name = name
            step.run.side_effect = lambda ctx, name=name: calls.append(name) or ctx
            steps.append(step)
        context = _make_context(tmp_path)

        result = Processor(steps).run(context)

        assert calls == ["first", "second", "third"]
        assert result is context

    def test_stops_at_first_failing_step(self, tmp_path: Path) -> None:
        failing = MagicMock()
        failing.name = "failing"
        failing.run.side_effect = OutputConflictError("taken")
        after = MagicMock()
        after.name = "after"

        with pytest.raises(OutputConflictError):
            Processor([failing, after]).run(_make_context(tmp_path))

        after.run.assert_not_called()


class TestSteps:
    def test_prepare_output_creates_files(self, tmp_path: Path) -> None:
        context = _make_context(tmp_path)

        PrepareOutputStep().run(context)

        assert context.new_ids_path.exists()
        assert context.new_records_path.exists()

    def test_load_steps_fill_context(self, tmp_path: Path) -> None:
        loader = MagicMock(spec=CorpusLoader)
        loader.load.side_effect = lambda root: [f"line from {root.name}"]
        context = _make_context(tmp_path)

        LoadIdentifiersStep(loader).run(context)
        LoadRecordsStep(loader).run(context)

        assert context.identifiers == ["line from ids"]
        assert context.records == ["line from old"]

    def test_resolve_step_sets_results(self, tmp_path: Path) -> None:
        matcher = MagicMock(spec=BaseMatcher)
        matcher.mode = MatchMode.LITERAL
        matcher.resolve.return_value = iter([])
        context = _make_context(tmp_path)
        context.identifiers = ["abc"]
        context.records = ["has abc"]

        ResolveStep(matcher).run(context)

        matcher.resolve.assert_called_once_with(["has abc"], ["abc"])
        assert context.results is matcher.resolve.return_value

    def test_write_step_counts_rows(self, tmp_path: Path) -> None:
        context = _make_context(tmp_path)
        PrepareOutputStep().run(context)
        context.identifiers = ["a", "b"]
        context.results = iter([ReplacementResult("n1", "r n1", "a")])

        WriteResultsStep(show_progress=False).run(context)

        assert context.written == 1
        assert context.new_ids_path.read_text() == "n1\n"
        assert context.new_records_path.read_text() == "r n1\n"

    def test_write_step_requires_results(self, tmp_path: Path) -> None:
        with pytest.raises(ValueError, match="results must be set"):
            WriteResultsStep(show_progress=False).run(_make_context(tmp_path))


class TestBuildProcessor:
    def test_wires_pipeline_steps(self) -> None:
        processor = build_processor(Settings(match_mode="structured"))

        step_types = [type(step) for step in processor._steps]
        assert step_types == [
            PrepareOutputStep,
            LoadIdentifiersStep,
            LoadRecordsStep,
            ResolveStep,
            WriteResultsStep,
        ]
        assert isinstance(processor._steps[3]._matcher, StructuredMatcher)

    def test_defaults_to_literal_matching(self) -> None:
        processor = build_processor(Settings())
        assert isinstance(processor._steps[3]._matcher, LiteralMatcher)

    def test_only_identifier_loader_skips_blank_lines(self, tmp_path: Path) -> None:
        (tmp_path / "ids").mkdir()
        (tmp_path / "old").mkdir()
        (tmp_path / "ids" / "ids.txt").write_text("abc\n\n", encoding="utf-8")
        (tmp_path / "old" / "events.txt").write_text("has abc\n  \n", encoding="utf-8")
        processor = build_processor(Settings(work_dir=tmp_path))
        context = _make_context(tmp_path)

        processor._steps[1].run(context)
        processor._steps[2].run(context)

        assert context.identifiers == ["abc"]
        assert context.records == ["has abc", "  "]

    def test_build_context_uses_settings_paths(self, tmp_path: Path) -> None:
        settings = Settings(work_dir=tmp_path, clean_output=True)

        context = build_context(settings)

        assert context.ids_dir == tmp_path / "ids"
        assert context.new_records_path == tmp_path / "new" / "new_events.txt"
        assert context.clean_dir == tmp_path / "new"

    def test_build_context_keeps_output_by_default(self, tmp_path: Path) -> None:
        context = build_context(Settings(work_dir=tmp_path))
        assert context.clean_dir is None
