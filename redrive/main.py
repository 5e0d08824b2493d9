"""Command-line entry point.

Expects a working directory holding two folders of text files:

    <work_dir>/ids/  identifiers to search for and replace, one per line
    <work_dir>/old/  events, one per line

and writes ``<work_dir>/new/new_events.txt`` (events carrying fresh
identifiers) together with ``<work_dir>/new/new_ids.txt`` (those
identifiers, row-aligned with the events).

All files are read into memory.
"""

import argparse
from collections.abc import Sequence
from pathlib import Path

from pydantic import ValidationError

from redrive.config.settings import Settings
from redrive.loader.exceptions import CorpusLoadError
from redrive.logging.logger import Log
from redrive.matching.exceptions import MatchingError
from redrive.matching.models import MatchMode
from redrive.processor.processor import build_context, build_processor
from redrive.sink.exceptions import SinkError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="redrive",
        description="Give failed events fresh event ids before republishing.",
    )
    parser.add_argument("work_dir", type=Path, help="working directory")
    parser.add_argument(
        "mode",
        nargs="?",
        type=MatchMode.parse,
        default=None,
        help="literal (default, fast) or structured (event_id fields only, slower)",
    )
    parser.add_argument("--workers", type=int, default=None, help="thread pool size")
    parser.add_argument(
        "--clean",
        action="store_true",
        help="remove the previous output folder before running",
    )
    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="do not render the progress bar",
    )
    parser.add_argument("--log-level", default=None, help="e.g. DEBUG, INFO")
    return parser


def load_settings(args: argparse.Namespace) -> Settings:
    """Environment settings with command-line overrides applied."""
    overrides: dict[str, object] = {"work_dir": args.work_dir}
    if args.mode is not None:
        overrides["match_mode"] = args.mode.value
    if args.workers is not None:
        overrides["max_workers"] = args.workers
    if args.clean:
        overrides["clean_output"] = True
    if args.no_progress:
        overrides["show_progress"] = False
    if args.log_level is not None:
        overrides["log_level"] = args.log_level
    return Settings(**overrides)


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point: parse args -> build settings -> run the pipeline."""
    args = build_parser().parse_args(argv)
    try:
        settings = load_settings(args)
    except ValidationError as exc:
        Log.configure("INFO")
        Log.error(f"Invalid configuration: {exc}")
        return 1
    Log.configure(settings.log_level)

    try:
        processor = build_processor(settings)
    except ValueError as exc:
        Log.error(f"Invalid configuration: {exc}")
        return 1

    try:
        context = processor.run(build_context(settings))
    except (CorpusLoadError, MatchingError, SinkError) as exc:
        Log.error(f"Run aborted: {exc}")
        return 1

    Log.info(f"Done: {context.written} events written to {settings.output_dir}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
