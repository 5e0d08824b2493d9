from abc import ABC, abstractmethod
from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path

from redrive.matching.models import ReplacementResult


@dataclass(slots=True)
class RunContext:
    ids_dir: Path
    records_dir: Path
    new_ids_path: Path
    new_records_path: Path
    clean_dir: Path | None = None
    identifiers: list[str] = field(default_factory=list)
    records: list[str] = field(default_factory=list)
    results: Iterator[ReplacementResult] | None = None
    written: int = 0


class PipelineStep(ABC):
    name: str = ""

    @abstractmethod
    def run(self, context: RunContext) -> RunContext:
        raise NotImplementedError
