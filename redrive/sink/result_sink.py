from collections.abc import Callable, Iterable
from pathlib import Path

from redrive.matching.models import ReplacementResult
from redrive.sink.exceptions import SinkWriteError


class ResultSink:
    """Appends results to two row-aligned text files.

    Row *k* of the identifier file is the identifier embedded in row *k*
    of the record file. Results are consumed and written on the calling
    thread, one at a time.
    """

    def __init__(
        self,
        ids_path: Path,
        records_path: Path,
        on_written: Callable[[], None] | None = None,
    ) -> None:
        self._ids_path = ids_path
        self._records_path = records_path
        self._on_written = on_written

    def write(self, results: Iterable[ReplacementResult]) -> int:
        """Stream *results* to disk one item at a time.

        Returns:
            Number of rows written.

        Raises:
            SinkWriteError: if either file cannot be opened or written. Rows
                already written stay on disk.
        """
        written = 0
        try:
            with (
                self._ids_path.open("a", encoding="utf-8", newline="\n") as ids_out,
                self._records_path.open("a", encoding="utf-8", newline="\n") as records_out,
            ):
                for result in results:
                    ids_out.write(f"{result.new_identifier}\n")
                    records_out.write(f"{result.record}\n")
                    ids_out.flush()
                    records_out.flush()
                    written += 1
                    if self._on_written is not None:
                        self._on_written()
        except OSError as exc:
            raise SinkWriteError(f"Cannot write results: {exc}") from exc
        return written
