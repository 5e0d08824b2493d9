from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from redrive.loader.exceptions import CorpusLoadError
from redrive.logging.logger import Log


class CorpusLoader:
    """Reads every line of every file below a root folder.

    Files are read concurrently; each worker returns its own line list and
    the lists are merged once all reads are done. File order in the merged
    result is unspecified.
    """

    def __init__(
        self,
        max_workers: int | None = None,
        skip_blank_lines: bool = False,
    ) -> None:
        self._max_workers = max_workers
        self._skip_blank_lines = skip_blank_lines

    def load(self, root: Path) -> list[str]:
        """Load all lines below *root*.

        Raises:
            CorpusLoadError: if the root cannot be walked or any file
                cannot be read or decoded as UTF-8.
        """
        files = self._list_files(root)
        Log.info(f"Loading {len(files)} files from {root.resolve()}")

        with Log.timed(f"Loading {root}"):
            with ThreadPoolExecutor(max_workers=self._max_workers) as executor:
                per_file = list(executor.map(self._read_lines, files))

        lines = [line for chunk in per_file for line in chunk]
        Log.info(f"Loaded {len(lines)} lines from {root}")
        return lines

    def _list_files(self, root: Path) -> list[Path]:
        if not root.is_dir():
            raise CorpusLoadError(f"Cannot read {root}: not a directory")
        try:
            return sorted(path for path in root.rglob("*") if path.is_file())
        except OSError as exc:
            raise CorpusLoadError(f"Cannot read {root}: {exc}") from exc

    def _read_lines(self, path: Path) -> list[str]:
        try:
            with path.open(encoding="utf-8") as handle:
                lines = [line.rstrip("\n") for line in handle]
        except (OSError, UnicodeDecodeError) as exc:
            raise CorpusLoadError(f"Cannot read {path}: {exc}") from exc

        if self._skip_blank_lines:
            lines = [line for line in lines if line.strip()]
        Log.debug(f"  - {path.name}: {len(lines)} lines")
        return lines
