import shutil
from pathlib import Path

from redrive.logging.logger import Log
from redrive.sink.exceptions import OutputConflictError, SinkWriteError


def prepare_output(*paths: Path, clean_dir: Path | None = None) -> None:
    """Create each path as an empty file, refusing to clobber existing data.

    Every path is checked before any of them is created.

    When *clean_dir* is given it is removed first, together with everything
    below it.

    Raises:
        OutputConflictError: if a path already exists and is not empty.
        SinkWriteError: if a directory or file cannot be created.
    """
    try:
        if clean_dir is not None and clean_dir.exists():
            Log.info(f"Cleaning {clean_dir}")
            shutil.rmtree(clean_dir)

        for path in paths:
            if path.exists() and path.stat().st_size > 0:
                raise OutputConflictError(
                    f"Abort, don't want to overwrite {path.resolve()}"
                )
        for path in paths:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.touch()
            Log.info(f"Created output file {path.resolve()}")
    except OSError as exc:
        raise SinkWriteError(f"Cannot create output: {exc}") from exc
