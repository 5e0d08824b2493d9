import threading

from tqdm import tqdm


class ProgressReporter:
    """Counts written rows and renders them as a progress bar."""

    def __init__(self, total: int, enabled: bool = True) -> None:
        self._total = total
        self._done = 0
        self._lock = threading.Lock()
        self._bar: tqdm | None = (
            tqdm(total=total, desc="Rewriting", unit="event") if enabled else None
        )

    @property
    def done(self) -> int:
        return self._done

    @property
    def total(self) -> int:
        return self._total

    def advance(self) -> None:
        with self._lock:
            self._done += 1
            if self._bar is not None:
                self._bar.update(1)

    def close(self) -> None:
        if self._bar is not None:
            self._bar.close()
