import re
import threading
import uuid
from collections.abc import Iterable

UUID_PATTERN = (
    r"[a-fA-F0-9]{8}-[a-fA-F0-9]{4}-[a-fA-F0-9]{4}-[a-fA-F0-9]{4}-[a-fA-F0-9]{12}"
)
UUID_RE = re.compile(UUID_PATTERN)


def is_uuid_shaped(value: str) -> bool:
    """True if *value* has the canonical 8-4-4-4-12 hex layout."""
    return UUID_RE.fullmatch(value) is not None


class IdentifierGenerator:
    """Issues random UUID4 strings unique within a run.

    Never returns a value from *reserved* or one it has already issued.
    Safe to call from several threads.
    """

    def __init__(self, reserved: Iterable[str] = ()) -> None:
        self._taken: set[str] = {value.lower() for value in reserved}
        self._lock = threading.Lock()

    def new_identifier(self) -> str:
        with self._lock:
            while True:
                candidate = str(uuid.uuid4())
                if candidate not in self._taken:
                    self._taken.add(candidate)
                    return candidate
