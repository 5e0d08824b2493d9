import os
from abc import ABC, abstractmethod
from collections.abc import Iterator, Sequence
from concurrent.futures import FIRST_COMPLETED, Future, ThreadPoolExecutor, wait
from itertools import islice
from typing import ClassVar

from redrive.logging.logger import Log
from redrive.matching.identifiers import IdentifierGenerator
from redrive.matching.models import CandidatePair, MatchMode, ReplacementResult


class BaseMatcher(ABC):
    """Contract for all matching strategies.

    Subclasses decide which record belongs to an identifier and how that
    record is rewritten; the fan-out over identifiers lives here.
    """

    mode: ClassVar[MatchMode]

    IN_FLIGHT_PER_WORKER: ClassVar[int] = 2

    def __init__(self, max_workers: int | None = None) -> None:
        self._max_workers = max_workers

    def resolve(
        self,
        records: Sequence[str],
        identifiers: Sequence[str],
    ) -> Iterator[ReplacementResult]:
        """Lazily yield one rewritten record per resolvable identifier.

        Identifiers are resolved concurrently and yielded in completion
        order. Identifiers with no matching record produce nothing. At most
        ``IN_FLIGHT_PER_WORKER`` identifiers per worker are pending at a
        time, and a result is released as soon as it has been yielded.

        Raises:
            MatchingError: from the first identifier whose record cannot be
                rewritten; pending work is cancelled.
        """
        generator = IdentifierGenerator(identifiers)
        window = self._workers() * self.IN_FLIGHT_PER_WORKER
        remaining = iter(identifiers)
        executor = ThreadPoolExecutor(max_workers=self._max_workers)

        def submit(count: int) -> set[Future[ReplacementResult | None]]:
            return {
                executor.submit(self._resolve_one, identifier, records, generator)
                for identifier in islice(remaining, count)
            }

        try:
            pending = submit(window)
            while pending:
                done, pending = wait(pending, return_when=FIRST_COMPLETED)
                while done:
                    future = done.pop()
                    pending |= submit(1)
                    result = future.result()
                    del future
                    if result is not None:
                        yield result
                    del result
        finally:
            executor.shutdown(wait=True, cancel_futures=True)

    def _workers(self) -> int:
        if self._max_workers is not None:
            return self._max_workers
        return min(32, (os.cpu_count() or 1) + 4)

    def _resolve_one(
        self,
        identifier: str,
        records: Sequence[str],
        generator: IdentifierGenerator,
    ) -> ReplacementResult | None:
        candidate = self.find_candidate(identifier, records)
        if candidate is None:
            Log.debug(f"No record found for {identifier}")
            return None
        new_identifier = generator.new_identifier()
        return ReplacementResult(
            new_identifier=new_identifier,
            record=self.rewrite(candidate, new_identifier),
            original_identifier=identifier,
        )

    @abstractmethod
    def find_candidate(
        self,
        identifier: str,
        records: Sequence[str],
    ) -> CandidatePair | None:
        """Return the first record (in the given order) matching *identifier*."""

    @abstractmethod
    def rewrite(self, candidate: CandidatePair, new_identifier: str) -> str:
        """Return the candidate record carrying *new_identifier*.

        Raises:
            MatchingError: if the record cannot be rewritten.
        """
