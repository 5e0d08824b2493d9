from collections.abc import Sequence

from redrive.matching.base import BaseMatcher
from redrive.matching.models import CandidatePair, MatchMode


class LiteralMatcher(BaseMatcher):
    """Plain substring search; replaces the identifier wherever it occurs."""

    mode = MatchMode.LITERAL

    def find_candidate(
        self,
        identifier: str,
        records: Sequence[str],
    ) -> CandidatePair | None:
        for record in records:
            if identifier in record:
                return CandidatePair(identifier=identifier, record=record)
        return None

    def rewrite(self, candidate: CandidatePair, new_identifier: str) -> str:
        return candidate.record.replace(candidate.identifier, new_identifier)
