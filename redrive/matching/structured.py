"""Field-aware matching on ``"event_id":"<uuid>"`` fragments.

Events may carry the same value under other names, for example
``triggering_system_event_id``. Those fields never select a record here,
so an identifier only resolves when it is the value of an ``event_id``
field.

Rewriting re-scans the selected record for its *first* ``event_id`` field
and fails if there is none. The first field's value is swapped for the new
identifier, every verbatim copy of that value in the record is swapped as
well, and then every other ``event_id`` field in the record is given the new
identifier too, so a record holding several ``event_id`` fields never keeps
the identifier it was selected for.
"""

import re
from collections.abc import Sequence
from typing import ClassVar

from redrive.matching.base import BaseMatcher
from redrive.matching.exceptions import EventIdNotFoundError
from redrive.matching.identifiers import UUID_PATTERN, is_uuid_shaped
from redrive.matching.models import CandidatePair, MatchMode

_FIELD_PREFIX = r'"event_id"\s*:\s*"'


class StructuredMatcher(BaseMatcher):
    """Matches identifiers only inside ``event_id`` fields."""

    mode = MatchMode.STRUCTURED

    _EVENT_ID_RE: ClassVar[re.Pattern[str]] = re.compile(
        rf'{_FIELD_PREFIX}({UUID_PATTERN})"'
    )

    def find_candidate(
        self,
        identifier: str,
        records: Sequence[str],
    ) -> CandidatePair | None:
        if not is_uuid_shaped(identifier):
            return None
        pattern = self._field_pattern(identifier)
        for record in records:
            if pattern.search(record):
                return CandidatePair(identifier=identifier, record=record)
        return None

    def rewrite(self, candidate: CandidatePair, new_identifier: str) -> str:
        match = self._EVENT_ID_RE.search(candidate.record)
        if match is None:
            raise EventIdNotFoundError(
                f"Can't match event_id for {candidate.identifier} in {candidate.record}"
            )

        old_value = match.group(1)
        record = candidate.record.replace(old_value, new_identifier)
        return self._EVENT_ID_RE.sub(
            lambda field: self._with_value(field, new_identifier), record
        )

    @staticmethod
    def _with_value(field: re.Match[str], value: str) -> str:
        prefix = field.group(0)[: field.start(1) - field.start(0)]
        return f'{prefix}{value}"'

    @staticmethod
    def _field_pattern(identifier: str) -> re.Pattern[str]:
        return re.compile(rf'{_FIELD_PREFIX}{re.escape(identifier)}"')
