from dataclasses import dataclass
from enum import Enum


class MatchMode(str, Enum):
    """Run-wide strategy switch for locating and rewriting records."""

    LITERAL = "literal"
    STRUCTURED = "structured"

    @classmethod
    def parse(cls, value: str) -> "MatchMode":
        """Parse a mode name, case-insensitively.

        ``raw`` and ``semantic`` are accepted as aliases of
        ``literal`` and ``structured``.
        """
        name = value.strip().lower()
        name = _ALIASES.get(name, name)
        try:
            return cls(name)
        except ValueError:
            choices = [mode.value for mode in cls] + sorted(_ALIASES)
            raise ValueError(
                f"Unknown match mode '{value}'. Choose from: {choices}"
            ) from None


_ALIASES: dict[str, str] = {
    "raw": MatchMode.LITERAL.value,
    "semantic": MatchMode.STRUCTURED.value,
}


@dataclass(frozen=True)
class CandidatePair:
    """A record chosen as the one to rewrite for an identifier."""

    identifier: str
    record: str


@dataclass(frozen=True)
class ReplacementResult:
    """Output row: the fresh identifier and the record that now carries it."""

    new_identifier: str
    record: str
    original_identifier: str = ""
