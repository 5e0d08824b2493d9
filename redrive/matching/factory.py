from redrive.config.settings import Settings
from redrive.matching.base import BaseMatcher
from redrive.matching.literal import LiteralMatcher
from redrive.matching.models import MatchMode
from redrive.matching.structured import StructuredMatcher


class MatcherFactory:
    """Creates the matcher for the configured mode."""

    ADAPTERS: dict[MatchMode, type[BaseMatcher]] = {
        MatchMode.LITERAL: LiteralMatcher,
        MatchMode.STRUCTURED: StructuredMatcher,
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseMatcher:
        return cls.for_mode(MatchMode.parse(settings.match_mode), settings.max_workers)

    @classmethod
    def for_mode(cls, mode: MatchMode, max_workers: int | None = None) -> BaseMatcher:
        adapter_cls = cls.ADAPTERS.get(mode)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown match mode '{mode}'. Choose from: {[m.value for m in cls.ADAPTERS]}"
            )
        return adapter_cls(max_workers=max_workers)
