from redrive.matching.base import BaseMatcher
from redrive.matching.factory import MatcherFactory
from redrive.matching.literal import LiteralMatcher
from redrive.matching.models import MatchMode, ReplacementResult
from redrive.matching.structured import StructuredMatcher

__all__ = [
    "BaseMatcher",
    "LiteralMatcher",
    "MatchMode",
    "MatcherFactory",
    "ReplacementResult",
    "StructuredMatcher",
]
