class MatchingError(Exception):
    """Base exception for matching and rewriting errors."""


class EventIdNotFoundError(MatchingError):
    """Raised when a selected record has no event_id field to rewrite."""
