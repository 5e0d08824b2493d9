class SinkError(Exception):
    """Base exception for output errors."""


class OutputConflictError(SinkError):
    """Raised when an output file already holds data from an earlier run."""


class SinkWriteError(SinkError):
    """Raised when results cannot be written to the output files."""
