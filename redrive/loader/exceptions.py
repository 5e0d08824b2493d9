class CorpusLoadError(Exception):
    """Raised when a corpus folder or one of its files cannot be read."""
