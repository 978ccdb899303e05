"""Exceptions raised by the submissions app."""


class SubmissionError(Exception):
    """Base class for submission storage errors."""


class StorageError(SubmissionError):
    """A per-request insert or query against the store failed."""


class StorageInitError(SubmissionError):
    """The store could not be prepared at startup."""
