"""
Error types returned by the service layer.

There are exactly two kinds of failure a caller can observe:
``NotFoundError`` when a requested or referenced identifier is absent
and ``InvalidInputError`` when a required field fails validation.
Both carry a human readable ``msg`` that callers surface verbatim.
"""


class LedgerError(ValueError):
    """Base class for service errors."""

    def __init__(self, msg: str) -> None:
        super().__init__(msg)
        self.msg = msg


class NotFoundError(LedgerError):
    """A requested or referenced record does not exist."""


class InvalidInputError(LedgerError):
    """A payload failed validation."""


class RecordTooLargeError(InvalidInputError):
    """An encoded record exceeds the per-record size bound of its store."""
