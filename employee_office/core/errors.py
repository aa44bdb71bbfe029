"""Error taxonomy for ledger operations."""
from __future__ import annotations


class LedgerError(Exception):
    """Base error: terminal for the operation that raised it."""

    code = "ledger_error"
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ArgumentCountError(LedgerError):
    """Raised when an operation receives the wrong number of arguments."""

    code = "argument_count"
    status_code = 400

    def __init__(self, expected: int, received: int | None = None):
        super().__init__(f"Incorrect number of arguments. Expecting {expected}")
        self.expected = expected
        self.received = received


class UnknownOperationError(LedgerError):
    code = "unknown_operation"
    status_code = 404

    def __init__(self, name: str):
        super().__init__("Invalid function name.")
        self.name = name


class StoreAccessError(LedgerError):
    """Read/write failure against the backing store."""

    code = "store_access"
    status_code = 500


class MalformedRecordError(LedgerError):
    """Stored bytes are not a JSON object."""

    code = "malformed_record"
    status_code = 422

    def __init__(self, message: str, key: str | None = None):
        super().__init__(message)
        self.key = key
