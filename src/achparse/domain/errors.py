"""ACH parse error types and shared error messages."""

from typing import Optional

RECORD_LENGTH = 94


class AchError(ValueError):
    """Base class for all ACH parsing errors.

    Subclasses provide the failure category; callers branch on the class
    rather than on the message. ``line_number`` is filled in by the parser
    with the physical line the error was raised for, when known.
    """

    def __init__(self, message: str, line_number: Optional[int] = None):
        super().__init__(message)
        self.line_number = line_number


class InvalidRecordType(AchError):
    """A line's record type code is not the one the parser expected."""

    def __init__(self, code: str, expected: Optional[str] = None):
        super().__init__(f"Invalid record type: {code}")
        self.code = code
        self.expected = expected


class InvalidLineLength(AchError):
    """A line is not exactly 94 characters long."""

    expected = RECORD_LENGTH

    def __init__(self, length: int):
        super().__init__(f"Invalid line length: expected {RECORD_LENGTH}, got {length}")
        self.length = length


class InvalidNumber(AchError):
    """A numeric field does not hold an unsigned integer.

    The underlying parse failure is kept on ``cause`` and chained as
    ``__cause__`` so it survives re-raising.
    """

    def __init__(self, field: str, cause: ValueError):
        super().__init__(f"Invalid numeric field '{field}': {cause}")
        self.field = field
        self.cause = cause
        self.__cause__ = cause


class InvalidStructure(AchError):
    """Records are out of order or nested incorrectly."""

    def __init__(self, message: str):
        super().__init__(f"Invalid file structure: {message}")
        self.message = message


class IncompleteBatch(AchError):
    """A batch was opened but never closed by a batch control record."""

    def __init__(self, message: str):
        super().__init__(f"Incomplete batch: {message}")
        self.message = message


class EmptyFile(AchError):
    """The input holds no records once padding lines are removed."""

    def __init__(self):
        super().__init__("Empty file")


def unexpected_record(code: str, line_number: int, context: str = "") -> str:
    """Return message for a record that is not allowed at this position."""
    where = f" {context}" if context else ""
    return f"Unexpected record type '{code}'{where} at line {line_number}"


def orphan_addenda(line_number: int) -> str:
    """Return message for an addenda line with no entry to attach to."""
    return f"Addenda record at line {line_number} has no preceding entry detail record"


def missing_batch_control(batch_number: str, line_number: Optional[int] = None) -> str:
    """Return message for a batch that ends without its control record."""
    if line_number is None:
        return f"Missing batch control record for batch {batch_number.strip()} before end of file"
    return (
        f"Missing batch control record for batch {batch_number.strip()} "
        f"before line {line_number}"
    )


def missing_file_control() -> str:
    """Return message for a file that ends without a file control record."""
    return "Missing file control record"


def record_after_file_control(code: str, line_number: int) -> str:
    """Return message for a record that follows the file control record."""
    return f"Record type '{code}' at line {line_number} follows the file control record"
