"""Line filtering and record classification."""

from enum import Enum
from typing import NamedTuple

from achparse.domain.errors import EmptyFile, InvalidLineLength

PADDING_DIGIT = "9"


class RecordType(str, Enum):
    """Record type codes, read from the first character of each line."""

    FILE_HEADER = "1"
    BATCH_HEADER = "5"
    ENTRY_DETAIL = "6"
    ADDENDA = "7"
    BATCH_CONTROL = "8"
    FILE_CONTROL = "9"


class Line(NamedTuple):
    """A non-padding input line and its 1-based physical line number."""

    number: int
    text: str


def is_padding(text: str) -> bool:
    """Return True if every character of the line is the padding digit.

    Blank lines count as padding since they hold no characters at all.
    """
    return all(char == PADDING_DIGIT for char in text)


def split_lines(content: str) -> list[str]:
    """Split content on "\\n" only, dropping one trailing "\\r" per line.

    Form feeds, vertical tabs and the other separators ``str.splitlines``
    honours are ordinary characters inside a record.
    """
    return [text.removesuffix("\r") for text in content.split("\n")]


def filter_lines(content: str) -> list[Line]:
    """Split content into lines and drop block-filler lines.

    Args:
        content: Complete ACH file content

    Returns:
        Remaining lines, in input order, with their physical line numbers

    Raises:
        EmptyFile: If no lines remain after filtering
    """
    lines = [
        Line(number, text)
        for number, text in enumerate(split_lines(content), start=1)
        if not is_padding(text)
    ]
    if not lines:
        raise EmptyFile()
    return lines


def record_type(text: str) -> str:
    """Return the one-character record type code of a line.

    The code is returned as read, whether or not it is a known record type.

    Raises:
        InvalidLineLength: If the line is empty
    """
    if not text:
        raise InvalidLineLength(0)
    return text[0]
