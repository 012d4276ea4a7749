"""Fixed-width field decoding for the six ACH record types.

Every record is 94 characters. Each record type has a layout table of
``Field(name, start, end, numeric)`` entries with 0-indexed, half-open
column ranges that together cover the full line. Text fields are sliced
verbatim; numeric fields are stripped and parsed as unsigned integers.
"""

import re
from typing import Any, NamedTuple

from achparse.domain.entities import (
    Addenda,
    BatchControl,
    BatchHeader,
    EntryDetail,
    FileControl,
    FileHeader,
)
from achparse.domain.errors import (
    RECORD_LENGTH,
    InvalidLineLength,
    InvalidNumber,
    InvalidRecordType,
)
from achparse.domain.lines import RecordType

_DIGITS = re.compile(r"[0-9]+")

# Unicode White_Space. Unlike str.strip(), excludes the \x1c-\x1f separators.
WHITESPACE = (
    "\t\n\x0b\x0c\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)


class Field(NamedTuple):
    """One positional field of a record layout."""

    name: str
    start: int
    end: int
    numeric: bool = False


FILE_HEADER_LAYOUT = (
    Field("record_type", 0, 1),
    Field("priority_code", 1, 3),
    Field("immediate_destination", 3, 13),
    Field("immediate_origin", 13, 23),
    Field("file_creation_date", 23, 29),
    Field("file_creation_time", 29, 33),
    Field("file_id_modifier", 33, 34),
    Field("record_size", 34, 37),
    Field("blocking_factor", 37, 39),
    Field("format_code", 39, 40),
    Field("immediate_destination_name", 40, 63),
    Field("immediate_origin_name", 63, 86),
    Field("reference_code", 86, 94),
)

BATCH_HEADER_LAYOUT = (
    Field("record_type", 0, 1),
    Field("service_class_code", 1, 4),
    Field("company_name", 4, 20),
    Field("company_discretionary_data", 20, 40),
    Field("company_identification", 40, 50),
    Field("standard_entry_class_code", 50, 53),
    Field("company_entry_description", 53, 63),
    Field("company_descriptive_date", 63, 69),
    Field("effective_entry_date", 69, 75),
    Field("settlement_date", 75, 78),
    Field("originator_status_code", 78, 79),
    Field("originating_dfi_identification", 79, 87),
    Field("batch_number", 87, 94),
)

ENTRY_DETAIL_LAYOUT = (
    Field("record_type", 0, 1),
    Field("transaction_code", 1, 3),
    Field("receiving_dfi_identification", 3, 11),
    Field("check_digit", 11, 12),
    Field("dfi_account_number", 12, 29),
    Field("amount", 29, 39, numeric=True),
    Field("individual_identification_number", 39, 54),
    Field("individual_name", 54, 76),
    Field("discretionary_data", 76, 78),
    Field("addenda_record_indicator", 78, 79),
    Field("trace_number", 79, 94),
)

ADDENDA_LAYOUT = (
    Field("record_type", 0, 1),
    Field("addenda_type_code", 1, 3),
    Field("payment_related_information", 3, 83),
    Field("addenda_sequence_number", 83, 87),
    Field("entry_detail_sequence_number", 87, 94),
)

BATCH_CONTROL_LAYOUT = (
    Field("record_type", 0, 1),
    Field("service_class_code", 1, 4),
    Field("entry_addenda_count", 4, 10, numeric=True),
    Field("entry_hash", 10, 20, numeric=True),
    Field("total_debit_amount", 20, 32, numeric=True),
    Field("total_credit_amount", 32, 44, numeric=True),
    Field("company_identification", 44, 54),
    Field("message_authentication_code", 54, 73),
    Field("reserved", 73, 79),
    Field("originating_dfi_identification", 79, 87),
    Field("batch_number", 87, 94),
)

FILE_CONTROL_LAYOUT = (
    Field("record_type", 0, 1),
    Field("batch_count", 1, 7, numeric=True),
    Field("block_count", 7, 13, numeric=True),
    Field("entry_addenda_count", 13, 21, numeric=True),
    Field("entry_hash", 21, 31, numeric=True),
    Field("total_debit_amount", 31, 43, numeric=True),
    Field("total_credit_amount", 43, 55, numeric=True),
    Field("reserved", 55, 94),
)

LAYOUTS: dict[RecordType, tuple[Field, ...]] = {
    RecordType.FILE_HEADER: FILE_HEADER_LAYOUT,
    RecordType.BATCH_HEADER: BATCH_HEADER_LAYOUT,
    RecordType.ENTRY_DETAIL: ENTRY_DETAIL_LAYOUT,
    RecordType.ADDENDA: ADDENDA_LAYOUT,
    RecordType.BATCH_CONTROL: BATCH_CONTROL_LAYOUT,
    RecordType.FILE_CONTROL: FILE_CONTROL_LAYOUT,
}


def validate_line_length(line: str) -> None:
    """Raise InvalidLineLength unless the line is exactly 94 characters."""
    if len(line) != RECORD_LENGTH:
        raise InvalidLineLength(len(line))


def parse_unsigned(text: str, field_name: str) -> int:
    """Parse a numeric field as an unsigned integer.

    Surrounding whitespace is ignored. Only ASCII digits are accepted, so
    signs, underscores, decimal points and control characters such as the
    ``\\x1c`` file separator are all rejected.

    Raises:
        InvalidNumber: With the field name and the underlying ValueError
    """
    digits = text.strip(WHITESPACE)
    if not digits:
        cause = ValueError("cannot parse integer from empty string")
        raise InvalidNumber(field_name, cause) from cause
    if not _DIGITS.fullmatch(digits):
        cause = ValueError(f"invalid digit found in {digits!r}")
        raise InvalidNumber(field_name, cause) from cause
    return int(digits)


def _decode_fields(line: str, record_type: RecordType) -> dict[str, Any]:
    """Validate a line against a record type and slice its fields."""
    validate_line_length(line)

    code = line[0]
    if code != record_type.value:
        raise InvalidRecordType(code, expected=record_type.value)

    values: dict[str, Any] = {}
    for column in LAYOUTS[record_type]:
        raw = line[column.start:column.end]
        values[column.name] = parse_unsigned(raw, column.name) if column.numeric else raw
    return values


def decode_file_header(line: str) -> FileHeader:
    """Decode a file header record (type 1)."""
    return FileHeader(**_decode_fields(line, RecordType.FILE_HEADER))


def decode_batch_header(line: str) -> BatchHeader:
    """Decode a batch header record (type 5)."""
    return BatchHeader(**_decode_fields(line, RecordType.BATCH_HEADER))


def decode_entry_detail(line: str) -> EntryDetail:
    """Decode an entry detail record (type 6) with an empty addenda list."""
    return EntryDetail(**_decode_fields(line, RecordType.ENTRY_DETAIL))


def decode_addenda(line: str) -> Addenda:
    """Decode an addenda record (type 7)."""
    return Addenda(**_decode_fields(line, RecordType.ADDENDA))


def decode_batch_control(line: str) -> BatchControl:
    """Decode a batch control record (type 8)."""
    return BatchControl(**_decode_fields(line, RecordType.BATCH_CONTROL))


def decode_file_control(line: str) -> FileControl:
    """Decode a file control record (type 9)."""
    return FileControl(**_decode_fields(line, RecordType.FILE_CONTROL))


DECODERS = {
    RecordType.FILE_HEADER: decode_file_header,
    RecordType.BATCH_HEADER: decode_batch_header,
    RecordType.ENTRY_DETAIL: decode_entry_detail,
    RecordType.ADDENDA: decode_addenda,
    RecordType.BATCH_CONTROL: decode_batch_control,
    RecordType.FILE_CONTROL: decode_file_control,
}


def decode_record(line: str):
    """Decode any line by dispatching on its record type code.

    Raises:
        InvalidLineLength: If the line is not 94 characters
        InvalidRecordType: If the code is not one of the six record types
    """
    validate_line_length(line)
    try:
        record_type = RecordType(line[0])
    except ValueError:
        raise InvalidRecordType(line[0]) from None
    return DECODERS[record_type](line)
