"""Domain layer for achparse."""

from achparse.domain.entities import (
    AchFile,
    Addenda,
    Batch,
    BatchControl,
    BatchHeader,
    EntryDetail,
    FileControl,
    FileHeader,
    ServiceClassCode,
)
from achparse.domain.errors import (
    AchError,
    EmptyFile,
    IncompleteBatch,
    InvalidLineLength,
    InvalidNumber,
    InvalidRecordType,
    InvalidStructure,
)
from achparse.domain.parser import AchParser, parse, parse_file
from achparse.domain.records import decode_record
from achparse.domain.summary import SummaryService

__all__ = [
    "AchFile",
    "Addenda",
    "Batch",
    "BatchControl",
    "BatchHeader",
    "EntryDetail",
    "FileControl",
    "FileHeader",
    "ServiceClassCode",
    "AchError",
    "EmptyFile",
    "IncompleteBatch",
    "InvalidLineLength",
    "InvalidNumber",
    "InvalidRecordType",
    "InvalidStructure",
    "AchParser",
    "parse",
    "parse_file",
    "decode_record",
    "SummaryService",
]
