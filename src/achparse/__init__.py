"""achparse - NACHA/ACH file parser."""

from achparse.domain import (
    AchError,
    AchFile,
    EmptyFile,
    IncompleteBatch,
    InvalidLineLength,
    InvalidNumber,
    InvalidRecordType,
    InvalidStructure,
    parse,
    parse_file,
)

__all__ = [
    "AchError",
    "AchFile",
    "EmptyFile",
    "IncompleteBatch",
    "InvalidLineLength",
    "InvalidNumber",
    "InvalidRecordType",
    "InvalidStructure",
    "parse",
    "parse_file",
]


# Import main lazily to avoid circular dependencies
def __getattr__(name):
    if name == "main":
        from achparse.cli.main import main
        return main
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
