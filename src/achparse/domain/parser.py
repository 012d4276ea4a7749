"""Assembly of classified ACH lines into a file/batch/entry/addenda tree.

The parser is a single flat loop over the filtered lines driven by one
state variable. The record type code of the current line is the only
lookahead; no line is decoded twice and the loop never moves backwards.

::

    EXPECT_FILE_HEADER
        -> EXPECT_BATCH_OR_FILE_CONTROL
            -5-> EXPECT_BATCH_HEADER -> EXPECT_ENTRY_OR_BATCH_CONTROL
                -6-> EXPECT_ADDENDA_OR_NEXT (-7-> itself)
                -8-> EXPECT_BATCH_OR_FILE_CONTROL
            -9-> DONE
"""

import logging
from enum import Enum
from pathlib import Path
from typing import Optional, Union

from achparse.domain.entities import AchFile, Batch, BatchHeader, EntryDetail, FileControl
from achparse.domain.errors import (
    AchError,
    IncompleteBatch,
    InvalidStructure,
    missing_batch_control,
    missing_file_control,
    orphan_addenda,
    record_after_file_control,
    unexpected_record,
)
from achparse.domain.lines import Line, RecordType, filter_lines, record_type
from achparse.domain.records import (
    decode_addenda,
    decode_batch_control,
    decode_batch_header,
    decode_entry_detail,
    decode_file_control,
    decode_file_header,
)

logger = logging.getLogger(__name__)


class ParserState(Enum):
    """Positions in the ACH record grammar."""

    EXPECT_FILE_HEADER = "expect_file_header"
    EXPECT_BATCH_OR_FILE_CONTROL = "expect_batch_or_file_control"
    EXPECT_BATCH_HEADER = "expect_batch_header"
    EXPECT_ENTRY_OR_BATCH_CONTROL = "expect_entry_or_batch_control"
    EXPECT_ADDENDA_OR_NEXT = "expect_addenda_or_next"
    DONE = "done"


class AchParser:
    """Single-use state machine that builds an ``AchFile``.

    Call ``parse`` once per instance. Any error aborts the parse; no partial
    result is ever returned.
    """

    def __init__(self, content: str):
        """Initialize parser.

        Args:
            content: Complete ACH file content, already in memory
        """
        self.content = content
        self.state = ParserState.EXPECT_FILE_HEADER
        self.file_header = None
        self.file_control: Optional[FileControl] = None
        self.batches: list[Batch] = []
        self.batch_header: Optional[BatchHeader] = None
        self.entries: list[EntryDetail] = []

    def parse(self) -> AchFile:
        """Parse the content.

        Returns:
            Parsed ACH file

        Raises:
            AchError: Subclass describing the first problem found
        """
        lines = filter_lines(self.content)
        logger.debug("Parsing %d ACH records", len(lines))

        index = 0
        while index < len(lines):
            line = lines[index]
            try:
                consumed = self._step(line)
            except AchError as error:
                if error.line_number is None:
                    error.line_number = line.number
                raise
            if consumed:
                index += 1

        self._finish()
        ach_file = AchFile(
            file_header=self.file_header,
            batches=self.batches,
            file_control=self.file_control,
        )
        logger.info(
            "Parsed ACH file with %d batch(es) and %d entry record(s)",
            len(ach_file.batches),
            ach_file.entry_count,
        )
        return ach_file

    def _transition(self, state: ParserState) -> None:
        logger.debug("Parser state %s -> %s", self.state.name, state.name)
        self.state = state

    def _step(self, line: Line) -> bool:
        """Handle one line in the current state.

        Returns:
            False if the line was not consumed and must be handled again in
            the new state, True otherwise
        """
        state = self.state

        if state is ParserState.EXPECT_FILE_HEADER:
            self.file_header = decode_file_header(line.text)
            self._transition(ParserState.EXPECT_BATCH_OR_FILE_CONTROL)
            return True

        code = record_type(line.text)

        if state is ParserState.EXPECT_BATCH_OR_FILE_CONTROL:
            if code == RecordType.BATCH_HEADER.value:
                self._transition(ParserState.EXPECT_BATCH_HEADER)
                return False
            if code == RecordType.FILE_CONTROL.value:
                self.file_control = decode_file_control(line.text)
                self._transition(ParserState.DONE)
                return True
            raise InvalidStructure(unexpected_record(code, line.number))

        if state is ParserState.EXPECT_BATCH_HEADER:
            self.batch_header = decode_batch_header(line.text)
            self.entries = []
            logger.debug(
                "Opened batch %s at line %d", self.batch_header.batch_number.strip(), line.number
            )
            self._transition(ParserState.EXPECT_ENTRY_OR_BATCH_CONTROL)
            return True

        if state is ParserState.EXPECT_ADDENDA_OR_NEXT:
            if code == RecordType.ADDENDA.value:
                self.entries[-1].addenda.append(decode_addenda(line.text))
                return True
            self._transition(ParserState.EXPECT_ENTRY_OR_BATCH_CONTROL)
            return False

        if state is ParserState.EXPECT_ENTRY_OR_BATCH_CONTROL:
            if code == RecordType.ENTRY_DETAIL.value:
                self.entries.append(decode_entry_detail(line.text))
                self._transition(ParserState.EXPECT_ADDENDA_OR_NEXT)
                return True
            if code == RecordType.BATCH_CONTROL.value:
                self._close_batch(line)
                self._transition(ParserState.EXPECT_BATCH_OR_FILE_CONTROL)
                return True
            if code in (RecordType.BATCH_HEADER.value, RecordType.FILE_CONTROL.value):
                raise IncompleteBatch(
                    missing_batch_control(self.batch_header.batch_number, line.number)
                )
            if code == RecordType.ADDENDA.value:
                raise InvalidStructure(orphan_addenda(line.number))
            raise InvalidStructure(unexpected_record(code, line.number, "in batch"))

        # DONE: the file control record must be the last record
        raise InvalidStructure(record_after_file_control(code, line.number))

    def _close_batch(self, line: Line) -> None:
        control = decode_batch_control(line.text)
        self.batches.append(Batch(header=self.batch_header, entries=self.entries, control=control))
        logger.debug(
            "Closed batch %s with %d entries at line %d",
            self.batch_header.batch_number.strip(),
            len(self.entries),
            line.number,
        )
        self.batch_header = None
        self.entries = []

    def _finish(self) -> None:
        """Check the terminal state once every line has been consumed."""
        if self.state in (
            ParserState.EXPECT_ENTRY_OR_BATCH_CONTROL,
            ParserState.EXPECT_ADDENDA_OR_NEXT,
        ):
            raise IncompleteBatch(missing_batch_control(self.batch_header.batch_number))
        if self.state is not ParserState.DONE:
            raise InvalidStructure(missing_file_control())


def parse(content: str) -> AchFile:
    """Parse ACH file content into an ``AchFile``.

    Args:
        content: Complete ACH file content

    Returns:
        Parsed ACH file

    Raises:
        AchError: Subclass describing the first problem found
    """
    return AchParser(content).parse()


def parse_file(path: Union[str, Path]) -> AchFile:
    """Read an ACH file from disk and parse it.

    Raises:
        FileNotFoundError: If the file does not exist
        AchError: If the content is not a valid ACH file
    """
    content = Path(path).read_text(encoding="ascii")
    logger.debug("Read %d characters from %s", len(content), path)
    return parse(content)
