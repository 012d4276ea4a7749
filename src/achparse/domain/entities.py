"""ACH record entities.

Each record type of the NACHA format maps to one frozen dataclass. Field
values are kept exactly as sliced from the line, padding included, except
for numeric fields which are parsed to ``int``. Callers strip text fields
where presentation needs it.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Iterator, Optional

from achparse.utils.amount_parser import cents_to_dollars
from achparse.utils.date_parser import parse_ach_date, parse_ach_datetime


class ServiceClassCode(int, Enum):
    """Batch service class codes."""

    MIXED_DEBITS_CREDITS = 200
    CREDITS_ONLY = 220
    DEBITS_ONLY = 225


CREDIT_TRANSACTION_CODES = frozenset(
    {"21", "22", "23", "24", "31", "32", "33", "34", "41", "42", "43", "44", "51", "52", "53", "54"}
)
DEBIT_TRANSACTION_CODES = frozenset(
    {"26", "27", "28", "29", "36", "37", "38", "39", "46", "47", "48", "49", "55", "56"}
)
PRENOTE_TRANSACTION_CODES = frozenset({"23", "28", "33", "38", "43", "48", "53"})


@dataclass(frozen=True)
class FileHeader:
    """File header record (type 1)."""

    record_type: str
    priority_code: str
    immediate_destination: str
    immediate_origin: str
    file_creation_date: str
    file_creation_time: str
    file_id_modifier: str
    record_size: str
    blocking_factor: str
    format_code: str
    immediate_destination_name: str
    immediate_origin_name: str
    reference_code: str

    @property
    def created_at(self) -> Optional[datetime]:
        """File creation date and time, or None if either is malformed."""
        return parse_ach_datetime(self.file_creation_date, self.file_creation_time)


@dataclass(frozen=True)
class BatchHeader:
    """Batch header record (type 5)."""

    record_type: str
    service_class_code: str
    company_name: str
    company_discretionary_data: str
    company_identification: str
    standard_entry_class_code: str
    company_entry_description: str
    company_descriptive_date: str
    effective_entry_date: str
    settlement_date: str
    originator_status_code: str
    originating_dfi_identification: str
    batch_number: str

    @property
    def service_class(self) -> Optional[ServiceClassCode]:
        """Service class as an enum member, or None for an unknown code."""
        try:
            return ServiceClassCode(int(self.service_class_code))
        except ValueError:
            return None

    @property
    def effective_date(self) -> Optional[date]:
        """Effective entry date, or None if blank or malformed."""
        return parse_ach_date(self.effective_entry_date)


@dataclass(frozen=True)
class Addenda:
    """Addenda record (type 7)."""

    record_type: str
    addenda_type_code: str
    payment_related_information: str
    addenda_sequence_number: str
    entry_detail_sequence_number: str


@dataclass(frozen=True)
class EntryDetail:
    """Entry detail record (type 6).

    ``amount`` is in cents. ``addenda`` is the only part of any record that
    changes after construction: the parser appends each addenda line that
    follows the entry, in the order read.
    """

    record_type: str
    transaction_code: str
    receiving_dfi_identification: str
    check_digit: str
    dfi_account_number: str
    amount: int
    individual_identification_number: str
    individual_name: str
    discretionary_data: str
    addenda_record_indicator: str
    trace_number: str
    addenda: list[Addenda] = field(default_factory=list)

    # Mutable addenda list; equality is by value, hashing is not supported.
    __hash__ = None

    @property
    def dollars(self) -> Decimal:
        return cents_to_dollars(self.amount)

    @property
    def is_credit(self) -> bool:
        return self.transaction_code in CREDIT_TRANSACTION_CODES

    @property
    def is_debit(self) -> bool:
        return self.transaction_code in DEBIT_TRANSACTION_CODES

    @property
    def is_prenote(self) -> bool:
        """Zero-dollar prenotification entries."""
        return self.transaction_code in PRENOTE_TRANSACTION_CODES

    @property
    def has_addenda(self) -> bool:
        """Whether the addenda record indicator is set."""
        return self.addenda_record_indicator == "1"


@dataclass(frozen=True)
class BatchControl:
    """Batch control record (type 8)."""

    record_type: str
    service_class_code: str
    entry_addenda_count: int
    entry_hash: int
    total_debit_amount: int
    total_credit_amount: int
    company_identification: str
    message_authentication_code: str
    reserved: str
    originating_dfi_identification: str
    batch_number: str

    @property
    def total_debit_dollars(self) -> Decimal:
        return cents_to_dollars(self.total_debit_amount)

    @property
    def total_credit_dollars(self) -> Decimal:
        return cents_to_dollars(self.total_credit_amount)


@dataclass(frozen=True)
class FileControl:
    """File control record (type 9)."""

    record_type: str
    batch_count: int
    block_count: int
    entry_addenda_count: int
    entry_hash: int
    total_debit_amount: int
    total_credit_amount: int
    reserved: str

    @property
    def total_debit_dollars(self) -> Decimal:
        return cents_to_dollars(self.total_debit_amount)

    @property
    def total_credit_dollars(self) -> Decimal:
        return cents_to_dollars(self.total_credit_amount)


@dataclass(frozen=True)
class Batch:
    """A batch: header, entries in file order, and control.

    Batches and files hold lists, so like ``EntryDetail`` they compare by
    value but cannot be hashed.
    """

    header: BatchHeader
    entries: list[EntryDetail]
    control: BatchControl

    __hash__ = None

    @property
    def addenda_count(self) -> int:
        return sum(len(entry.addenda) for entry in self.entries)


@dataclass(frozen=True)
class AchFile:
    """A complete parsed ACH file."""

    file_header: FileHeader
    batches: list[Batch]
    file_control: FileControl

    __hash__ = None

    @classmethod
    def parse(cls, content: str) -> "AchFile":
        """Parse ACH file content. See ``achparse.domain.parser.parse``."""
        from achparse.domain.parser import parse

        return parse(content)

    def entries(self) -> Iterator[EntryDetail]:
        """Iterate over every entry detail record in the file, in order."""
        for batch in self.batches:
            yield from batch.entries

    @property
    def entry_count(self) -> int:
        return sum(len(batch.entries) for batch in self.batches)


@dataclass(frozen=True)
class BatchSummary:
    """Per-batch summary row.

    Declared totals come from the batch control record. Entry totals are
    summed from the parsed entries by transaction code; the two are reported
    side by side and never compared.
    """

    batch_number: str
    company_name: str
    standard_entry_class_code: str
    service_class: Optional[ServiceClassCode]
    effective_date: Optional[date]
    entry_count: int
    addenda_count: int
    declared_debit_total: Decimal
    declared_credit_total: Decimal
    entry_debit_total: Decimal
    entry_credit_total: Decimal


@dataclass(frozen=True)
class SummaryReport:
    """Summary of a parsed ACH file for display."""

    immediate_destination_name: str
    immediate_origin_name: str
    created_at: Optional[datetime]
    batches: tuple[BatchSummary, ...]
    batch_count: int
    entry_addenda_count: int
    declared_debit_total: Decimal
    declared_credit_total: Decimal
