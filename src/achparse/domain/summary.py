"""ACH file summary domain service."""

from datetime import date
from decimal import Decimal
from typing import Optional

from achparse.domain.entities import AchFile, Batch, BatchSummary, SummaryReport
from achparse.utils.amount_parser import cents_to_dollars


class SummaryService:
    """Service for building summary reports of a parsed ACH file."""

    def __init__(self, ach_file: AchFile):
        """Initialize summary service.

        Args:
            ach_file: Parsed ACH file
        """
        self.ach_file = ach_file

    def build_report(
        self,
        effective_after: Optional[date] = None,
        effective_before: Optional[date] = None,
        min_amount: Optional[Decimal] = None,
    ) -> SummaryReport:
        """Build a summary report, optionally filtering batches.

        Args:
            effective_after: Keep batches effective on or after this date
            effective_before: Keep batches effective on or before this date
            min_amount: Keep batches whose declared debit or credit total
                reaches this dollar amount

        Returns:
            SummaryReport with one row per matching batch. File-level totals
            are the declared values of the file control record and are not
            affected by the filters.
        """
        batches = tuple(
            self.summarize_batch(batch)
            for batch in self.filter_batches(effective_after, effective_before, min_amount)
        )
        header = self.ach_file.file_header
        control = self.ach_file.file_control
        return SummaryReport(
            immediate_destination_name=header.immediate_destination_name.strip(),
            immediate_origin_name=header.immediate_origin_name.strip(),
            created_at=header.created_at,
            batches=batches,
            batch_count=control.batch_count,
            entry_addenda_count=control.entry_addenda_count,
            declared_debit_total=control.total_debit_dollars,
            declared_credit_total=control.total_credit_dollars,
        )

    def filter_batches(
        self,
        effective_after: Optional[date] = None,
        effective_before: Optional[date] = None,
        min_amount: Optional[Decimal] = None,
    ) -> list[Batch]:
        """Return batches matching the filters.

        A batch with a blank or malformed effective date never matches a
        date filter.
        """
        matched = []
        for batch in self.ach_file.batches:
            effective = batch.header.effective_date
            if effective_after is not None and (effective is None or effective < effective_after):
                continue
            if effective_before is not None and (effective is None or effective > effective_before):
                continue
            if min_amount is not None:
                largest = max(batch.control.total_debit_dollars, batch.control.total_credit_dollars)
                if largest < min_amount:
                    continue
            matched.append(batch)
        return matched

    def summarize_batch(self, batch: Batch) -> BatchSummary:
        """Build the summary row for one batch."""
        debit_cents = sum(entry.amount for entry in batch.entries if entry.is_debit)
        credit_cents = sum(entry.amount for entry in batch.entries if entry.is_credit)
        return BatchSummary(
            batch_number=batch.header.batch_number.strip(),
            company_name=batch.header.company_name.strip(),
            standard_entry_class_code=batch.header.standard_entry_class_code,
            service_class=batch.header.service_class,
            effective_date=batch.header.effective_date,
            entry_count=len(batch.entries),
            addenda_count=batch.addenda_count,
            declared_debit_total=batch.control.total_debit_dollars,
            declared_credit_total=batch.control.total_credit_dollars,
            entry_debit_total=cents_to_dollars(debit_cents),
            entry_credit_total=cents_to_dollars(credit_cents),
        )
