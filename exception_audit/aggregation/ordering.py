"""
Ordering and deduplication rules shared by every aggregate.

All comparisons used when sorting records, summaries and totals, and the rule
for building the unique-text catalogue, live here so that the HTML report and
the text catalogue can never disagree on order.

  - Records: project name, then file name (lexical), then line number
    (numeric). Python's sort is stable, so records with identical keys keep
    their discovery order.
  - Summaries: (project name, file name), lexical.
  - Totals: project name, lexical.
  - Catalogue: non-blank texts, first occurrence wins, then sorted lexically.
"""

from typing import Iterable

from exception_audit.models.exception_record import ExceptionRecord, ProjectSummary, ProjectTotal


class OrderingPolicy:
    """Sort keys and the catalogue dedup rule."""

    @staticmethod
    def record_key(record: ExceptionRecord) -> tuple[str, str, int]:
        return (record.project_name, record.file_name, record.line_number)

    @staticmethod
    def summary_key(summary: ProjectSummary) -> tuple[str, str]:
        return (summary.project_name, summary.file_name)

    @staticmethod
    def total_key(total: ProjectTotal) -> str:
        return total.project_name

    def sort_records(self, records: Iterable[ExceptionRecord]) -> list[ExceptionRecord]:
        return sorted(records, key=self.record_key)

    def sort_summaries(self, summaries: Iterable[ProjectSummary]) -> list[ProjectSummary]:
        return sorted(summaries, key=self.summary_key)

    def sort_totals(self, totals: Iterable[ProjectTotal]) -> list[ProjectTotal]:
        return sorted(totals, key=self.total_key)

    def unique_texts(self, texts: Iterable[str | None]) -> list[str]:
        """Deduplicate texts by exact equality and return them sorted.

        Blank and missing texts are dropped. Insertion order is kept while
        deduplicating; the result is then sorted ascending.
        """
        seen: dict[str, None] = {}
        for text in texts:
            if text is None or not text.strip():
                continue
            seen.setdefault(text, None)
        return sorted(seen)


DEFAULT_ORDERING = OrderingPolicy()
