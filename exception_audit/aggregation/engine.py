"""
Aggregation of exception records across all projects.

`aggregate` is a pure function of the merged record collection: it sorts the
records, counts them per (project, file) and per project, and builds the
unique-text catalogue. Every aggregate is derived from the same final record
list, so they cannot drift out of step with each other.
"""

from collections import Counter
from dataclasses import dataclass, field
from typing import Iterable

from exception_audit.aggregation.ordering import DEFAULT_ORDERING, OrderingPolicy
from exception_audit.models.exception_record import ExceptionRecord, ProjectSummary, ProjectTotal


@dataclass
class AnalysisAggregates:
    """Everything the renderers need.
    
    Attributes:
        records: All records, sorted by (project, file, line).
        summaries: Record counts per (project, file), sorted.
        totals: Record counts per project, sorted.
        unique_texts: Deduplicated, sorted catalogue of exception texts.
    """
    records: list[ExceptionRecord] = field(default_factory=list)
    summaries: list[ProjectSummary] = field(default_factory=list)
    totals: list[ProjectTotal] = field(default_factory=list)
    unique_texts: list[str] = field(default_factory=list)

    @property
    def total_projects(self) -> int:
        return len(self.totals)

    @property
    def total_files(self) -> int:
        return len(self.summaries)

    @property
    def total_exceptions(self) -> int:
        return len(self.records)


def aggregate(
    records: Iterable[ExceptionRecord],
    projects: Iterable[str] | None = None,
    ordering: OrderingPolicy = DEFAULT_ORDERING,
) -> AnalysisAggregates:
    """Compute the sorted records and all derived aggregates.
    
    Args:
        records: Every record from every project, in any order.
        projects: Names of all scanned projects. Projects that produced no
            records still get a zero ProjectTotal when listed here.
        ordering: Sort and dedup rules to apply.
        
    Returns:
        AnalysisAggregates built from records only.
    """
    sorted_records = ordering.sort_records(records)

    file_counts = Counter((r.project_name, r.file_name) for r in sorted_records)
    project_counts = Counter(r.project_name for r in sorted_records)
    for project_name in projects or ():
        project_counts.setdefault(project_name, 0)

    summaries = ordering.sort_summaries(
        ProjectSummary(project_name=project, file_name=file_name, exception_count=count)
        for (project, file_name), count in file_counts.items()
    )
    totals = ordering.sort_totals(
        ProjectTotal(project_name=project, total_exceptions=count)
        for project, count in project_counts.items()
    )

    return AnalysisAggregates(
        records=sorted_records,
        summaries=summaries,
        totals=totals,
        unique_texts=ordering.unique_texts(r.exception_text for r in sorted_records),
    )
