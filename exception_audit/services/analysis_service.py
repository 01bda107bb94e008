"""
Exception analysis service.

Wires the pipeline together: scan every project under a root, aggregate the
merged records, and hand the aggregates to the configured renderers.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

from exception_audit.aggregation.engine import AnalysisAggregates, aggregate
from exception_audit.core.config import Settings
from exception_audit.models.scan_stats import ScanStats
from exception_audit.reporting.base_renderer import ReportRenderer
from exception_audit.reporting.catalogue_renderer import CatalogueRenderer
from exception_audit.reporting.html_renderer import HtmlReportRenderer
from exception_audit.reporting.template_renderer import TemplateReportRenderer
from exception_audit.reporting.writer import ReportWriter, WriteResult
from exception_audit.scanning.project_scanner import ProjectScanner
from exception_audit.scanning.workspace_scanner import WorkspaceScanner

logger = logging.getLogger(__name__)


@dataclass
class AnalysisRunResult:
    """Everything produced by one run."""
    aggregates: AnalysisAggregates
    stats: ScanStats
    write_result: WriteResult = field(default_factory=WriteResult)


class ExceptionAnalysisService:
    """Scan, aggregate and report in one call.
    
    Example:
        service = ExceptionAnalysisService(Settings(throw_policy="inclusive"))
        run = service.run(Path("/repos"))
        print(run.aggregates.total_exceptions)
    """

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or Settings()
        self.workspace_scanner = WorkspaceScanner(
            project_scanner=ProjectScanner(
                policy=self.settings.throw_policy,
                source_extension=self.settings.source_extension,
                excluded_segments=self.settings.excluded_segments,
                group_by_relative_path=self.settings.group_by_relative_path,
            ),
            max_workers=self.settings.max_workers,
        )

    def build_renderers(self) -> list[ReportRenderer]:
        renderers: list[ReportRenderer] = []
        if self.settings.report_template is not None:
            renderers.append(
                TemplateReportRenderer(self.settings.report_file_name, self.settings.report_template)
            )
        else:
            renderers.append(HtmlReportRenderer(self.settings.report_file_name))
        if self.settings.should_emit_catalogue:
            renderers.append(CatalogueRenderer(self.settings.catalogue_file_name))
        return renderers

    def analyze(self, root: Path) -> tuple[AnalysisAggregates, ScanStats]:
        """Scan and aggregate without writing anything.
        
        Raises:
            OSError: If the root directory cannot be listed.
        """
        logger.info(
            f"Throw policy: {self.settings.throw_policy.value} "
            f"(catalogue {'on' if self.settings.should_emit_catalogue else 'off'})"
        )
        scan_result = self.workspace_scanner.scan(Path(root))
        aggregates = aggregate(scan_result.records, projects=scan_result.projects)
        return aggregates, scan_result.stats

    def run(self, root: Path, generated_at: datetime | None = None) -> AnalysisRunResult:
        """Analyze root and write every configured output.
        
        Raises:
            OSError: If the root directory cannot be listed.
        """
        aggregates, stats = self.analyze(root)

        writer = ReportWriter(self.build_renderers(), output_dir=self.settings.output_dir)
        write_result = writer.write_all(aggregates, generated_at)

        logger.info(
            f"Total: {aggregates.total_projects} projects, "
            f"{aggregates.total_files} files, "
            f"{aggregates.total_exceptions} exceptions, "
            f"{len(aggregates.unique_texts)} unique exception texts"
        )
        return AnalysisRunResult(aggregates=aggregates, stats=stats, write_result=write_result)
