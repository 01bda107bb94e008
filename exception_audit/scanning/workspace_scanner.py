"""Scanning every project directory beneath a workspace root.

Each immediate subdirectory of the root is an independent project. Projects
share no mutable state, so with more than one worker they are scanned on a
thread pool; results are merged back in project-name order either way.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path

from exception_audit.models.exception_record import ExceptionRecord
from exception_audit.models.scan_stats import ScanStats
from exception_audit.scanning.project_scanner import ProjectScanner, ProjectScanResult

logger = logging.getLogger(__name__)


@dataclass
class WorkspaceScanResult:
    """Merged output of scanning all projects under a root.
    
    Attributes:
        records: All ExceptionRecords, project by project in name order.
        projects: Names of the scanned projects, sorted.
        stats: Stats merged across projects.
    """
    records: list[ExceptionRecord] = field(default_factory=list)
    projects: list[str] = field(default_factory=list)
    stats: ScanStats = field(default_factory=ScanStats)


class WorkspaceScanner:
    """Runs a ProjectScanner over each project directory of a root."""

    def __init__(self, project_scanner: ProjectScanner | None = None, max_workers: int = 1):
        self.project_scanner = project_scanner or ProjectScanner()
        self.max_workers = max(1, max_workers)

    @staticmethod
    def list_projects(root: Path) -> list[Path]:
        """Immediate subdirectories of root, sorted by name.
        
        Raises:
            OSError: If the root cannot be listed.
        """
        return sorted((entry for entry in Path(root).iterdir() if entry.is_dir()), key=lambda p: p.name)

    def scan(self, root: Path) -> WorkspaceScanResult:
        """Scan every project under root.
        
        Raises:
            OSError: If the root itself cannot be listed.
        """
        project_dirs = self.list_projects(root)
        logger.info(f"Found {len(project_dirs)} projects under {root}")

        if self.max_workers > 1 and len(project_dirs) > 1:
            with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
                project_results = list(executor.map(self._scan_project, project_dirs))
        else:
            project_results = [self._scan_project(project_dir) for project_dir in project_dirs]

        result = WorkspaceScanResult()
        for project_result in project_results:
            result.projects.append(project_result.project_name)
            result.records.extend(project_result.records)
            result.stats.merge(project_result.stats)

        logger.info(
            f"Finished scanning: "
            f"{result.stats.total_projects} projects, "
            f"{result.stats.scanned_files} files scanned, "
            f"{result.stats.total_records} throw sites, "
            f"{result.stats.skipped_files} skipped, "
            f"{result.stats.failed_files} failed files, "
            f"{result.stats.failed_projects} failed projects"
        )
        return result

    def _scan_project(self, project_dir: Path) -> ProjectScanResult:
        logger.info(f"Analyzing project: {project_dir.name}")
        return self.project_scanner.scan(project_dir, project_dir.name)
