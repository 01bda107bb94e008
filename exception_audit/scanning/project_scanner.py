"""Scanning one project directory for throw sites.

This module walks a single project directory and runs the throw extractor
over every eligible source file:
  1. Enumerate files beneath the project root in sorted order, pruning
     directories named after build output or test sources. A project
     directory with such a name is skipped entirely.
  2. Keep files with the project's source extension.
  3. Parse each file with Tree-sitter and collect its ExceptionRecords.

A file that cannot be read or parsed is logged and skipped. A directory walk
that fails leaves the whole project with zero records. Neither aborts the
scan of other files or projects.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path, PurePath

from exception_audit.models.exception_record import ExceptionRecord
from exception_audit.models.scan_stats import ScanStats
from exception_audit.parser import tree_sitter_parser
from exception_audit.parser.extractor import (
    ThrowExtractionError,
    ThrowPolicy,
    get_throw_extractor,
)
from exception_audit.parser.extractor import UnsupportedLanguageError as ExtractorLanguageError
from exception_audit.parser.tree_sitter_parser import ParseError, UnsupportedLanguageError
from exception_audit.scanning.constants import DEFAULT_EXCLUDED_SEGMENTS, DEFAULT_SOURCE_EXTENSION
from exception_audit.utils.logging import Logger


@dataclass
class ProjectScanResult:
    """Records and statistics produced by scanning one project.
    
    Attributes:
        project_name: Logical name of the project.
        records: ExceptionRecords in discovery order.
        stats: Counters for this project only.
    """
    project_name: str
    records: list[ExceptionRecord] = field(default_factory=list)
    stats: ScanStats = field(default_factory=ScanStats)


def has_excluded_segment(relative_path: PurePath, excluded_segments: frozenset[str]) -> bool:
    """Check whether any directory segment of relative_path is excluded.

    Only whole segments match: `test` excludes `src/test/Foo.java` but not
    `testing-utils/Foo.java` or `latest/Foo.java`. The match is case-sensitive.
    """
    return any(part in excluded_segments for part in relative_path.parent.parts)


class ProjectScanner:
    """Collects ExceptionRecords for every eligible source file of a project.
    
    Example:
        scanner = ProjectScanner(policy=ThrowPolicy.INCLUSIVE)
        result = scanner.scan(Path("/repos/billing"))
        # result.records holds one record per throw site
    """

    def __init__(
        self,
        policy: ThrowPolicy = ThrowPolicy.STRICT,
        source_extension: str = DEFAULT_SOURCE_EXTENSION,
        excluded_segments: frozenset[str] | None = None,
        group_by_relative_path: bool = False,
    ):
        """Initialize the ProjectScanner.
        
        Args:
            policy: Classification policy for non-construction throws.
            source_extension: Suffix of files to scan (e.g. ".java").
            excluded_segments: Directory names to prune. Defaults to build
                output and test directories.
            group_by_relative_path: Record the project-relative path instead of
                the base name as the record's file name.
        """
        self.policy = ThrowPolicy(policy)
        self.source_extension = source_extension
        self.excluded_segments = (
            DEFAULT_EXCLUDED_SEGMENTS if excluded_segments is None else frozenset(excluded_segments)
        )
        self.group_by_relative_path = group_by_relative_path
        self.logger = Logger(__name__)

    def is_eligible(self, relative_path: PurePath) -> bool:
        """Check the segment filter and the source extension for one file."""
        if has_excluded_segment(relative_path, self.excluded_segments):
            return False
        return relative_path.suffix == self.source_extension

    def iter_source_files(self, project_dir: Path, stats: ScanStats | None = None) -> list[Path]:
        """List eligible files beneath project_dir in sorted order.

        A project directory that is itself named after an excluded segment
        has no eligible files.

        Raises:
            OSError: If any directory of the walk cannot be listed.
        """
        def _raise(error: OSError) -> None:
            raise error

        files: list[Path] = []
        if project_dir.name in self.excluded_segments:
            self.logger.bind(project=project_dir.name).info(
                f"Skipping excluded project directory {project_dir}"
            )
            return files

        for dir_path, dir_names, file_names in os.walk(project_dir, onerror=_raise):
            dir_names[:] = sorted(d for d in dir_names if d not in self.excluded_segments)
            for file_name in sorted(file_names):
                path = Path(dir_path) / file_name
                if self.is_eligible(path.relative_to(project_dir)):
                    files.append(path)
                elif stats is not None:
                    stats.skipped_files += 1
        return files

    def scan(self, project_dir: Path, project_name: str | None = None) -> ProjectScanResult:
        """Scan one project directory.
        
        Args:
            project_dir: Root directory of the project.
            project_name: Logical name; defaults to the directory name.
            
        Returns:
            ProjectScanResult with the project's records (unordered beyond
            discovery order) and its stats.
        """
        project_dir = Path(project_dir)
        project_name = project_name or project_dir.name
        result = ProjectScanResult(project_name=project_name)
        result.stats.total_projects = 1
        logger = self.logger.bind(project=project_name)

        try:
            source_files = self.iter_source_files(project_dir, result.stats)
        except OSError as e:
            logger.warning(f"Error walking project directory {project_dir}: {e}")
            result.stats.failed_projects += 1
            result.stats.errors.append(f"Error walking project directory {project_dir}: {e}")
            return result

        result.stats.total_files = len(source_files)

        for source_file in source_files:
            file_name = self._record_file_name(project_dir, source_file)
            try:
                records = self.scan_file(source_file, project_name, file_name)
            except (ParseError, ThrowExtractionError, UnsupportedLanguageError, ExtractorLanguageError) as e:
                logger.bind(source_file=str(source_file)).warning(
                    f"Skipping {source_file}: {e}"
                )
                result.stats.failed_files += 1
                result.stats.errors.append(f"Failed to analyze {source_file}: {e}")
                continue

            result.stats.scanned_files += 1
            result.records.extend(records)

        result.stats.total_records = len(result.records)
        logger.info(
            f"Project {project_name}: {result.stats.total_records} throw sites in "
            f"{result.stats.scanned_files} files ({result.stats.failed_files} failed)"
        )
        return result

    def scan_file(self, file_path: Path, project_name: str, file_name: str) -> list[ExceptionRecord]:
        """Parse one file and extract its records.
        
        Raises:
            ParseError: If the file cannot be read or parsed.
            UnsupportedLanguageError: If there is no grammar or extractor for it.
            ThrowExtractionError: If the tree walk fails.
        """
        parsed = tree_sitter_parser.get_parser(file_path)

        extractor = get_throw_extractor(parsed.language)
        if extractor is None:
            raise UnsupportedLanguageError(
                f"No throw extractor for language {parsed.language!r}"
            )

        return extractor.extract_records(
            parsed.tree,
            parsed.content,
            project_name=project_name,
            file_name=file_name,
            policy=self.policy,
        )

    def _record_file_name(self, project_dir: Path, source_file: Path) -> str:
        if self.group_by_relative_path:
            return source_file.relative_to(project_dir).as_posix()
        return source_file.name
