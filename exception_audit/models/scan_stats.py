from dataclasses import dataclass, field

@dataclass
class ScanStats:
    """Statistics collected while scanning projects.
    
    Attributes:
        total_projects: Number of project directories scanned.
        total_files: Number of eligible source files discovered.
        scanned_files: Number of files parsed and visited successfully.
        skipped_files: Files left out by the segment or extension filter.
        failed_files: Number of files that failed to read or parse.
        failed_projects: Number of projects whose directory walk failed.
        total_records: Number of exception records produced.
        errors: Error messages encountered during scanning.
    """
    total_projects: int = 0
    total_files: int = 0
    scanned_files: int = 0
    skipped_files: int = 0
    failed_files: int = 0
    failed_projects: int = 0
    total_records: int = 0
    errors: list[str] = field(default_factory=list)

    def merge(self, other: "ScanStats") -> "ScanStats":
        """Fold another project's stats into this one and return self."""
        self.total_projects += other.total_projects
        self.total_files += other.total_files
        self.scanned_files += other.scanned_files
        self.skipped_files += other.skipped_files
        self.failed_files += other.failed_files
        self.failed_projects += other.failed_projects
        self.total_records += other.total_records
        self.errors.extend(other.errors)
        return self
