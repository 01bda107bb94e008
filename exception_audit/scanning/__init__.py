from exception_audit.scanning.project_scanner import ProjectScanner, ProjectScanResult
from exception_audit.scanning.workspace_scanner import WorkspaceScanner, WorkspaceScanResult

__all__ = [
    "ProjectScanner",
    "ProjectScanResult",
    "WorkspaceScanner",
    "WorkspaceScanResult",
]
