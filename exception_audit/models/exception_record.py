from dataclasses import dataclass


@dataclass(frozen=True)
class ExceptionRecord:
    """One observed throw site.
    
    Attributes:
        project_name: Name of the top-level project directory.
        file_name: Base name of the source file (or the project-relative path
            when relative-path grouping is enabled).
        exception_type: Simple name of the constructed class, or the unknown
            sentinel for throws that are not a fresh construction.
        exception_text: ``"()"`` / ``"(arg1, arg2)"`` for constructions, the
            verbatim thrown expression otherwise.
        line_number: 1-based line of the throw statement, 0 if unknown.
    """
    project_name: str
    file_name: str
    exception_type: str
    exception_text: str
    line_number: int = 0


@dataclass(frozen=True)
class ProjectSummary:
    """Number of records sharing one (project, file) key."""
    project_name: str
    file_name: str
    exception_count: int


@dataclass(frozen=True)
class ProjectTotal:
    """Number of records under one project, across all of its files."""
    project_name: str
    total_exceptions: int
