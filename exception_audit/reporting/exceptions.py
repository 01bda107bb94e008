class ReportWriteError(Exception):
    """Raised when one report output cannot be written.
    
    Attributes:
        output_name: Name of the failed output (e.g. "html report")
        path: Destination path, when known
    """

    def __init__(self, output_name: str, path: str | None = None, reason: str | None = None):
        self.output_name = output_name
        self.path = path
        message = f"Failed to write {output_name}"
        if path:
            message += f" to {path}"
        if reason:
            message += f": {reason}"
        super().__init__(message)
