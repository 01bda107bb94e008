from exception_audit.services.analysis_service import AnalysisRunResult, ExceptionAnalysisService

__all__ = [
    "AnalysisRunResult",
    "ExceptionAnalysisService",
]
