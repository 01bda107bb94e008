from exception_audit.reporting.base_renderer import ReportRenderer
from exception_audit.reporting.catalogue_renderer import CatalogueRenderer
from exception_audit.reporting.exceptions import ReportWriteError
from exception_audit.reporting.html_renderer import HtmlReportRenderer, escape_html
from exception_audit.reporting.template_renderer import TemplateReportRenderer
from exception_audit.reporting.writer import ReportWriter, WriteResult

__all__ = [
    "CatalogueRenderer",
    "HtmlReportRenderer",
    "ReportRenderer",
    "ReportWriteError",
    "ReportWriter",
    "TemplateReportRenderer",
    "WriteResult",
    "escape_html",
]
