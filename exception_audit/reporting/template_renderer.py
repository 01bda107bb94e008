"""
Template-backed HTML report.

Renders the report from a user-editable Jinja2 template. When the configured
template file does not exist it is created with the default layout first, so
the next run can start from an editable copy. Without a template path the
default layout is rendered directly.

Template context:
  - generated_on: formatted timestamp
  - total_projects, total_files, total_exceptions: statistics header
  - totals: ProjectTotal rows
  - summaries: ProjectSummary rows
  - records: ExceptionRecord rows
  - unique_texts: distinct exception texts

Every `{{ ... }}` expression is passed through escape_html.
"""

import logging
from datetime import datetime
from pathlib import Path

from jinja2 import Environment, StrictUndefined, TemplateError

from exception_audit.aggregation.engine import AnalysisAggregates
from exception_audit.reporting.base_renderer import ReportRenderer, format_timestamp
from exception_audit.reporting.exceptions import ReportWriteError
from exception_audit.reporting.html_renderer import REPORT_STYLE, DEFAULT_REPORT_FILE_NAME, escape_html

logger = logging.getLogger(__name__)

DEFAULT_TEMPLATE = """\
<!DOCTYPE html>
<html>
<head>
    <meta charset="UTF-8">
    <title>Exception Analysis Report</title>
    <style>
""" + REPORT_STYLE + """
    </style>
</head>
<body>
<h1>Exception Analysis Report</h1>
<p>Generated on: {{ generated_on }}</p>

<div class="summary">
<h2>Statistics</h2>
<p>Projects: {{ total_projects }}, Files: {{ total_files }}, Exceptions: {{ total_exceptions }}</p>
</div>

<h2>Project Totals</h2>
<table>
<tr><th>Project Name</th><th>Total Exceptions</th></tr>
{% for total in totals %}
<tr><td>{{ total.project_name }}</td><td class="number">{{ total.total_exceptions }}</td></tr>
{% endfor %}
</table>

<h2>Summary by Project and File</h2>
<table>
<tr><th>Project Name</th><th>File Name</th><th>Exception Count</th></tr>
{% for summary in summaries %}
<tr><td>{{ summary.project_name }}</td><td>{{ summary.file_name }}</td><td class="number">{{ summary.exception_count }}</td></tr>
{% endfor %}
</table>

<h2>Detailed Exception Analysis</h2>
<table>
<tr><th>Project Name</th><th>File Name</th><th>Line</th><th>Exception Type</th><th>Exception Text</th></tr>
{% for record in records %}
<tr><td>{{ record.project_name }}</td><td>{{ record.file_name }}</td><td class="number">{{ record.line_number }}</td><td>{{ record.exception_type }}</td><td>{{ record.exception_text }}</td></tr>
{% endfor %}
</table>
</body>
</html>
"""


def _escape_value(value) -> str:
    if value is None:
        return ""
    return escape_html(str(value))


class TemplateReportRenderer(ReportRenderer):
    """Renders the HTML report through a Jinja2 template.

    Example:
        renderer = TemplateReportRenderer(template_path=Path("report-template.html.j2"))
        html = renderer.render(aggregates, datetime.now())
    """

    def __init__(self, file_name: str = DEFAULT_REPORT_FILE_NAME, template_path: Path | str | None = None):
        """Initialize the TemplateReportRenderer.

        Args:
            file_name: Name of the generated report file.
            template_path: Template to render. Created with the default
                layout when missing. None renders the default layout.
        """
        super().__init__(file_name)
        self.template_path = Path(template_path) if template_path is not None else None
        self.environment = Environment(
            autoescape=False,
            finalize=_escape_value,
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )

    @property
    def output_name(self) -> str:
        return "HTML report"

    def load_template_source(self) -> str:
        """Read the template, writing the default layout first if it is missing.

        Raises:
            OSError: If the template cannot be created or read.
        """
        if self.template_path is None:
            return DEFAULT_TEMPLATE
        if not self.template_path.exists():
            logger.warning(f"Template file not found. Creating default template: {self.template_path}")
            self.template_path.parent.mkdir(parents=True, exist_ok=True)
            self.template_path.write_text(DEFAULT_TEMPLATE, encoding="utf-8")
        return self.template_path.read_text(encoding="utf-8")

    def render(self, aggregates: AnalysisAggregates, generated_at: datetime) -> str:
        """Render the aggregates through the template.

        Raises:
            ReportWriteError: If the template cannot be loaded, compiled or
                rendered.
        """
        try:
            template = self.environment.from_string(self.load_template_source())
            return template.render(
                generated_on=format_timestamp(generated_at),
                total_projects=aggregates.total_projects,
                total_files=aggregates.total_files,
                total_exceptions=aggregates.total_exceptions,
                totals=aggregates.totals,
                summaries=aggregates.summaries,
                records=aggregates.records,
                unique_texts=aggregates.unique_texts,
            )
        except (OSError, TemplateError) as e:
            source = str(self.template_path) if self.template_path else "default template"
            raise ReportWriteError(self.output_name, source, str(e)) from e
