"""
HTML report backend.

Builds a single self-contained HTML page with a statistics header, a
per-project totals table, a per-file summary table and the full list of
throw sites. Every free-text cell is escaped.
"""

from datetime import datetime

from exception_audit.aggregation.engine import AnalysisAggregates
from exception_audit.reporting.base_renderer import ReportRenderer, format_timestamp

DEFAULT_REPORT_FILE_NAME = "exception_analysis_report.html"

_HTML_ESCAPES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&#39;"),
)

REPORT_STYLE = """\
        body { font-family: Arial, sans-serif; margin: 20px; }
        table { border-collapse: collapse; width: 100%; margin: 20px 0; }
        th, td { border: 1px solid #ddd; padding: 8px; text-align: left; }
        th { background-color: #f2f2f2; font-weight: bold; }
        tr:nth-child(even) { background-color: #f9f9f9; }
        td.number { text-align: right; }
        .summary { margin-bottom: 40px; }
        h1, h2 { color: #333; }"""


def escape_html(text: str | None) -> str:
    """Escape &, <, >, double and single quotes. None renders as ''."""
    if text is None:
        return ""
    for raw, escaped in _HTML_ESCAPES:
        text = text.replace(raw, escaped)
    return text


class HtmlReportRenderer(ReportRenderer):
    """Renders the full exception analysis report as HTML."""

    def __init__(self, file_name: str = DEFAULT_REPORT_FILE_NAME):
        super().__init__(file_name)

    @property
    def output_name(self) -> str:
        return "HTML report"

    def render(self, aggregates: AnalysisAggregates, generated_at: datetime) -> str:
        lines: list[str] = [
            "<!DOCTYPE html>",
            "<html>",
            "<head>",
            '    <meta charset="UTF-8">',
            "    <title>Exception Analysis Report</title>",
            "    <style>",
            REPORT_STYLE,
            "    </style>",
            "</head>",
            "<body>",
            "<h1>Exception Analysis Report</h1>",
            f"<p>Generated on: {escape_html(format_timestamp(generated_at))}</p>",
            "",
            '<div class="summary">',
            "<h2>Statistics</h2>",
            f"<p>Projects: {aggregates.total_projects}, "
            f"Files: {aggregates.total_files}, "
            f"Exceptions: {aggregates.total_exceptions}</p>",
            "</div>",
        ]

        lines += self._table(
            "Project Totals",
            ["Project Name", "Total Exceptions"],
            [
                [self._cell(total.project_name), self._number(total.total_exceptions)]
                for total in aggregates.totals
            ],
        )
        lines += self._table(
            "Summary by Project and File",
            ["Project Name", "File Name", "Exception Count"],
            [
                [
                    self._cell(summary.project_name),
                    self._cell(summary.file_name),
                    self._number(summary.exception_count),
                ]
                for summary in aggregates.summaries
            ],
        )
        lines += self._table(
            "Detailed Exception Analysis",
            ["Project Name", "File Name", "Line", "Exception Type", "Exception Text"],
            [
                [
                    self._cell(record.project_name),
                    self._cell(record.file_name),
                    self._number(record.line_number),
                    self._cell(record.exception_type),
                    self._cell(record.exception_text),
                ]
                for record in aggregates.records
            ],
        )

        lines += ["</body>", "</html>"]
        return "\n".join(lines) + "\n"

    @staticmethod
    def _cell(text: str | None) -> str:
        return f"<td>{escape_html(text)}</td>"

    @staticmethod
    def _number(value: int) -> str:
        return f'<td class="number">{value}</td>'

    @staticmethod
    def _table(title: str, headers: list[str], rows: list[list[str]]) -> list[str]:
        out = [
            "",
            f"<h2>{escape_html(title)}</h2>",
            "<table>",
            "<tr>" + "".join(f"<th>{escape_html(h)}</th>" for h in headers) + "</tr>",
        ]
        for row in rows:
            out.append("<tr>" + "".join(row) + "</tr>")
        out.append("</table>")
        return out
