import re
from datetime import datetime

from exception_audit.aggregation.engine import AnalysisAggregates
from exception_audit.reporting.base_renderer import ReportRenderer, format_timestamp

DEFAULT_CATALOGUE_FILE_NAME = "unique_exception_texts.txt"

CATALOGUE_TITLE = "Unique Exception Texts"

_LINE_BREAK_RUN = re.compile(r"\s*[\r\n]\s*")


def single_line(text: str) -> str:
    """Collapse every whitespace run that contains a line break into one space."""
    return _LINE_BREAK_RUN.sub(" ", text)


class CatalogueRenderer(ReportRenderer):
    """Plain-text list of the distinct exception texts, one per line.

    Texts are deduplicated verbatim; a multi-line argument list is only
    joined onto one line when written.
    """

    def __init__(self, file_name: str = DEFAULT_CATALOGUE_FILE_NAME):
        super().__init__(file_name)

    @property
    def output_name(self) -> str:
        return "unique exception texts file"

    def render(self, aggregates: AnalysisAggregates, generated_at: datetime) -> str:
        texts = aggregates.unique_texts
        lines = [
            CATALOGUE_TITLE,
            "=" * (len(CATALOGUE_TITLE) - 1),
            f"Generated on: {format_timestamp(generated_at)}",
            f"Total unique exception texts found: {len(texts)}",
            "",
            *(single_line(text) for text in texts),
        ]
        return "\n".join(lines) + "\n"
