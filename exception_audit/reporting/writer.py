"""
Writing rendered reports to disk.

Each renderer's output is written independently: a failure to write one
output is logged and reported back to the caller, and the remaining outputs
are still attempted.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Sequence

from exception_audit.aggregation.engine import AnalysisAggregates
from exception_audit.reporting.base_renderer import ReportRenderer
from exception_audit.reporting.exceptions import ReportWriteError

logger = logging.getLogger(__name__)


@dataclass
class WriteResult:
    """Outcome of writing a batch of outputs.
    
    Attributes:
        written: Paths of outputs written successfully.
        failures: One ReportWriteError per failed output.
    """
    written: list[Path] = field(default_factory=list)
    failures: list[ReportWriteError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures


class ReportWriter:
    """Renders aggregates with each renderer and writes the result into output_dir."""

    def __init__(self, renderers: Sequence[ReportRenderer], output_dir: Path | str = "."):
        self.renderers = list(renderers)
        self.output_dir = Path(output_dir)

    def write_one(self, renderer: ReportRenderer, aggregates: AnalysisAggregates, generated_at: datetime) -> Path:
        """Render and write a single output.
        
        Raises:
            ReportWriteError: If the output directory or file cannot be written.
        """
        path = self.output_dir / renderer.file_name
        document = renderer.render(aggregates, generated_at)
        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
            path.write_text(document, encoding="utf-8")
        except OSError as e:
            raise ReportWriteError(renderer.output_name, str(path), str(e)) from e
        return path

    def write_all(self, aggregates: AnalysisAggregates, generated_at: datetime | None = None) -> WriteResult:
        generated_at = generated_at or datetime.now()
        result = WriteResult()

        for renderer in self.renderers:
            try:
                path = self.write_one(renderer, aggregates, generated_at)
            except ReportWriteError as e:
                logger.error(f"Error generating {renderer.output_name}: {e}")
                result.failures.append(e)
                continue

            logger.info(f"{renderer.output_name.capitalize()} generated: {path}")
            result.written.append(path)

        return result
