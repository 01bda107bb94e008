"""
Pluggable report rendering.

A renderer turns AnalysisAggregates into one text document. Renderers know
nothing about scanning; the writer decides where their output goes.
"""

from abc import ABC, abstractmethod
from datetime import datetime

from exception_audit.aggregation.engine import AnalysisAggregates

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def format_timestamp(generated_at: datetime) -> str:
    return generated_at.strftime(TIMESTAMP_FORMAT)


class ReportRenderer(ABC):
    """Abstract interface for report backends.
    
    Subclasses must implement:
      - output_name (property): Human-readable name used in diagnostics
      - render(): Produce the document text
    """

    def __init__(self, file_name: str):
        self.file_name = file_name

    @property
    @abstractmethod
    def output_name(self) -> str:
        pass

    @abstractmethod
    def render(self, aggregates: AnalysisAggregates, generated_at: datetime) -> str:
        """Render the aggregates into a complete document.
        
        Args:
            aggregates: Sorted records and derived aggregates
            generated_at: Timestamp printed in the document header
            
        Returns:
            The document as a string
        """
        pass
