"""
Base throw extractor interface and classification policy.

This module provides:
  - ThrowPolicy: switch deciding what happens to throws that are not a
    fresh object construction
  - UNKNOWN_EXCEPTION_TYPE: the type recorded for such throws in inclusive mode
  - ThrowExtractor: abstract base class for language-specific extractors

Key Design Decisions:
  - File content is passed as `bytes` (not `str`) because Tree-sitter works on
    byte offsets. `start_byte` and `end_byte` on a node index into the exact
    bytes that were parsed, so argument text is always sliced from them.

  - The walk never raises on a node without position information; such a node
    simply gets line number 0.

Usage:
    from exception_audit.parser.extractor import get_throw_extractor, ThrowPolicy

    extractor = get_throw_extractor("java")
    records = extractor.extract_records(
        tree, content, project_name="billing", file_name="Invoice.java",
        policy=ThrowPolicy.INCLUSIVE,
    )
"""

import enum
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from tree_sitter import Tree

from exception_audit.models.exception_record import ExceptionRecord

if TYPE_CHECKING:
    from tree_sitter import Node


UNKNOWN_EXCEPTION_TYPE = "Unknown"


class ThrowPolicy(enum.StrEnum):
    """What to do with a throw whose operand is not a fresh construction.

    STRICT drops such throw sites: only construction sites are recorded.
    INCLUSIVE records them with UNKNOWN_EXCEPTION_TYPE and the verbatim
    source text of the thrown expression.
    """

    STRICT = "strict"
    INCLUSIVE = "inclusive"


class ThrowExtractor(ABC):
    """Abstract interface for language-specific throw extraction.
    
    Subclasses must implement:
      - language (property): Return the language identifier
      - extract_records(): Produce one record per recorded throw site
    
    The base class provides:
      - _extract_text(): Extract text from byte content
      - _line_of(): 1-based line of a node, 0 when unavailable
    """
    
    @property
    @abstractmethod
    def language(self) -> str:
        """Return the language identifier (e.g., 'java')."""
        pass
    
    @abstractmethod
    def extract_records(
        self,
        tree: Tree,
        file_content: bytes,
        project_name: str,
        file_name: str,
        policy: ThrowPolicy = ThrowPolicy.STRICT,
    ) -> list[ExceptionRecord]:
        """Extract exception records from the given syntax tree.
        
        Args:
            tree: The Tree-sitter syntax tree
            file_content: The bytes the tree was parsed from
            project_name: Owning project, copied into every record
            file_name: Owning file, copied into every record
            policy: Classification policy for non-construction throws
            
        Returns:
            List of ExceptionRecord objects in discovery order
            
        Raises:
            ThrowExtractionError: If extraction fails
        """
        pass
    
    def _extract_text(self, content: bytes, start_byte: int, end_byte: int) -> str:
        """Extract text from content bytes.
        
        Args:
            content: Raw file content as bytes
            start_byte: Starting byte offset
            end_byte: Ending byte offset
            
        Returns:
            Decoded UTF-8 string from the byte range
        """
        return content[start_byte:end_byte].decode("utf-8", errors="replace")

    def _node_text(self, node: "Node", content: bytes) -> str:
        return self._extract_text(content, node.start_byte, node.end_byte)

    def _line_of(self, node: "Node") -> int:
        """Return the 1-based start line of node, or 0 if it has no position."""
        point = getattr(node, "start_point", None)
        if point is None:
            return 0
        try:
            return int(point[0]) + 1
        except (TypeError, IndexError, ValueError):
            return 0
