"""
Tree-sitter-based source parsing module.

This module parses source files with tree-sitter and hands back the syntax
tree together with the exact bytes that were parsed. Text rendered from node
byte offsets must always be sliced out of those bytes, so files in a legacy
encoding are transcoded to UTF-8 before they reach the parser.

A tree whose root reports ``has_error`` is treated as a failed parse: the
caller gets a ParseError instead of a partial tree.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

import chardet
from tree_sitter import Tree
from tree_sitter_language_pack import get_parser as get_ts_parser

from exception_audit.parser.file_types import FileTypes

logger = logging.getLogger(__name__)

FILE_TYPE_TO_LANG = {
    FileTypes.JAVA: "java",
}

# Bytes inspected when guessing the encoding of a non-UTF-8 file
ENCODING_DETECTION_LIMIT = 64 * 1024


def support_file(file: Path) -> bool:
    """Check if the file is supported by tree-sitter."""
    file_type = FileTypes.from_path(file)
    return file_type in FILE_TYPE_TO_LANG


class ParseError(Exception):
    """Exception raised when reading or parsing a file fails."""

    def __init__(self, message: str, file_path: Path | str | None = None):
        self.file_path = str(file_path) if file_path is not None else None
        super().__init__(message)


class UnsupportedLanguageError(Exception):
    """Exception raised when a file's language is not supported."""
    pass


@dataclass
class ParsedSource:
    """A successfully parsed file.

    Attributes:
        tree: The tree-sitter syntax tree.
        language: Language identifier used to pick the grammar.
        content: UTF-8 bytes that were fed to the parser.
    """
    tree: Tree
    language: str
    content: bytes


def detect_encoding(raw_data: bytes) -> str:
    """Guess the encoding of raw source bytes.

    UTF-8 is tried first; otherwise chardet is consulted and its answer is only
    trusted above 0.7 confidence.
    """
    try:
        raw_data.decode("utf-8")
        return "utf-8"
    except UnicodeDecodeError:
        pass

    detection = chardet.detect(raw_data[:ENCODING_DETECTION_LIMIT])
    encoding = detection.get("encoding")
    confidence = detection.get("confidence") or 0

    if encoding and confidence > 0.7:
        return encoding

    return "utf-8"


def to_utf8(raw_data: bytes) -> bytes:
    """Return raw_data re-encoded as UTF-8."""
    encoding = detect_encoding(raw_data)
    if encoding.lower().replace("_", "-") in ("utf-8", "ascii"):
        return raw_data
    try:
        return raw_data.decode(encoding, errors="replace").encode("utf-8")
    except LookupError:
        logger.debug(f"Unknown encoding {encoding!r}, keeping raw bytes")
        return raw_data


def parse_bytes(content: bytes, language: str) -> Tree:
    """Parse already-decoded UTF-8 bytes with the grammar for language."""
    lang_parser = get_ts_parser(language)
    return lang_parser.parse(content)


def get_parser(file: Path) -> ParsedSource:
    """Read and parse a source file.
    
    Args:
        file: Path to the source file to parse.
        
    Returns:
        ParsedSource with the tree, the language and the parsed bytes.
        
    Raises:
        UnsupportedLanguageError: If the file type is not supported.
        ParseError: If the file cannot be read or the tree contains errors.
    """
    file_type = FileTypes.from_path(file)
    lang = FILE_TYPE_TO_LANG.get(file_type)
    
    if lang is None:
        raise UnsupportedLanguageError(
            f"Unsupported file type for tree-sitter parsing: {file.suffix}"
        )
    
    try:
        raw_data = file.read_bytes()
    except OSError as e:
        raise ParseError(f"Failed to read file {file}: {e}", file_path=file) from e

    content = to_utf8(raw_data)

    try:
        tree = parse_bytes(content, lang)
    except Exception as e:
        raise ParseError(f"Failed to parse file {file}: {e}", file_path=file) from e

    if tree is None:
        raise ParseError(f"Parser returned no result for {file}", file_path=file)
    if tree.root_node.has_error:
        raise ParseError(f"Syntax errors in {file}", file_path=file)

    return ParsedSource(tree=tree, language=lang, content=content)
