"""
Throw Extractor Module

This module provides language-specific throw-site extraction from Tree-sitter
syntax trees. Every recorded throw becomes an ExceptionRecord.

Public API:
  - get_throw_extractor(language): Factory function for a language-specific extractor
  - get_supported_languages(): List of languages with extraction support
  - register_extractor(language, cls): Add an extractor for another language
  - ThrowPolicy: strict/inclusive switch for non-construction throws
  - UNKNOWN_EXCEPTION_TYPE: type recorded for non-construction throws

Exceptions:
  - ThrowExtractionError: Raised when a tree walk fails
  - UnsupportedLanguageError: Raised for unsupported languages

Usage:
    from exception_audit.parser.extractor import get_throw_extractor

    extractor = get_throw_extractor("java")
    if extractor is None:
        raise UnsupportedLanguageError("java", get_supported_languages())

    records = extractor.extract_records(tree, content, "billing", "Invoice.java")
"""

from .base_extractor import (
    UNKNOWN_EXCEPTION_TYPE,
    ThrowExtractor,
    ThrowPolicy,
)
from .exceptions import (
    ThrowExtractionError,
    UnsupportedLanguageError,
)
from .java_extractor import JavaThrowExtractor


# Registry of language-specific extractors
# Maps language identifier -> extractor class
_EXTRACTORS: dict[str, type[ThrowExtractor]] = {
    "java": JavaThrowExtractor,
}


def get_throw_extractor(language: str) -> ThrowExtractor | None:
    """Get a throw extractor for the given language.
    
    Args:
        language: Language identifier (e.g., 'java')
        
    Returns:
        ThrowExtractor instance for the language, or None if not supported
    """
    extractor_class = _EXTRACTORS.get(language.lower())
    if extractor_class:
        return extractor_class()
    return None


def get_supported_languages() -> list[str]:
    """Get list of languages with throw extraction support."""
    return list(_EXTRACTORS.keys())


def register_extractor(language: str, extractor_class: type[ThrowExtractor]) -> None:
    """Register a throw extractor for another language.

    This is the extension point for plugins that add languages without
    modifying this module. The scanner looks extractors up by the language
    the parser reports, so a registered extractor is used as soon as a
    grammar for its files exists.

    Args:
        language: Language identifier (will be lowercased)
        extractor_class: The ThrowExtractor subclass to register

    Example:
        from my_plugin import KotlinThrowExtractor
        register_extractor("kotlin", KotlinThrowExtractor)
    """
    _EXTRACTORS[language.lower()] = extractor_class


# Public API exports
__all__ = [
    # Factory functions
    "get_throw_extractor",
    "get_supported_languages",
    "register_extractor",
    # Policy
    "ThrowPolicy",
    "UNKNOWN_EXCEPTION_TYPE",
    # Base class (for extension)
    "ThrowExtractor",
    # Concrete extractors
    "JavaThrowExtractor",
    # Exceptions
    "ThrowExtractionError",
    "UnsupportedLanguageError",
]
