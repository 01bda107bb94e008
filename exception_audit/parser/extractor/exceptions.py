"""
Custom exceptions for throw-site extraction.

This module defines the exceptions that can be raised while walking a syntax
tree for throw statements or while looking up a language extractor.
"""


class ThrowExtractionError(Exception):
    """Exception raised when throw-site extraction fails.
    
    This can occur when:
      - Tree-sitter hands back an unexpected node structure
      - Node text cannot be sliced out of the file content
      - Any other unexpected error during the tree walk
    
    Attributes:
        message: Explanation of the error
        language: The language being walked (if available)
        file_path: The file being walked (if available)
    """
    
    def __init__(
        self,
        message: str,
        language: str | None = None,
        file_path: str | None = None,
    ):
        self.message = message
        self.language = language
        self.file_path = file_path
        
        details = []
        if language:
            details.append(f"language={language}")
        if file_path:
            details.append(f"file={file_path}")
        
        full_message = message
        if details:
            full_message = f"{message} [{', '.join(details)}]"
        
        super().__init__(full_message)


class UnsupportedLanguageError(Exception):
    """Exception raised when no throw extractor exists for a language.
    
    Attributes:
        language: The unsupported language identifier
        supported_languages: List of supported language identifiers
    """
    
    def __init__(
        self,
        language: str,
        supported_languages: list[str] | None = None,
    ):
        self.language = language
        self.supported_languages = supported_languages or []
        
        message = f"Unsupported language for throw extraction: '{language}'"
        if self.supported_languages:
            message += f". Supported languages: {', '.join(self.supported_languages)}"
        
        super().__init__(message)
