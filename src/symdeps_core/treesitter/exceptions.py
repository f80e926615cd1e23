"""
Exception hierarchy for the tree-sitter front end.

Author: Goncharenko Anton aka alienxs2
License: MIT
"""

from typing import Optional

from symdeps_core.exceptions import ProcessingError


class TreeSitterError(ProcessingError):
    """
    Base exception for all tree-sitter related errors.

    Error Code: TS_001

    Example:
        raise TreeSitterError(
            message="Tree-sitter operation failed",
            details={"operation": "parse"}
        )
    """

    def __init__(
        self,
        message: str = "Tree-sitter operation failed",
        error_code: str = "TS_001",
        **kwargs,
    ):
        super().__init__(message=message, error_code=error_code, **kwargs)
        self.is_transient = False


class LanguageNotSupportedError(TreeSitterError):
    """
    Raised when no grammar is configured for a language or file extension.

    Error Code: TS_002

    Attributes:
        language: The unsupported language identifier or extension

    Example:
        raise LanguageNotSupportedError(
            language=".py",
            details={"file_path": "/src/app.py"}
        )
    """

    def __init__(
        self,
        language: str,
        message: Optional[str] = None,
        error_code: str = "TS_002",
        **kwargs,
    ):
        self.language = language
        if message is None:
            message = f"Language '{language}' has no configured decorator grammar"

        details = kwargs.pop("details", {})
        details["language"] = language

        super().__init__(message=message, error_code=error_code, details=details, **kwargs)


class ParseError(TreeSitterError):
    """
    Raised when strict parsing finds syntax errors in the source.

    Error Code: TS_003

    Attributes:
        file_path: Path to the file that failed to parse
        parse_details: Optional description of the first error

    Example:
        raise ParseError(
            file_path="/src/app.module.ts",
            parse_details="Syntax error at line 12"
        )
    """

    def __init__(
        self,
        file_path: str,
        parse_details: Optional[str] = None,
        message: Optional[str] = None,
        error_code: str = "TS_003",
        **kwargs,
    ):
        self.file_path = file_path
        self.parse_details = parse_details

        if message is None:
            if parse_details:
                message = f"Failed to parse file '{file_path}': {parse_details}"
            else:
                message = f"Failed to parse file '{file_path}'"

        details = kwargs.pop("details", {})
        details["file_path"] = file_path
        if parse_details:
            details["parse_details"] = parse_details

        super().__init__(message=message, error_code=error_code, details=details, **kwargs)
        self.is_transient = False  # Syntax errors are not retryable


__all__ = [
    "TreeSitterError",
    "LanguageNotSupportedError",
    "ParseError",
]
