"""
symdeps Core Layer.

Extracts dependency names from decorator metadata literals
(``@NgModule({ providers, imports, declarations })``). Contains:
- Exception hierarchy
- Configuration management
- Logging service
- Metadata extraction core (metadata)
- Tree-sitter front end (treesitter)

Author: Goncharenko Anton aka alienxs2
License: MIT
"""

from .config import SymdepsSettings, get_config_summary, settings
from .exceptions import ProcessingError, SymdepsError, ValidationError
from .logging_service import LoggingConfig, LoggingService
from .metadata import (
    Classification,
    ClassDependencies,
    ParsedIdentifier,
    SymbolHelper,
    build_qualified_name,
    classify,
    parse_deep_identifier,
)

__version__ = "0.1.0"

__all__ = [
    # Config
    "SymdepsSettings",
    "settings",
    "get_config_summary",
    # Exceptions
    "SymdepsError",
    "ValidationError",
    "ProcessingError",
    # Logging
    "LoggingConfig",
    "LoggingService",
    # Metadata
    "SymbolHelper",
    "Classification",
    "ClassDependencies",
    "ParsedIdentifier",
    "build_qualified_name",
    "classify",
    "parse_deep_identifier",
]
