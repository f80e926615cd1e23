"""
Tree-sitter front end for decorator metadata extraction.

Parses TypeScript/JavaScript with tree-sitter-language-pack grammars and
feeds decorated classes to the metadata extractor.

Key components:
- config: Grammar and file extension mappings
- exceptions: Tree-sitter specific exceptions
- parser: SourceFile and SourceParser
- converter: Tree-sitter node -> metadata node conversion
- bindings: File-level binding resolver for shorthand properties
- decorators: Decorated class scanner and per-class extractor
"""

from symdeps_core.treesitter.bindings import SourceFileBindingResolver
from symdeps_core.treesitter.config import (
    EXTENSION_TO_LANGUAGE,
    LANGUAGE_EXTENSIONS,
    get_language_by_extension,
    is_supported_extension,
    is_supported_language,
)
from symdeps_core.treesitter.converter import NodeConverter
from symdeps_core.treesitter.decorators import DecoratedClassScanner, DecoratorMetadataExtractor
from symdeps_core.treesitter.exceptions import (
    LanguageNotSupportedError,
    ParseError,
    TreeSitterError,
)
from symdeps_core.treesitter.parser import SourceFile, SourceParser

__all__ = [
    # Config
    "LANGUAGE_EXTENSIONS",
    "EXTENSION_TO_LANGUAGE",
    "get_language_by_extension",
    "is_supported_language",
    "is_supported_extension",
    # Exceptions
    "TreeSitterError",
    "LanguageNotSupportedError",
    "ParseError",
    # Parsing
    "SourceFile",
    "SourceParser",
    "NodeConverter",
    "SourceFileBindingResolver",
    # Extraction
    "DecoratedClassScanner",
    "DecoratorMetadataExtractor",
]
