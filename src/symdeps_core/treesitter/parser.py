"""
Source parsing for the tree-sitter front end.

Provides SourceFile, the per-file source context handed to the metadata
extractor, and SourceParser, which lazily builds one tree-sitter parser
per grammar from tree-sitter-language-pack.

Author: Goncharenko Anton aka alienxs2
License: MIT
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional, Union

import structlog
from tree_sitter import Node, Parser, Tree
from tree_sitter_language_pack import get_language

from symdeps_core.config import settings
from symdeps_core.exceptions import ProcessingError
from .config import LANGUAGE_EXTENSIONS, get_language_by_extension
from .exceptions import LanguageNotSupportedError, ParseError

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class SourceFile:
    """One parsed source file.

    Attributes:
        path: Path of the file as given by the caller.
        language: Grammar name used to parse it.
        source: Original source as bytes.
        tree: Parsed tree-sitter tree.
    """

    path: str
    language: str
    source: bytes
    tree: Tree

    @property
    def root(self) -> Node:
        return self.tree.root_node

    def node_text(self, node: Node) -> str:
        """Extract the source text of a node, replacing invalid UTF-8."""
        return self.source[node.start_byte : node.end_byte].decode("utf-8", errors="replace")


class SourceParser:
    """
    Parses TypeScript/JavaScript source into SourceFile objects.

    Parsers are created on first use per grammar and cached on the instance.

    Example:
        >>> parser = SourceParser()
        >>> source_file = parser.parse(b"@NgModule({}) export class AppModule {}", "app.module.ts")
        >>> source_file.language
        'typescript'
    """

    def __init__(self, max_file_size_bytes: Optional[int] = None) -> None:
        self._parsers: Dict[str, Parser] = {}
        self._max_file_size_bytes = max_file_size_bytes or settings.max_file_size_bytes
        self._log = logger.bind(parser=self.__class__.__name__)

    def get_parser(self, language: str) -> Parser:
        """
        Get the tree-sitter parser for a grammar.

        Raises:
            LanguageNotSupportedError: If the grammar is not configured.
        """
        if language not in LANGUAGE_EXTENSIONS:
            raise LanguageNotSupportedError(
                language=language,
                details={"available_languages": sorted(LANGUAGE_EXTENSIONS)},
            )

        if language not in self._parsers:
            parser = Parser()
            parser.language = get_language(language)
            self._parsers[language] = parser
            self._log.debug("parser_created", language=language)
        return self._parsers[language]

    def parse(
        self,
        source: Union[str, bytes],
        file_path: str,
        language: Optional[str] = None,
        strict: bool = False,
    ) -> SourceFile:
        """
        Parse source text.

        Args:
            source: Source code as text or UTF-8 bytes.
            file_path: Path used for language detection and reporting.
            language: Grammar name; detected from the extension when None.
            strict: Raise ParseError when the tree contains syntax errors.
                Otherwise errors are logged and the partial tree is kept.

        Returns:
            SourceFile for the parsed source.

        Raises:
            LanguageNotSupportedError: If no grammar matches.
            ParseError: If strict and the source has syntax errors.
        """
        if isinstance(source, str):
            source = source.encode("utf-8")

        if language is None:
            extension = Path(file_path).suffix
            language = get_language_by_extension(extension) if extension else None
            if language is None:
                raise LanguageNotSupportedError(
                    language=extension or file_path,
                    details={"file_path": file_path},
                )

        tree = self.get_parser(language).parse(source)

        if tree.root_node.has_error:
            error_line = self._first_error_line(tree.root_node)
            if strict:
                raise ParseError(
                    file_path=file_path,
                    parse_details=f"Syntax error at line {error_line + 1}",
                )
            self._log.warning(
                "source_has_syntax_errors",
                file_path=file_path,
                first_error_line=error_line + 1,
            )

        return SourceFile(path=file_path, language=language, source=source, tree=tree)

    def parse_file(self, path: Union[str, Path], strict: bool = False) -> SourceFile:
        """
        Read and parse a source file.

        Raises:
            LanguageNotSupportedError: If the extension has no grammar.
            ProcessingError: If the file cannot be read (PROC_002) or is
                larger than max_file_size_bytes (PROC_003).
            ParseError: If strict and the source has syntax errors.
        """
        path = Path(path)
        try:
            size = path.stat().st_size
            if size > self._max_file_size_bytes:
                raise ProcessingError(
                    message=f"Source file too large: {path} ({size} bytes)",
                    error_code="PROC_003",
                    details={"file_path": str(path), "limit": self._max_file_size_bytes},
                )
            source = path.read_bytes()
        except OSError as e:
            raise ProcessingError(
                message=f"Cannot read source file: {path}",
                error_code="PROC_002",
                details={"file_path": str(path)},
                original_exception=e,
            ) from e

        return self.parse(source, str(path), strict=strict)

    @staticmethod
    def _first_error_line(root: Node) -> int:
        stack = [root]
        while stack:
            node = stack.pop()
            if node.type == "ERROR" or node.is_missing:
                return node.start_point[0]
            if node.has_error:
                stack.extend(reversed(node.children))
        return root.start_point[0]


__all__ = [
    "SourceFile",
    "SourceParser",
]
