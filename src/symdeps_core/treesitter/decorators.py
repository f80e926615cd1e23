"""
Decorated class discovery and per-class metadata extraction.

Finds classes annotated with metadata decorators such as::

    @NgModule({
        declarations: [AppComponent],
        imports: [BrowserModule, RouterModule.forRoot(routes)],
        providers: [{ provide: HTTP_INTERCEPTORS, useClass: AuthInterceptor, multi: true }],
    })
    export class AppModule {}

and resolves each configured metadata property through SymbolHelper.

Author: Goncharenko Anton aka alienxs2
License: MIT
"""

from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Union

import structlog
from tree_sitter import Node

from symdeps_core.config import settings
from symdeps_core.exceptions import ValidationError
from symdeps_core.metadata.models import ClassDependencies, DecoratedClass, DecoratorLocation
from symdeps_core.metadata.nodes import ObjectLiteralExpression
from symdeps_core.metadata.symbol_helper import SymbolHelper
from .bindings import SourceFileBindingResolver
from .converter import NodeConverter
from .parser import SourceFile, SourceParser

logger = structlog.get_logger(__name__)


CLASS_TYPES = ("class_declaration", "abstract_class_declaration")


class DecoratedClassScanner:
    """
    Finds class declarations carrying a configured metadata decorator.

    A decorator qualifies when it is a call to one of ``decorator_names``
    (``@NgModule(...)`` or ``@core.NgModule(...)``) whose first argument is
    an object literal, or which has no arguments at all.

    Raises:
        ValidationError: If decorator_names is empty.
    """

    def __init__(self, decorator_names: Optional[Iterable[str]] = None) -> None:
        names = list(decorator_names) if decorator_names is not None else list(settings.decorator_names)
        if not names:
            raise ValidationError(
                message="decorator_names cannot be empty",
                error_code="VAL_001",
            )
        self._decorator_names = frozenset(names)
        self._log = logger.bind(scanner=self.__class__.__name__)

    def scan(self, source_file: SourceFile) -> List[DecoratedClass]:
        """Return every qualifying decorated class in source order."""
        converter = NodeConverter(source_file.source)
        results: List[DecoratedClass] = []

        for class_node in self._iter_classes(source_file.root):
            name_node = class_node.child_by_field_name("name")
            if name_node is None:
                self._log.debug("anonymous_class_skipped", line=class_node.start_point[0])
                continue
            class_name = source_file.node_text(name_node)

            for decorator in self._decorators_of(class_node):
                decorated = self._build(decorator, class_name, class_node, source_file, converter)
                if decorated is not None:
                    results.append(decorated)

        self._log.debug(
            "decorated_class_scan_complete",
            file_path=source_file.path,
            count=len(results),
        )
        return results

    def _build(
        self,
        decorator: Node,
        class_name: str,
        class_node: Node,
        source_file: SourceFile,
        converter: NodeConverter,
    ) -> Optional[DecoratedClass]:
        call = next((c for c in decorator.named_children if c.type != "comment"), None)
        if call is None or call.type != "call_expression":
            return None

        decorator_name = self._callee_name(call.child_by_field_name("function"), source_file)
        if decorator_name not in self._decorator_names:
            return None

        arguments = call.child_by_field_name("arguments")
        args = [a for a in arguments.named_children if a.type != "comment"] if arguments else []

        if not args:
            properties = []
        else:
            metadata = converter.convert(args[0])
            if not isinstance(metadata, ObjectLiteralExpression):
                self._log.debug(
                    "decorator_argument_not_literal",
                    class_name=class_name,
                    decorator=decorator_name,
                    argument_kind=metadata.kind,
                )
                return None
            properties = list(metadata.properties)

        self._log.debug(
            "decorated_class_found",
            class_name=class_name,
            decorator=decorator_name,
            properties_count=len(properties),
        )
        return DecoratedClass(
            class_name=class_name,
            decorator_name=decorator_name,
            file_path=source_file.path,
            location=DecoratorLocation(
                start_line=class_node.start_point[0],
                end_line=class_node.end_point[0],
            ),
            properties=properties,
        )

    @staticmethod
    def _iter_classes(root: Node) -> Iterator[Node]:
        stack = [root]
        while stack:
            node = stack.pop()
            if node.type in CLASS_TYPES:
                yield node
            stack.extend(reversed(node.named_children))

    @staticmethod
    def _decorators_of(class_node: Node) -> List[Node]:
        """Decorators of a class, including those written before ``export``."""
        decorators: List[Node] = []
        parent = class_node.parent
        if parent is not None and parent.type == "export_statement":
            decorators.extend(c for c in parent.children if c.type == "decorator")
        decorators.extend(c for c in class_node.children if c.type == "decorator")
        return decorators

    @staticmethod
    def _callee_name(function: Optional[Node], source_file: SourceFile) -> Optional[str]:
        if function is None:
            return None
        if function.type == "identifier":
            return source_file.node_text(function)
        if function.type == "member_expression":
            member = function.child_by_field_name("property")
            return source_file.node_text(member) if member is not None else None
        return None


class DecoratorMetadataExtractor:
    """
    Resolves the metadata properties of every decorated class in a file.

    Example:
        >>> extractor = DecoratorMetadataExtractor()
        >>> [result] = extractor.extract_source(source, "app.module.ts")
        >>> result.dependencies["imports"]
        ['BrowserModule', 'RouterModule.forRoot(args)']
    """

    def __init__(
        self,
        parser: Optional[SourceParser] = None,
        scanner: Optional[DecoratedClassScanner] = None,
        helper: Optional[SymbolHelper] = None,
        metadata_properties: Optional[Iterable[str]] = None,
    ) -> None:
        self._parser = parser or SourceParser()
        self._scanner = scanner or DecoratedClassScanner()
        self._helper = helper or SymbolHelper(
            binding_resolver=SourceFileBindingResolver(),
            interceptor_tokens=settings.interceptor_tokens,
        )
        self._metadata_properties = (
            list(metadata_properties)
            if metadata_properties is not None
            else list(settings.metadata_properties)
        )
        self._log = logger.bind(extractor=self.__class__.__name__)

    def extract(self, source_file: SourceFile) -> List[ClassDependencies]:
        """Extract dependencies of every decorated class in a parsed file."""
        results = [
            self._resolve(decorated, source_file)
            for decorated in self._scanner.scan(source_file)
        ]
        self._log.info(
            "metadata_extraction_complete",
            file_path=source_file.path,
            classes_count=len(results),
            dependencies_count=sum(r.total_dependencies for r in results),
        )
        return results

    def extract_source(
        self,
        source: Union[str, bytes],
        file_path: str,
        language: Optional[str] = None,
    ) -> List[ClassDependencies]:
        """Parse source text and extract its decorated classes."""
        return self.extract(self._parser.parse(source, file_path, language=language))

    def extract_file(self, path: Union[str, Path]) -> List[ClassDependencies]:
        """Read, parse and extract one source file."""
        return self.extract(self._parser.parse_file(path))

    def _resolve(self, decorated: DecoratedClass, source_file: SourceFile) -> ClassDependencies:
        dependencies = {}
        identifiers = {}

        for property_name in self._metadata_properties:
            if not self._helper.get_symbol_deps_raw(decorated.properties, property_name):
                continue
            values = self._helper.get_symbol_deps(decorated.properties, property_name, source_file)
            dependencies[property_name] = values
            identifiers[property_name] = [
                self._helper.parse_deep_identifier(value)
                for value in values
                if isinstance(value, str)
            ]

        return ClassDependencies(
            class_name=decorated.class_name,
            decorator_name=decorated.decorator_name,
            file_path=decorated.file_path,
            location=decorated.location,
            dependencies=dependencies,
            identifiers=identifiers,
        )


__all__ = [
    "CLASS_TYPES",
    "DecoratedClassScanner",
    "DecoratorMetadataExtractor",
]
