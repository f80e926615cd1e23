"""
File-level binding lookup for shorthand metadata properties.

``@NgModule({ declarations })`` refers to a ``declarations`` binding that is
either a top-level variable of the same file or an imported name. Imports
are reported as ImportSpecifier nodes; following them into other files is
left to the caller.
"""

from typing import Iterator, Optional

import structlog
from tree_sitter import Node

from symdeps_core.metadata.nodes import Binding, ImportSpecifier, VariableDeclaration
from .converter import NodeConverter
from .parser import SourceFile

logger = structlog.get_logger(__name__)

DECLARATION_TYPES = ("lexical_declaration", "variable_declaration")


class SourceFileBindingResolver:
    """
    LocalBindingResolver over a parsed SourceFile.

    Local variable declarations take precedence over imports.

    Example:
        >>> resolver = SourceFileBindingResolver()
        >>> resolver.resolve("COMPONENTS", source_file)
        VariableDeclaration(name='COMPONENTS', initializer=ArrayLiteralExpression(...))
    """

    def resolve(self, binding_name: str, source_context: SourceFile) -> Optional[Binding]:
        declaration = self.find_variable(binding_name, source_context)
        if declaration is not None:
            return declaration

        specifier = self.find_import(binding_name, source_context)
        if specifier is None:
            logger.debug("binding_not_found", name=binding_name, file_path=source_context.path)
        return specifier

    def find_variable(self, name: str, source_file: SourceFile) -> Optional[VariableDeclaration]:
        """Find a top-level ``const``/``let``/``var`` declarator named ``name``."""
        for statement in self._top_level_statements(source_file.root):
            if statement.type not in DECLARATION_TYPES:
                continue
            for declarator in statement.named_children:
                if declarator.type != "variable_declarator":
                    continue
                name_node = declarator.child_by_field_name("name")
                if name_node is None or source_file.node_text(name_node) != name:
                    continue
                value = declarator.child_by_field_name("value")
                initializer = NodeConverter(source_file.source).convert(value) if value else None
                return VariableDeclaration(name=name, initializer=initializer)
        return None

    def find_import(self, name: str, source_file: SourceFile) -> Optional[ImportSpecifier]:
        """Find the import specifier that binds ``name`` locally."""
        for statement in source_file.root.named_children:
            if statement.type != "import_statement":
                continue
            source_node = statement.child_by_field_name("source")
            if source_node is None:
                continue
            module_specifier = source_file.node_text(source_node)[1:-1]

            for clause in statement.named_children:
                if clause.type != "import_clause":
                    continue
                for local_name, imported_name in self._clause_bindings(clause, source_file):
                    if local_name == name:
                        return ImportSpecifier(
                            name=local_name,
                            imported_name=imported_name,
                            module_specifier=module_specifier,
                        )
        return None

    @staticmethod
    def _top_level_statements(root: Node) -> Iterator[Node]:
        for statement in root.named_children:
            if statement.type == "export_statement":
                declaration = statement.child_by_field_name("declaration")
                if declaration is not None:
                    yield declaration
            else:
                yield statement

    @staticmethod
    def _clause_bindings(clause: Node, source_file: SourceFile) -> Iterator[tuple[str, str]]:
        """Yield (local name, imported name) pairs of an import clause."""
        for child in clause.named_children:
            if child.type == "identifier":
                # import Foo from './foo'
                yield source_file.node_text(child), "default"
            elif child.type == "namespace_import":
                # import * as Foo from './foo'
                for ident in child.named_children:
                    if ident.type == "identifier":
                        yield source_file.node_text(ident), "*"
            elif child.type == "named_imports":
                for specifier in child.named_children:
                    if specifier.type != "import_specifier":
                        continue
                    name_node = specifier.child_by_field_name("name")
                    alias_node = specifier.child_by_field_name("alias")
                    if name_node is None:
                        continue
                    imported = source_file.node_text(name_node)
                    local = source_file.node_text(alias_node) if alias_node else imported
                    yield local, imported


__all__ = ["SourceFileBindingResolver"]
