"""Collaborator interfaces consumed by the metadata extractor.

The extractor never parses source or walks files itself. A front end
supplies nodes, and these two protocols cover the only other services it
needs: rendering a node back to source text, and looking up the binding a
shorthand property stands for.
"""

from typing import Any, Optional, Protocol

from symdeps_core.metadata.nodes import Binding, SyntaxNode


class ExpressionPrinter(Protocol):
    """Renders a node as canonical source text."""

    def print(self, node: SyntaxNode) -> str:
        ...


class LocalBindingResolver(Protocol):
    """Finds the import specifier or variable declaration behind a name.

    ``source_context`` is whatever the front end uses to identify the
    current file (``symdeps_core.treesitter.SourceFile`` for the bundled
    tree-sitter front end). Returns None when the name is not bound at
    file level.
    """

    def resolve(self, binding_name: str, source_context: Any) -> Optional[Binding]:
        ...


__all__ = [
    "ExpressionPrinter",
    "LocalBindingResolver",
]
