"""Qualified-name rendering for identifier, member-access and call chains.

Examples:
    RouterModule.forRoot          -> "RouterModule.forRoot"
    Shared.Module                 -> "Shared.Module"
    ...MODULES                    -> "...MODULES"
    [A, B].concat                 -> "[A, B].concat"
"""

from typing import Optional

from symdeps_core.metadata.nodes import (
    ArrayLiteralExpression,
    CallExpression,
    Expression,
    Identifier,
    PropertyAccessExpression,
    SpreadElement,
    SyntaxNode,
    leaf_text,
)

# Substituted for any name segment that cannot be resolved.
UNKNOWN = "???"


def _child(node: SyntaxNode) -> Optional[Expression]:
    match node:
        case PropertyAccessExpression(expression=child):
            return child
        case CallExpression(expression=child) | SpreadElement(expression=child):
            return child
        case _:
            return None


def _segment(node: SyntaxNode) -> str:
    """Resolve the name segment a node contributes to the dotted trail.

    Resolution order: the node's own member name, its literal text, the
    literal text of its child expression, and finally the bracketed
    element list when the child is an array literal.
    """
    match node:
        case PropertyAccessExpression(name=name):
            return name

    text = leaf_text(node)
    if text:
        return text

    match _child(node):
        case ArrayLiteralExpression(elements=elements):
            # Elements without literal text render as empty slots
            return "[" + ", ".join(leaf_text(element) or "" for element in elements) + "]"
        case None:
            return UNKNOWN
        case child:
            return leaf_text(child) or UNKNOWN


def build_qualified_name(node: SyntaxNode, suffix: Optional[str] = None) -> str:
    """Render a node as a dot-joined qualified name.

    Each step renders the current node's segment, then descends into its
    single child (property access -> object, call -> callee, spread ->
    operand) with that segment as the pending suffix. The recursion ends
    at an identifier, at a spread, or at a node with no child.

    Args:
        node: Expression to render.
        suffix: Trail already rendered by the caller, appended after this node.

    Returns:
        Dotted name; unresolvable segments appear as ``UNKNOWN``.
    """
    tail = f".{suffix}" if suffix else ""

    match node:
        case Identifier(text=text):
            return f"{text}{tail}"
        case SpreadElement():
            return f"...{_segment(node)}"

    segment = _segment(node)
    child = _child(node)
    if child is None:
        return f"{segment}{tail}"
    return f"{build_qualified_name(child, segment)}{tail}"


# Name used by SymbolHelper and older callers
build_identifier_name = build_qualified_name


__all__ = [
    "UNKNOWN",
    "build_qualified_name",
    "build_identifier_name",
]
