"""Syntax-tree node model consumed by the metadata extractor.

Every node kind is an immutable pydantic model tagged with a ``kind``
literal, and the unions below are closed: code that dispatches on a node
uses ``match`` with one case per kind and ``OpaqueExpression`` as the
terminal case for every shape the front end does not model.

Front ends (see ``symdeps_core.treesitter.converter``) allocate these nodes;
the extractor only reads them.
"""

from typing import Annotated, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field


class SyntaxNode(BaseModel):
    """Base class for all syntax-tree nodes."""

    model_config = ConfigDict(frozen=True)


# =============================================================================
# Expressions
# =============================================================================


class Identifier(SyntaxNode):
    """Bare name, e.g. ``RouterModule``."""

    kind: Literal["Identifier"] = "Identifier"
    text: str = Field(..., min_length=1, description="Identifier text")


class StringLiteral(SyntaxNode):
    """Quoted string, e.g. ``'./app.component.css'``."""

    kind: Literal["StringLiteral"] = "StringLiteral"
    text: str = Field(..., description="Content between the quotes, escapes preserved")
    quote: Literal["'", '"'] = Field(default="'", description="Quote character used in source")


class TemplateLiteral(SyntaxNode):
    """Backtick string, with or without ``${}`` substitutions."""

    kind: Literal["TemplateLiteral"] = "TemplateLiteral"
    text: str = Field(..., description="Raw content between the backticks")


class NumericLiteral(SyntaxNode):
    kind: Literal["NumericLiteral"] = "NumericLiteral"
    text: str = Field(..., min_length=1, description="Number as written in source")


class TrueLiteral(SyntaxNode):
    kind: Literal["TrueLiteral"] = "TrueLiteral"


class FalseLiteral(SyntaxNode):
    kind: Literal["FalseLiteral"] = "FalseLiteral"


class PropertyAccessExpression(SyntaxNode):
    """``<expression>.<name>``, e.g. ``Shared.Module``."""

    kind: Literal["PropertyAccessExpression"] = "PropertyAccessExpression"
    expression: "Expression"
    name: str = Field(..., min_length=1, description="Accessed member name")


class CallExpression(SyntaxNode):
    """``<expression>(<arguments>)``, e.g. ``RouterModule.forRoot(routes)``."""

    kind: Literal["CallExpression"] = "CallExpression"
    expression: "Expression"
    arguments: Tuple["Expression", ...] = ()


class SpreadElement(SyntaxNode):
    """``...<expression>`` inside an array or object literal."""

    kind: Literal["SpreadElement"] = "SpreadElement"
    expression: "Expression"


class ArrayLiteralExpression(SyntaxNode):
    kind: Literal["ArrayLiteralExpression"] = "ArrayLiteralExpression"
    elements: Tuple["Expression", ...] = ()


class ObjectLiteralExpression(SyntaxNode):
    kind: Literal["ObjectLiteralExpression"] = "ObjectLiteralExpression"
    properties: Tuple["ObjectMember", ...] = ()


class OpaqueExpression(SyntaxNode):
    """Any expression shape not modelled above (arrow functions, ``new``, ...).

    Carries the verbatim source so printers can still render it.
    """

    kind: Literal["OpaqueExpression"] = "OpaqueExpression"
    source: str = Field(default="", description="Verbatim source text")
    node_type: Optional[str] = Field(default=None, description="Front-end node type name")


# =============================================================================
# Object literal members
# =============================================================================


class PropertyAssignment(SyntaxNode):
    """``<name>: <initializer>`` inside an object literal."""

    kind: Literal["PropertyAssignment"] = "PropertyAssignment"
    name: str = Field(..., description="Declared property name")
    initializer: "Expression"


class ShorthandPropertyAssignment(SyntaxNode):
    """Bare ``<name>`` inside an object literal, standing for a same-named binding."""

    kind: Literal["ShorthandPropertyAssignment"] = "ShorthandPropertyAssignment"
    name: str = Field(..., min_length=1)


# =============================================================================
# Bindings (results of local-binding resolution)
# =============================================================================


class VariableDeclaration(SyntaxNode):
    """``const <name> = <initializer>`` at file level."""

    kind: Literal["VariableDeclaration"] = "VariableDeclaration"
    name: str = Field(..., min_length=1)
    initializer: Optional["Expression"] = None


class ImportSpecifier(SyntaxNode):
    """One name brought in by an import declaration.

    ``import { A as B } from './x'`` yields ``name='B'``,
    ``imported_name='A'``, ``module_specifier='./x'``.
    """

    kind: Literal["ImportSpecifier"] = "ImportSpecifier"
    name: str = Field(..., min_length=1, description="Local binding name")
    imported_name: str = Field(..., min_length=1, description="Name exported by the module")
    module_specifier: str = Field(..., description="Module path as written")


Expression = Annotated[
    Union[
        Identifier,
        StringLiteral,
        TemplateLiteral,
        NumericLiteral,
        TrueLiteral,
        FalseLiteral,
        PropertyAccessExpression,
        CallExpression,
        SpreadElement,
        ArrayLiteralExpression,
        ObjectLiteralExpression,
        OpaqueExpression,
    ],
    Field(discriminator="kind"),
]

ObjectMember = Annotated[
    Union[
        PropertyAssignment,
        ShorthandPropertyAssignment,
        SpreadElement,
        OpaqueExpression,
    ],
    Field(discriminator="kind"),
]

Binding = Union[VariableDeclaration, ImportSpecifier]

for _model in (
    PropertyAccessExpression,
    CallExpression,
    SpreadElement,
    ArrayLiteralExpression,
    ObjectLiteralExpression,
    PropertyAssignment,
    VariableDeclaration,
):
    _model.model_rebuild()


def leaf_text(node: Optional[SyntaxNode]) -> Optional[str]:
    """Return the literal text of a leaf node, or None for every other kind."""
    match node:
        case Identifier(text=text) | NumericLiteral(text=text):
            return text
        case StringLiteral(text=text) | TemplateLiteral(text=text):
            return text
        case _:
            return None


def declared_name(node: SyntaxNode) -> Optional[str]:
    """Return the declared name of an object-literal member, if it has one."""
    match node:
        case PropertyAssignment(name=name) | ShorthandPropertyAssignment(name=name):
            return name
        case _:
            return None


__all__ = [
    "SyntaxNode",
    "Identifier",
    "StringLiteral",
    "TemplateLiteral",
    "NumericLiteral",
    "TrueLiteral",
    "FalseLiteral",
    "PropertyAccessExpression",
    "CallExpression",
    "SpreadElement",
    "ArrayLiteralExpression",
    "ObjectLiteralExpression",
    "OpaqueExpression",
    "PropertyAssignment",
    "ShorthandPropertyAssignment",
    "VariableDeclaration",
    "ImportSpecifier",
    "Expression",
    "ObjectMember",
    "Binding",
    "leaf_text",
    "declared_name",
]
