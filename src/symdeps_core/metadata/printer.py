"""Default ExpressionPrinter producing single-line TypeScript text."""

from symdeps_core.metadata.nodes import (
    ArrayLiteralExpression,
    CallExpression,
    FalseLiteral,
    Identifier,
    ImportSpecifier,
    NumericLiteral,
    ObjectLiteralExpression,
    OpaqueExpression,
    PropertyAccessExpression,
    PropertyAssignment,
    ShorthandPropertyAssignment,
    SpreadElement,
    StringLiteral,
    SyntaxNode,
    TemplateLiteral,
    TrueLiteral,
    VariableDeclaration,
)


class CanonicalPrinter:
    """Prints nodes back to canonical source.

    Object literals print as ``{ provide: 'Date', useFactory: fn }`` and
    arrays as ``[A, B]``; opaque nodes print their verbatim source.

    Example:
        >>> printer = CanonicalPrinter()
        >>> printer.print(ObjectLiteralExpression(properties=[
        ...     PropertyAssignment(name="provide", initializer=StringLiteral(text="T")),
        ... ]))
        "{ provide: 'T' }"
    """

    def print(self, node: SyntaxNode) -> str:
        match node:
            case Identifier(text=text) | NumericLiteral(text=text):
                return text
            case StringLiteral(text=text, quote=quote):
                return f"{quote}{text}{quote}"
            case TemplateLiteral(text=text):
                return f"`{text}`"
            case TrueLiteral():
                return "true"
            case FalseLiteral():
                return "false"
            case PropertyAccessExpression(expression=expression, name=name):
                return f"{self.print(expression)}.{name}"
            case CallExpression(expression=expression, arguments=arguments):
                return f"{self.print(expression)}({self._join(arguments)})"
            case SpreadElement(expression=expression):
                return f"...{self.print(expression)}"
            case ArrayLiteralExpression(elements=elements):
                return f"[{self._join(elements)}]"
            case ObjectLiteralExpression(properties=()):
                return "{}"
            case ObjectLiteralExpression(properties=properties):
                return f"{{ {self._join(properties)} }}"
            case PropertyAssignment(name=name, initializer=initializer):
                return f"{name}: {self.print(initializer)}"
            case ShorthandPropertyAssignment(name=name):
                return name
            case VariableDeclaration(name=name, initializer=None):
                return name
            case VariableDeclaration(name=name, initializer=initializer):
                return f"{name} = {self.print(initializer)}"
            case ImportSpecifier(name=name, imported_name=imported_name) if name != imported_name:
                return f"{imported_name} as {name}"
            case ImportSpecifier(name=name):
                return name
            case OpaqueExpression(source=source):
                return source
            case _:
                raise TypeError(f"Unsupported node type: {type(node).__name__}")

    def _join(self, nodes) -> str:
        return ", ".join(self.print(node) for node in nodes)


__all__ = ["CanonicalPrinter"]
