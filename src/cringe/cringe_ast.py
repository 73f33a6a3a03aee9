"""
Defines the abstract syntax tree (AST) for cringe-lang expressions.

Literal values:
    NumberValue, StringValue, BooleanValue, NilValue:
        Closed set of scalar values carried by Literal nodes. They compare by
        value and never equal a value of another variant.

Expression nodes:
    Binary:   left operand, operator token, right operand.
    Unary:    prefix operator token and its operand.
    Grouping: a parenthesized expression.
    Literal:  a scalar value.

Every node is an immutable dataclass that exclusively owns its children, so a
parsed expression is always a tree. Nodes can be serialized to plain
dictionaries with `to_dict()` for JSON output or inspection; serialization
walks the tree with an explicit stack, so depth is bounded only by memory.

Example:
    node = Binary(Literal(NumberValue(1.0)), Token(TokenKind.PLUS, "+"), Literal(NumberValue(2.0)))
"""

from dataclasses import dataclass
from typing import Any, TypedDict, Union

from cringe.cringe_lexer import Token


def format_number(value: float) -> str:
    """Renders a float without a trailing `.0` when it holds an integral value."""
    if value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return repr(value)


@dataclass(frozen=True)
class NumberValue:
    value: float

    def __str__(self) -> str:
        return format_number(self.value)


@dataclass(frozen=True)
class StringValue:
    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class BooleanValue:
    value: bool

    def __str__(self) -> str:
        return "sahi" if self.value else "ghalat"


@dataclass(frozen=True)
class NilValue:
    def __str__(self) -> str:
        return "khali"


LiteralValue = Union[NumberValue, StringValue, BooleanValue, NilValue]


class ASTDict(TypedDict, total=False):
    """
    Serialized form of an expression node.

    Fields:
        kind (str): "binary", "unary", "grouping", or "literal".
        operator (str): Operator lexeme (binary and unary nodes).
        line (int): Line of the operator token (binary and unary nodes).
        left (ASTDict): Left operand (binary nodes).
        right (ASTDict): Right operand (binary and unary nodes).
        expression (ASTDict): Inner expression (grouping nodes).
        type (str): Literal variant, "number", "string", "boolean", or "nil".
        value (Any): The literal's Python value (literal nodes).
    """

    kind: str
    operator: str
    line: int
    left: "ASTDict"
    right: "ASTDict"
    expression: "ASTDict"
    type: str
    value: Any


_LITERAL_TYPES: dict[type, str] = {
    NumberValue: "number",
    StringValue: "string",
    BooleanValue: "boolean",
    NilValue: "nil",
}


@dataclass(frozen=True)
class Binary:
    left: "Expr"
    operator: Token
    right: "Expr"

    kind = "binary"

    def fields_dict(self) -> ASTDict:
        return {
            "kind": self.kind,
            "operator": self.operator.lexeme,
            "line": self.operator.line,
        }

    def children(self) -> list[tuple[str, "Expr"]]:
        return [("left", self.left), ("right", self.right)]

    def to_dict(self) -> ASTDict:
        return expr_to_dict(self)


@dataclass(frozen=True)
class Unary:
    operator: Token
    right: "Expr"

    kind = "unary"

    def fields_dict(self) -> ASTDict:
        return {
            "kind": self.kind,
            "operator": self.operator.lexeme,
            "line": self.operator.line,
        }

    def children(self) -> list[tuple[str, "Expr"]]:
        return [("right", self.right)]

    def to_dict(self) -> ASTDict:
        return expr_to_dict(self)


@dataclass(frozen=True)
class Grouping:
    expression: "Expr"

    kind = "grouping"

    def fields_dict(self) -> ASTDict:
        return {"kind": self.kind}

    def children(self) -> list[tuple[str, "Expr"]]:
        return [("expression", self.expression)]

    def to_dict(self) -> ASTDict:
        return expr_to_dict(self)


@dataclass(frozen=True)
class Literal:
    value: LiteralValue

    kind = "literal"

    def fields_dict(self) -> ASTDict:
        val = getattr(self.value, "value", None)  # NilValue has no payload
        return {
            "kind": self.kind,
            "type": _LITERAL_TYPES[type(self.value)],
            "value": val,
        }

    def children(self) -> list[tuple[str, "Expr"]]:
        return []

    def to_dict(self) -> ASTDict:
        return expr_to_dict(self)


Expr = Union[Binary, Unary, Grouping, Literal]


def expr_to_dict(root: Expr) -> ASTDict:
    """
    Serializes a tree to nested dictionaries without recursion.

    Each dictionary is created as soon as its node is reached and linked into
    its parent before the node's own children are filled in, so arbitrarily
    deep trees never touch the interpreter's recursion limit.
    """
    result = root.fields_dict()
    pending: list[tuple[Expr, ASTDict]] = [(root, result)]
    while pending:
        node, out = pending.pop()
        for key, child in node.children():
            child_out = child.fields_dict()
            out[key] = child_out  # type: ignore[literal-required]
            pending.append((child, child_out))
    return result


__all__ = [
    "ASTDict",
    "Binary",
    "BooleanValue",
    "Expr",
    "Grouping",
    "Literal",
    "LiteralValue",
    "NilValue",
    "NumberValue",
    "StringValue",
    "Unary",
    "expr_to_dict",
    "format_number",
]
