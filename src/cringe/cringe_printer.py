"""
Renders cringe-lang expression trees as fully parenthesized strings.

The output is a debugging aid only:

    Binary   -> (<operator> <left> <right>)
    Unary    -> (<operator> <right>)
    Grouping -> (group <inner>)
    Literal  -> the literal's textual form

Each visit method returns the node's output as a list of text pieces and child
nodes; `print` expands the children with an explicit stack instead of
recursing, so long operator chains print at any depth.

Example:
    >>> print_ast(parse_source("-123 * (45.67)"))
    '(* (- 123) (group 45.67))'
"""

from typing import Union

from cringe.cringe_ast import Binary, Expr, Grouping, Literal, Unary

Piece = Union[str, Expr]


class AstPrinter:
    """Walks an expression tree and dispatches each node to `visit_<kind>`."""

    def print(self, expr: Expr) -> str:
        out: list[str] = []
        stack: list[Piece] = list(reversed(self._visit(expr)))
        while stack:
            item = stack.pop()
            if isinstance(item, str):
                out.append(item)
            else:
                stack.extend(reversed(self._visit(item)))
        return "".join(out)

    def _visit(self, expr: Expr) -> list[Piece]:
        """Invokes the visit method matching the node's kind.

        Raises:
            TypeError: If the object is not an expression node.
        """
        method = getattr(self, f"visit_{getattr(expr, 'kind', '')}", None)
        if method is None:
            raise TypeError(f"Cannot print non-expression object: {expr!r}")
        result: list[Piece] = method(expr)
        return result

    def parenthesize(self, name: str, *exprs: Expr) -> list[Piece]:
        pieces: list[Piece] = ["(", name]
        for e in exprs:
            pieces += [" ", e]
        pieces.append(")")
        return pieces

    def visit_binary(self, expr: Binary) -> list[Piece]:
        return self.parenthesize(expr.operator.lexeme, expr.left, expr.right)

    def visit_unary(self, expr: Unary) -> list[Piece]:
        return self.parenthesize(expr.operator.lexeme, expr.right)

    def visit_grouping(self, expr: Grouping) -> list[Piece]:
        return self.parenthesize("group", expr.expression)

    def visit_literal(self, expr: Literal) -> list[Piece]:
        return [str(expr.value)]


def print_ast(expr: Expr) -> str:
    return AstPrinter().print(expr)


__all__ = ["AstPrinter", "print_ast"]
