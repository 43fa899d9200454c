"""Arithmetic expressions as a closed, recursive ADT."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from ._adt import ADT, Visitor
from .config import DEFAULT_POLICY, EvaluationPolicy


log = logging.getLogger(__name__)


class EvaluationError(Exception):
    """Evaluation went outside the limits of its `EvaluationPolicy`."""


class IntegerOverflow(EvaluationError, OverflowError):
    pass


class ExpressionTooDeep(EvaluationError, RecursionError):
    pass


def _check_child(owner: str, field: str, child: object) -> None:
    if not isinstance(child, Expression):
        raise TypeError(
            "%s.%s must be an Expression, got %r" % (owner, field, type(child).__name__)
        )


class Expression(ADT):
    """
    An integer arithmetic expression.

    Trees are built bottom-up from already constructed children and are
    immutable afterwards.
    """

    @dataclass(frozen=True)
    class Literal:
        value: int

        def __post_init__(self):
            if not isinstance(self.value, int) or isinstance(self.value, bool):
                raise TypeError(
                    "Literal.value must be an int, got %r" % type(self.value).__name__
                )

    @dataclass(frozen=True)
    class Addition:
        left: Expression
        right: Expression

        def __post_init__(self):
            _check_child("Addition", "left", self.left)
            _check_child("Addition", "right", self.right)

    @dataclass(frozen=True)
    class Multiplication:
        left: Expression
        right: Expression

        def __post_init__(self):
            _check_child("Multiplication", "left", self.left)
            _check_child("Multiplication", "right", self.right)

    def __str__(self) -> str:
        return render(self)


def literal(value: int) -> Expression:
    return Expression.Literal(value)


def addition(left: Expression, right: Expression) -> Expression:
    return Expression.Addition(left, right)


def multiplication(left: Expression, right: Expression) -> Expression:
    return Expression.Multiplication(left, right)


class _DepthLimited(Visitor):
    """
    Refuses trees nested deeper than `policy.max_depth`.

    Tracks the current depth, so use a fresh instance per walk.
    """

    def __init__(self, policy: EvaluationPolicy = DEFAULT_POLICY):
        self.policy = policy
        self._depth = 0

    def visit(self, expression: Expression):
        if self._depth >= self.policy.max_depth:
            raise ExpressionTooDeep(
                "expression nests deeper than %d levels" % self.policy.max_depth
            )
        self._depth += 1
        try:
            return super().visit(expression)
        finally:
            self._depth -= 1


class Evaluator(_DepthLimited, adt=Expression):
    """Reduces an expression to an integer."""

    def __init__(self, policy: EvaluationPolicy = DEFAULT_POLICY):
        super().__init__(policy)
        self._bounds = policy.int_range

    def _checked(self, result: int) -> int:
        if self._bounds is not None:
            low, high = self._bounds
            if not low <= result <= high:
                raise IntegerOverflow(
                    "%d does not fit in %d bits" % (result, self.policy.int_bits)
                )
        return result

    def visit_literal(self, node: Expression.Literal) -> int:
        return self._checked(node.value)

    def visit_addition(self, node: Expression.Addition) -> int:
        return self._checked(self.visit(node.left) + self.visit(node.right))

    def visit_multiplication(self, node: Expression.Multiplication) -> int:
        return self._checked(self.visit(node.left) * self.visit(node.right))


def evaluate(
    expression: Expression, policy: Optional[EvaluationPolicy] = None
) -> int:
    """
    Compute the value of `expression`.

    Integers are unbounded unless `policy.int_bits` is set, in which case
    any literal or intermediate result outside that width raises
    `IntegerOverflow`. Trees deeper than `policy.max_depth` raise
    `ExpressionTooDeep`.
    """
    log.debug("Evaluating %s", type(expression).__qualname__)
    return Evaluator(policy or DEFAULT_POLICY).visit(expression)


class Renderer(_DepthLimited, adt=Expression):
    def visit_literal(self, node: Expression.Literal) -> str:
        return "(%d)" % node.value if node.value < 0 else "%d" % node.value

    def visit_addition(self, node: Expression.Addition) -> str:
        return "(%s + %s)" % (self.visit(node.left), self.visit(node.right))

    def visit_multiplication(self, node: Expression.Multiplication) -> str:
        return "(%s * %s)" % (self.visit(node.left), self.visit(node.right))


def render(expression: Expression, policy: Optional[EvaluationPolicy] = None) -> str:
    """
    Fully parenthesised infix form, e.g. `((5 + 4) * 2)`.

    Trees deeper than `policy.max_depth` raise `ExpressionTooDeep`.
    """
    return Renderer(policy or DEFAULT_POLICY).visit(expression)
