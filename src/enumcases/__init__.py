"""Closed variant types: enumerations with raw and associated values."""
from ._adt import ADT, ADTMeta, Option, Visitor, auto, case_method_name
from .config import EvaluationPolicy
from .expression import (
    EvaluationError,
    Expression,
    ExpressionTooDeep,
    IntegerOverflow,
    addition,
    evaluate,
    literal,
    multiplication,
    render,
)

__all__ = [
    "ADT",
    "ADTMeta",
    "EvaluationError",
    "EvaluationPolicy",
    "Expression",
    "ExpressionTooDeep",
    "IntegerOverflow",
    "Option",
    "Visitor",
    "addition",
    "auto",
    "case_method_name",
    "evaluate",
    "literal",
    "multiplication",
    "render",
]
