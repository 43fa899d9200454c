from __future__ import annotations

from dataclasses import dataclass
from typing import TypeVar

from enumcases import ADT, Visitor


T = TypeVar("T")


class Tree(ADT[T]):
    EMPTY = "empty"

    @dataclass(frozen=True)
    class Node:
        left: Tree[T]
        right: Tree[T]


IntTree = Tree[int]


def test_match():
    def process(m: Tree) -> str:
        match m:
            case Tree.EMPTY:
                return "empty"
            case Tree.Node(left, right):
                return f"Node({process(left)}, {process(right)})"

    assert process(Tree.EMPTY) == "empty"
    assert (
        process(Tree.Node(Tree.EMPTY, Tree.Node(Tree.EMPTY, Tree.EMPTY)))
        == "Node(empty, Node(empty, empty))"
    )


def test_visitor():
    class Size(Visitor, adt=Tree):
        def visit_empty(self, tree):
            return 0

        def visit_node(self, tree):
            return 1 + self.visit(tree.left) + self.visit(tree.right)

    tree = IntTree.Node(Tree.EMPTY, Tree.Node(Tree.EMPTY, Tree.EMPTY))
    assert Size().visit(tree) == 2
    assert Size().visit(Tree.EMPTY) == 0
