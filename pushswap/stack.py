"""The two stacks of the puzzle and the operations allowed on them."""

from __future__ import annotations

import enum
from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional


class EmptyStackError(Exception):
    """Raised when an operation needs an element but the stack is empty."""


@dataclass(eq=False)
class Node:
    """One element of a stack with the bookkeeping the sorter uses."""

    data: int
    order: int = -1
    price: int = -1
    place: Optional["Node"] = None


class Operation(str, enum.Enum):
    """The instructions of the puzzle."""

    SA = "sa"
    SB = "sb"
    SS = "ss"
    PA = "pa"
    PB = "pb"
    RA = "ra"
    RB = "rb"
    RR = "rr"
    RRA = "rra"
    RRB = "rrb"
    RRR = "rrr"

    def __str__(self) -> str:
        return self.value


class Stack:
    """A stack of nodes whose top is the first element."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._nodes: deque[Node] = deque(Node(value) for value in values)

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes)

    def __repr__(self) -> str:
        return f"Stack({self.values()!r})"

    def top(self) -> Node:
        """Return the node on top of the stack."""
        if not self._nodes:
            raise EmptyStackError("stack is empty")
        return self._nodes[0]

    def values(self) -> list[int]:
        """Return the values from top to bottom."""
        return [node.data for node in self._nodes]

    def swap(self) -> None:
        """Exchange the top two elements; does nothing with fewer than two."""
        if len(self._nodes) < 2:
            return
        first = self._nodes.popleft()
        second = self._nodes.popleft()
        self._nodes.appendleft(first)
        self._nodes.appendleft(second)

    def rotate(self) -> None:
        """Move the top element to the bottom."""
        if len(self._nodes) < 2:
            return
        self._nodes.append(self._nodes.popleft())

    def reverse_rotate(self) -> None:
        """Move the bottom element to the top."""
        if len(self._nodes) < 2:
            return
        self._nodes.appendleft(self._nodes.pop())

    def push_to(self, other: "Stack") -> Node:
        """Move the top element onto ``other`` and return it."""
        if not self._nodes:
            raise EmptyStackError("cannot push from an empty stack")
        node = self._nodes.popleft()
        other._nodes.appendleft(node)
        return node

    def is_sorted(self) -> bool:
        """Return whether the values ascend from top to bottom."""
        values = self.values()
        return all(a <= b for a, b in zip(values, values[1:]))

    def highest(self) -> Node:
        """Return the first node holding the largest value."""
        if not self._nodes:
            raise EmptyStackError("stack is empty")
        return max(self._nodes, key=lambda node: node.data)

    def lowest(self) -> Node:
        """Return the first node holding the smallest value."""
        if not self._nodes:
            raise EmptyStackError("stack is empty")
        return min(self._nodes, key=lambda node: node.data)

    def index_of(self, node: Node) -> int:
        """Return the distance of ``node`` from the top."""
        for index, candidate in enumerate(self._nodes):
            if candidate is node:
                return index
        raise ValueError("node is not in this stack")


def apply_operation(operation: Operation | str, stack_a: Stack, stack_b: Stack) -> None:
    """Carry out one instruction on the two stacks."""
    op = Operation(operation)
    if op is Operation.PA:
        stack_b.push_to(stack_a)
        return
    if op is Operation.PB:
        stack_a.push_to(stack_b)
        return
    if op in (Operation.SA, Operation.SB, Operation.SS):
        action = Stack.swap
    elif op in (Operation.RA, Operation.RB, Operation.RR):
        action = Stack.rotate
    else:
        action = Stack.reverse_rotate
    target = op.value[-1]
    if target in ("a", "s", "r"):
        action(stack_a)
    if target in ("b", "s", "r"):
        action(stack_b)