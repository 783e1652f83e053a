"""The sorting strategy: which instructions put stack A in order."""

from __future__ import annotations

from collections.abc import Sequence

from .parsing import has_duplicates
from .stack import Node, Operation, Stack, apply_operation


def assign_order(stack: Stack) -> None:
    """Give every node its rank, 1 for the smallest value up to the stack size."""
    ranked = sorted(stack, key=lambda node: node.data)
    for rank, node in enumerate(ranked, start=1):
        node.order = rank


def target_in_a(stack_a: Stack, node: Node) -> Node:
    """Return the node of A that ``node`` must sit on top of.

    That is the node with the smallest rank above ``node``'s, or the node with
    the highest rank when there is none.
    """
    nodes = list(stack_a)
    if not nodes:
        raise ValueError("stack A is empty")
    above = [candidate for candidate in nodes if candidate.order > node.order]
    if above:
        return min(above, key=lambda candidate: candidate.order)
    return max(nodes, key=lambda candidate: candidate.order)


def move_price(place: int, position: int, a_size: int, b_size: int) -> int:
    """Estimate the rotations needed to bring A's ``place`` and B's ``position`` to the tops."""
    a_half = a_size // 2
    b_half = b_size // 2
    if position <= b_half and place <= a_half:
        return max(place, position)
    if position > b_half and place > a_half:
        return max(a_size - place, b_size - position)
    if place > a_half:
        return max(a_size - place, position)
    return max(b_size - position, place)


class _Run:
    """Two stacks and the instructions applied to them so far."""

    def __init__(self, values: Sequence[int]) -> None:
        self.a = Stack(values)
        self.b = Stack()
        self.operations: list[Operation] = []

    def do(self, operation: Operation) -> None:
        apply_operation(operation, self.a, self.b)
        self.operations.append(operation)

    def small_sort(self) -> None:
        highest = self.a.highest()
        nodes = list(self.a)
        if nodes[0] is highest:
            self.do(Operation.RA)
        elif nodes[1] is highest:
            self.do(Operation.RRA)
        first, second = list(self.a)[:2]
        if first.data > second.data:
            self.do(Operation.SA)

    def find_next(self, middle: int) -> None:
        nodes = list(self.a)
        low = [index for index, node in enumerate(nodes) if node.order <= middle]
        if low:
            leading = low[0]
            trailing = len(nodes) - low[-1] + 1
        else:
            leading = trailing = len(nodes)
        self.do(Operation.RA if leading <= trailing else Operation.RRA)

    def fill_b(self) -> None:
        middle = len(self.a) // 2
        while len(self.a) > 2:
            counter = len(self.a) // 2
            while counter > 0:
                if len(self.a) == 3:
                    self.small_sort()
                if self.a.is_sorted():
                    return
                if self.a.top().order <= middle:
                    self.do(Operation.PB)
                    counter -= 1
                else:
                    self.find_next(middle)
            middle += len(self.a) // 2

    def cheapest(self, a_size: int, b_size: int) -> Node:
        best: Node | None = None
        for position, node in enumerate(self.b):
            node.place = target_in_a(self.a, node)
            place = self.a.index_of(node.place)
            node.price = move_price(place, position, a_size, b_size)
            if best is None or best.price > node.price:
                best = node
        assert best is not None
        return best

    def bring_to_top(self, cheapest: Node, a_size: int, b_size: int) -> None:
        target = cheapest.place
        pos_a = self.a.index_of(target)
        pos_b = self.b.index_of(cheapest)
        a_half = a_size // 2
        b_half = b_size // 2
        both = None
        if pos_a >= a_half and pos_b >= b_half:
            both = Operation.RRR
        elif pos_a <= a_half and pos_b <= b_half:
            both = Operation.RR
        if both is not None:
            while self.a.top() is not target and self.b.top() is not cheapest:
                self.do(both)
        while self.a.top() is not target:
            self.do(Operation.RA if pos_a <= a_half else Operation.RRA)
        while self.b.top() is not cheapest:
            self.do(Operation.RB if pos_b <= b_half else Operation.RRB)

    def finish(self, size: int) -> None:
        index = next(i for i, node in enumerate(self.a) if node.order == 1)
        step = Operation.RA if index < size // 2 else Operation.RRA
        while self.a.top().order != 1:
            self.do(step)

    def big_sort(self) -> None:
        assign_order(self.a)
        self.fill_b()
        self.small_sort()
        last_a_size = len(self.a)
        while len(self.b):
            a_size = len(self.a)
            b_size = len(self.b)
            last_a_size = a_size
            cheapest = self.cheapest(a_size, b_size)
            self.bring_to_top(cheapest, a_size, b_size)
            self.do(Operation.PA)
        self.finish(last_a_size)


def sort_operations(values: Sequence[int]) -> list[Operation]:
    """Return the instructions that sort ``values`` in ascending order on stack A.

    Values already in order need no instructions. Repeated values are refused.
    """
    if has_duplicates(values):
        raise ValueError("values must be distinct")
    run = _Run(values)
    if len(run.a) == 0 or run.a.is_sorted():
        return []
    if len(run.a) == 2:
        run.do(Operation.SA)
    elif len(run.a) == 3:
        run.small_sort()
    else:
        run.big_sort()
    return run.operations