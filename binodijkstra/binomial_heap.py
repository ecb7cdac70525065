"""Binomial min-heap over integer keys, with counters of the work it does."""

from __future__ import annotations

from collections.abc import Iterator


class _Node:
    __slots__ = ("key", "priority", "degree", "parent", "child", "sibling")

    def __init__(self, key: int, priority: float) -> None:
        self.key = key
        self.priority = priority
        self.degree = 0
        self.parent: _Node | None = None
        self.child: _Node | None = None
        self.sibling: _Node | None = None


class BinomialHeap:
    """A mergeable min-priority queue of keys with decrease-priority support.

    The attributes ``link_count``, ``swap_count``, ``extract_count``,
    ``insert_count`` and ``decrease_count`` count tree links, key swaps
    while sifting up, and calls of the corresponding operations.
    """

    def __init__(self) -> None:
        self._head: _Node | None = None
        self._nodes: dict[int, _Node] = {}
        self.reset_counters()

    def reset_counters(self) -> None:
        """Set every operation counter back to zero."""
        self.link_count = 0
        self.swap_count = 0
        self.extract_count = 0
        self.insert_count = 0
        self.decrease_count = 0

    def __len__(self) -> int:
        return len(self._nodes)

    def __bool__(self) -> bool:
        return self._head is not None

    def __contains__(self, key: object) -> bool:
        return key in self._nodes

    def _roots(self) -> Iterator[_Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.sibling

    def insert(self, key: int, priority: float) -> None:
        """Add ``key`` with the given priority."""
        single = BinomialHeap()
        node = _Node(key, priority)
        single._head = node
        single._nodes[key] = node
        self.insert_count += 1
        self.meld(single)

    def min_key(self) -> int:
        """Return the key with the smallest priority without removing it."""
        if self._head is None:
            raise IndexError("heap is empty")
        return min(self._roots(), key=lambda node: node.priority).key

    def priority(self, key: int) -> float:
        """Return the current priority of ``key``."""
        try:
            return self._nodes[key].priority
        except KeyError:
            raise KeyError(key) from None

    def extract_min(self) -> int:
        """Remove the key with the smallest priority and return it."""
        if self._head is None:
            raise IndexError("heap is empty")
        self.extract_count += 1

        min_node = self._head
        prev_min: _Node | None = None
        prev: _Node | None = None
        for node in self._roots():
            if node.priority < min_node.priority:
                min_node = node
                prev_min = prev
            prev = node

        if prev_min is None:
            self._head = min_node.sibling
        else:
            prev_min.sibling = min_node.sibling

        reversed_children: _Node | None = None
        child = min_node.child
        while child is not None:
            following = child.sibling
            child.sibling = reversed_children
            child.parent = None
            reversed_children = child
            child = following

        del self._nodes[min_node.key]
        self._head = self._union(self._head, reversed_children)
        return min_node.key

    def decrease_priority(self, key: int, new_priority: float) -> None:
        """Lower the priority of ``key`` to ``new_priority``."""
        try:
            node = self._nodes[key]
        except KeyError:
            raise KeyError(key) from None
        if new_priority > node.priority:
            raise ValueError("new priority is greater than current priority")

        self.decrease_count += 1
        node.priority = new_priority
        parent = node.parent
        while parent is not None and node.priority < parent.priority:
            node.key, parent.key = parent.key, node.key
            node.priority, parent.priority = parent.priority, node.priority
            self.swap_count += 1
            self._nodes[node.key] = node
            self._nodes[parent.key] = parent
            node = parent
            parent = node.parent

    def meld(self, other: BinomialHeap) -> None:
        """Move every entry of ``other`` into this heap, leaving ``other`` empty."""
        if other is self:
            raise ValueError("cannot meld a heap with itself")
        self._head = self._union(self._head, other._head)
        self._nodes.update(other._nodes)
        other._head = None
        other._nodes = {}

    @staticmethod
    def _merge_roots(first: _Node | None, second: _Node | None) -> _Node | None:
        if first is None:
            return second
        if second is None:
            return first
        anchor = _Node(0, 0.0)
        tail = anchor
        while first is not None and second is not None:
            if first.degree < second.degree:
                tail.sibling = first
                first = first.sibling
            else:
                tail.sibling = second
                second = second.sibling
            tail = tail.sibling
        tail.sibling = first if first is not None else second
        return anchor.sibling

    def _link(self, child: _Node, parent: _Node) -> None:
        self.link_count += 1
        child.parent = parent
        child.sibling = parent.child
        parent.child = child
        parent.degree += 1

    def _union(self, first: _Node | None, second: _Node | None) -> _Node | None:
        new_head = self._merge_roots(first, second)
        if new_head is None:
            return None

        prev: _Node | None = None
        current = new_head
        following = current.sibling
        while following is not None:
            if current.degree != following.degree or (
                following.sibling is not None
                and following.sibling.degree == current.degree
            ):
                prev = current
                current = following
            elif current.priority <= following.priority:
                current.sibling = following.sibling
                self._link(following, current)
            else:
                if prev is None:
                    new_head = following
                else:
                    prev.sibling = following
                self._link(current, following)
                current = following
            following = current.sibling
        return new_head