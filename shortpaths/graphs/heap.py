"""
Indexed binary min-heap with decrease-key and arbitrary deletion.

The heap stores ``(score, sequence, item)`` entries in an array and keeps an
``item -> position`` index that is updated on every swap. This lets callers
lower (or raise) the score of any enqueued item, or delete it, in O(log n)
instead of rebuilding the heap.

Ties in score are broken by insertion sequence: among equal scores the item
pushed first is popped first. Updating a score does not change an item's
sequence, so the order is fully reproducible for a given sequence of calls.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 6.5 (Priority queues).
    - Sedgewick, Wayne. "Algorithms", 4th ed. Section 2.4 (IndexMinPQ).
"""

from typing import Dict, Hashable, List, Tuple


class IndexedMinHeap:
    """
    Min-priority queue over hashable items with integer or float scores.

    Complexity:
        - push / pop / decrease_key / update / remove: O(log n)
        - peek / score / __contains__ / __len__: O(1)

    Example:
        >>> pq = IndexedMinHeap()
        >>> pq.push("a", 5)
        >>> pq.push("b", 3)
        >>> pq.decrease_key("a", 1)
        >>> pq.pop()
        ('a', 1)
    """

    def __init__(self) -> None:
        self._entries: List[Tuple[float, int, Hashable]] = []
        self._position: Dict[Hashable, int] = {}
        self._counter = 0

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    def __contains__(self, item: Hashable) -> bool:
        return item in self._position

    def push(self, item: Hashable, score: float) -> None:
        """
        Insert a new item.

        Args:
            item: Item identifier, not currently in the heap.
            score: Priority; smaller is popped first.

        Raises:
            ValueError: If the item is already in the heap.
        """
        if item in self._position:
            raise ValueError(f"Item {item!r} already in heap; use decrease_key or update")
        self._entries.append((score, self._counter, item))
        self._counter += 1
        pos = len(self._entries) - 1
        self._position[item] = pos
        self._sift_up(pos)

    def peek(self) -> Tuple[Hashable, float]:
        """
        Return the minimum ``(item, score)`` without removing it.

        Raises:
            IndexError: If the heap is empty.
        """
        if not self._entries:
            raise IndexError("peek from empty heap")
        score, _, item = self._entries[0]
        return item, score

    def pop(self) -> Tuple[Hashable, float]:
        """
        Remove and return the minimum ``(item, score)``.

        Raises:
            IndexError: If the heap is empty.
        """
        if not self._entries:
            raise IndexError("pop from empty heap")
        score, _, item = self._entries[0]
        self._delete_at(0)
        return item, score

    def score(self, item: Hashable) -> float:
        """Return the current score of an enqueued item."""
        return self._entries[self._require(item)][0]

    def decrease_key(self, item: Hashable, score: float) -> None:
        """
        Lower the score of an enqueued item and restore heap order.

        Raises:
            AssertionError: If the item is unknown or the new score is larger
                than the current one.
        """
        pos = self._require(item)
        old_score, seq, _ = self._entries[pos]
        if score > old_score:
            raise AssertionError(
                f"decrease_key would raise score of {item!r} from {old_score} to {score}"
            )
        self._entries[pos] = (score, seq, item)
        self._sift_up(pos)

    def update(self, item: Hashable, score: float) -> None:
        """
        Set the score of an enqueued item to any value.

        Raises:
            AssertionError: If the item is unknown.
        """
        pos = self._require(item)
        _, seq, _ = self._entries[pos]
        self._entries[pos] = (score, seq, item)
        self._sift_up(pos)
        self._sift_down(self._position[item])

    def remove(self, item: Hashable) -> float:
        """
        Delete an enqueued item and return its score.

        Raises:
            AssertionError: If the item is unknown.
        """
        pos = self._require(item)
        score = self._entries[pos][0]
        self._delete_at(pos)
        return score

    def validate(self) -> None:
        """
        Check heap order and the consistency of the position index.

        Raises:
            AssertionError: If either invariant is broken.
        """
        entries = self._entries
        if len(self._position) != len(entries):
            raise AssertionError(
                f"Index has {len(self._position)} items but heap has {len(entries)}"
            )
        for pos, (_, _, item) in enumerate(entries):
            if self._position.get(item) != pos:
                raise AssertionError(f"Item {item!r} indexed at wrong position")
            parent = (pos - 1) // 2
            if pos and entries[parent][:2] > entries[pos][:2]:
                raise AssertionError(f"Heap order violated at position {pos}")

    # Internal helpers

    def _require(self, item: Hashable) -> int:
        try:
            return self._position[item]
        except KeyError:
            raise AssertionError(f"Item {item!r} not in heap") from None

    def _delete_at(self, pos: int) -> None:
        last = len(self._entries) - 1
        item = self._entries[pos][2]
        if pos != last:
            self._swap(pos, last)
        self._entries.pop()
        del self._position[item]
        if pos < len(self._entries):
            moved = self._entries[pos][2]
            self._sift_up(pos)
            self._sift_down(self._position[moved])

    def _swap(self, i: int, j: int) -> None:
        entries = self._entries
        entries[i], entries[j] = entries[j], entries[i]
        self._position[entries[i][2]] = i
        self._position[entries[j][2]] = j

    def _less(self, i: int, j: int) -> bool:
        # Compare (score, sequence) only; items need not be orderable
        a, b = self._entries[i], self._entries[j]
        return (a[0], a[1]) < (b[0], b[1])

    def _sift_up(self, pos: int) -> None:
        while pos > 0:
            parent = (pos - 1) // 2
            if not self._less(pos, parent):
                break
            self._swap(pos, parent)
            pos = parent

    def _sift_down(self, pos: int) -> None:
        size = len(self._entries)
        while True:
            smallest = pos
            left = 2 * pos + 1
            right = left + 1
            if left < size and self._less(left, smallest):
                smallest = left
            if right < size and self._less(right, smallest):
                smallest = right
            if smallest == pos:
                break
            self._swap(pos, smallest)
            pos = smallest
