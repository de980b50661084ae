"""Streaming sliding-window minimum over fixed-length elements.

The :class:`Enumerator` tracks, as a byte stream advances one element at a
time, which of the trailing ``window_count`` elements carries the smallest
order key. Candidates live in a monotonic deque: positions increase from
front to back and keys never decrease, so the front is always the leftmost
minimum and every element is pushed and popped at most once.
"""

from __future__ import annotations

from collections import deque
from typing import Any, Callable

from minimizers.errors import InvariantViolatedError


class Enumerator:
    """Sliding-window minimum tracker with leftmost tie-breaking.

    Attributes:
        window_count: Number of trailing elements competing for the minimum.
        element_length: Length in bytes of each element.
    """

    def __init__(
        self,
        window_count: int,
        element_length: int,
        key: Callable[[bytes], Any],
    ) -> None:
        """Initialize the enumerator.

        Args:
            window_count: Number of trailing elements in the window.
            element_length: Length of one element (k or t).
            key: Maps an element to its totally ordered key.
        """
        if window_count < 1:
            raise ValueError(f"window_count must be positive, got {window_count}")
        self.window_count = window_count
        self.element_length = element_length
        self._key = key
        self._candidates: deque[tuple[Any, int]] = deque()
        self._position = -1

    def clear(self) -> None:
        """Drop all tracked state."""
        self._candidates.clear()
        self._position = -1

    def _advance(self) -> None:
        self._position += 1
        oldest = self._position - self.window_count
        while self._candidates and self._candidates[0][1] <= oldest:
            self._candidates.popleft()

    def eat(self, element: bytes, clear: bool = False) -> None:
        """Push the next element of the stream.

        Args:
            element: Bytes of the new rightmost element.
            clear: Discard all previous state first (start of a new stream).
        """
        if clear:
            self.clear()
        key = self._key(element)
        self._advance()
        # Equal keys stay behind the older candidate: ties resolve leftmost.
        while self._candidates and self._candidates[-1][0] > key:
            self._candidates.pop()
        self._candidates.append((key, self._position))

    def eat_window(self, window: bytes, clear: bool) -> None:
        """Feed a whole window, or only its rightmost element.

        ``window`` spans ``window_count + element_length - 1`` bytes. With
        ``clear`` every element of it is eaten from scratch; otherwise the
        window is assumed to have slid by one and only the last element is
        new.
        """
        length = self.element_length
        if clear:
            self.clear()
            for i in range(self.window_count):
                self.eat(window[i : i + length])
        else:
            self.eat(window[len(window) - length :])

    def skip(self) -> None:
        """Advance by one position without inserting a candidate."""
        self._advance()

    def next(self) -> int:
        """Return the offset of the minimum within the trailing window.

        Raises:
            InvariantViolatedError: If every position in the window was skipped.
        """
        if not self._candidates:
            raise InvariantViolatedError("no candidate tracked in the current window")
        return self._candidates[0][1] - (self._position - self.window_count + 1)

    @property
    def min_key(self) -> Any:
        """Order key of the current minimum."""
        if not self._candidates:
            raise InvariantViolatedError("no candidate tracked in the current window")
        return self._candidates[0][0]
