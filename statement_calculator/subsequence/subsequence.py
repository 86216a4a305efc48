"""Order-preserving subsequence check."""
from typing import Any, Optional, Sequence


class Subsequence:
    """Check whether one sequence can be obtained from another by removing elements."""

    def find(self, x: Optional[Sequence[Any]], y: Optional[Sequence[Any]]) -> bool:
        """
        Check that ``x`` is an order-preserving subsequence of ``y``.

        Elements are compared by value.

        :param Sequence x: Short sequence
        :param Sequence y: Long sequence

        :return: True if removing some elements of ``y`` gives ``x``
        :rtype: bool
        :raises ValueError: If a sequence is None
        """
        if x is None or y is None:
            raise ValueError("Sequences must not be None")

        index: int = 0
        for item in y:
            if index == len(x):
                break
            if x[index] == item:
                index += 1

        return index == len(x)
