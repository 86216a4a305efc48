"""Arrange numbers into a pyramid."""
import math
from typing import List, Optional

from statement_calculator.common.errors import CannotBuildPyramid


class PyramidBuilder:
    """
    Build a pyramid of sorted numbers.

    The smallest value sits at the top, values grow top to bottom and left to
    right. Each row is ``2 * height - 1`` cells wide, numbers are centred on
    alternating cells and vacant cells hold zeros::

        [1, 3, 2, 9, 4, 5]  ->  [[0, 0, 1, 0, 0],
                                 [0, 2, 0, 3, 0],
                                 [4, 0, 5, 0, 9]]
    """

    @staticmethod
    def pyramid_height(count: int) -> int:
        """
        Compute the height of a pyramid holding ``count`` numbers.

        Row ``n`` holds ``n`` numbers, so ``count`` must be a triangular number
        ``h * (h + 1) / 2``, that is ``h = (sqrt(8 * count + 1) - 1) / 2``.

        :param int count: Number of elements

        :return: Pyramid height, or -1 if count is not a triangular number
        :rtype: int
        """
        discriminant: int = 1 + 8 * count
        root: int = math.isqrt(discriminant)
        if root * root != discriminant:
            return -1
        return (root - 1) // 2

    def build_pyramid(self, input_numbers: Optional[List[int]]) -> List[List[int]]:
        """
        Build the pyramid rows for the given numbers.

        :param List[int] input_numbers: Numbers to place, left untouched

        :return: Rows of the pyramid
        :rtype: List[List[int]]
        :raises CannotBuildPyramid: If the input is None, cannot be sorted or has an inappropriate size
        """
        if input_numbers is None:
            raise CannotBuildPyramid("Input list must not be None")

        try:
            numbers: List[int] = sorted(input_numbers)
        except TypeError as exc:
            raise CannotBuildPyramid("Error while sorting the input list") from exc

        height: int = self.pyramid_height(len(numbers))
        if height <= 0:
            raise CannotBuildPyramid(f"Inappropriate number of elements: {len(numbers)}")

        width: int = 2 * height - 1
        rows: List[List[int]] = []
        values = iter(numbers)
        for row_index in range(height):
            row: List[int] = [0] * width
            # Row n starts (height - n - 1) cells from the left edge
            for column in range(height - row_index - 1, height + row_index, 2):
                row[column] = next(values)
            rows.append(row)

        return rows
