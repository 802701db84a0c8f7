from typing import List, Protocol


class PositionShuffle(Protocol):
    """Interface for position shuffles used to present tracks."""

    @property
    def name(self) -> str:
        """Name of the algorithm."""
        ...

    @property
    def description(self) -> str:
        """Description of what the algorithm does."""
        ...

    def permutation(self, count: int) -> List[int]:
        """
        Produce a random ordering of positions.

        Args:
            count: Number of positions.

        Returns:
            A list containing each of 0..count-1 exactly once.
        """
        ...
