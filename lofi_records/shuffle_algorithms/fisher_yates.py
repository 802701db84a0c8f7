import random
from typing import List, Optional
from . import PositionShuffle

class FisherYatesShuffle(PositionShuffle):
    """Assign every track an unbiased random slot in its album."""

    def __init__(self, rng: Optional[random.Random] = None):
        # Module-level functions share the global generator, so random.seed() applies.
        self._rng = rng if rng is not None else random

    @property
    def name(self) -> str:
        return "Fisher-Yates"

    @property
    def description(self) -> str:
        return "Assign every track an unbiased random slot in its album."

    def permutation(self, count: int) -> List[int]:
        """
        Shuffle the positions 0..count-1 in place, last index first.

        Args:
            count: Number of tracks in the album.

        Returns:
            List where index i holds the slot for the i-th track.
        """
        positions = list(range(count))
        for i in range(count - 1, 0, -1):
            j = self._rng.randint(0, i)
            positions[i], positions[j] = positions[j], positions[i]
        return positions
