"""
Shared helpers for presenting shuffled albums.
"""

import random
import re
import time
from typing import Callable, Optional

TRACK_ID_RANDOM_RANGE = 10000

_WHITESPACE = re.compile(r"\s")


def current_millis() -> int:
    """Wall-clock time in milliseconds."""
    return int(time.time() * 1000)


def make_track_id(
    folder: str,
    parsed_number: int,
    rng: Optional[random.Random] = None,
    clock: Optional[Callable[[], int]] = None,
) -> str:
    """
    Build a request-scoped track identifier.

    Combines a millisecond timestamp, a random number below 10000, the album
    folder with each whitespace character replaced by a hyphen, and the
    parsed track number. Not stable across requests.

    Args:
        folder: Raw album folder name.
        parsed_number: Track number parsed from the file name.
        rng: Random source. Defaults to the module-level generator.
        clock: Returns the current time in milliseconds.

    Returns:
        Identifier such as ``"1700000000000-42-Dusk---Kayo-1"``.
    """
    rng = rng if rng is not None else random
    clock = clock or current_millis
    return (
        f"{clock()}-{rng.randrange(TRACK_ID_RANDOM_RANGE)}-"
        f"{_WHITESPACE.sub('-', folder)}-{parsed_number}"
    )
