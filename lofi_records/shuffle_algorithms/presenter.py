"""
Randomizing presenter.

Takes albums with tracks in canonical (parsed number) order and assigns each
track a random slot and a fresh identifier for one response.
"""

import logging
import random
from typing import Callable, Iterable, List, Optional

from lofi_records.models.album import Album
from . import PositionShuffle
from .fisher_yates import FisherYatesShuffle
from .utils import make_track_id

logger = logging.getLogger(__name__)


def present_albums(
    albums: Iterable[Album],
    shuffler: Optional[PositionShuffle] = None,
    rng: Optional[random.Random] = None,
    clock: Optional[Callable[[], int]] = None,
) -> List[Album]:
    """
    Assign random presented order and track ids to every album's tracks.

    Tracks keep their canonical sequence in the list; only
    ``presented_order`` and ``track_id`` change.

    Args:
        albums: Albums in response order.
        shuffler: Position shuffle. Defaults to FisherYatesShuffle(rng).
        rng: Random source for track ids (and the default shuffler).
        clock: Millisecond clock for track ids.

    Returns:
        The same albums, as a list.
    """
    shuffler = shuffler or FisherYatesShuffle(rng)
    presented = []

    for album in albums:
        positions = shuffler.permutation(album.track_count)
        for index, track in enumerate(album.tracks):
            track.presented_order = positions[index]
            track.track_id = make_track_id(
                album.folder, track.parsed_number, rng=rng, clock=clock
            )
        presented.append(album)

    logger.debug("Presented %d albums with randomized track order", len(presented))
    return presented
