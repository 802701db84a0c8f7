from typing import Dict, List, Any, Optional
from dataclasses import dataclass, field
import logging

logger = logging.getLogger(__name__)

UNKNOWN_ARTIST = "Unknown Artist"


@dataclass
class Track:
    """
    A playable file inside an album folder.

    ``parsed_number`` is the number read from the file name and drives the
    canonical sort. ``presented_order`` is the random slot assigned for a
    single response and is the only value serialized as ``order``.
    """

    name: str
    url: str
    parsed_number: int = 0
    presented_order: Optional[int] = None
    track_id: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "trackId": self.track_id,
            "name": self.name,
            "url": self.url,
            "order": self.presented_order,
        }


@dataclass
class Album:
    """An album folder in the bucket with its cover and tracks."""

    folder: str
    album_name: str
    artist: str = UNKNOWN_ARTIST
    cover_url: Optional[str] = None
    tracks: List[Track] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.folder:
            logger.error("Album folder is required")
            raise ValueError("Album folder is required")

    @property
    def track_count(self) -> int:
        return len(self.tracks)

    def sort_tracks(self) -> None:
        """Sort tracks by parsed track number, keeping encounter order for ties."""
        self.tracks.sort(key=lambda track: track.parsed_number)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the public response shape."""
        return {
            "albumName": self.album_name,
            "artist": self.artist,
            "coverUrl": self.cover_url,
            "tracks": [track.to_dict() for track in self.tracks],
        }
