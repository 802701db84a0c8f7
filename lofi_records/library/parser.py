"""
Key parser and album grouper.

Album folders live directly under the configured prefix and are named
``"<Album> - <Artist>"`` (or just ``"<Album>"``). Files inside a folder are
either cover images or tracks named ``"<NN> - <Title>.<ext>"``.

Example:
    >>> albums = group_keys(
    ...     "lofi stations/",
    ...     ["lofi stations/Dusk - Kayo/01 - Rain.mp3"],
    ...     lambda key: "https://cdn.example.com/" + key,
    ... )
    >>> albums["Dusk - Kayo"].tracks[0].name
    'Rain'
"""

import logging
import re
from typing import Callable, Dict, Iterable, Tuple

from lofi_records.models.album import Album, Track, UNKNOWN_ARTIST

logger = logging.getLogger(__name__)

ALBUM_ARTIST_SEPARATOR = " - "

# Substring matches, not suffix checks: "Recover.mp3" counts as a cover.
COVER_MARKERS = ("cover", ".jpg", ".jpeg", ".png")

TRACK_PATTERN = re.compile(r"^(\d+)\s*-\s*(.+)")
EXTENSION_PATTERN = re.compile(r"\.[^/.]+$")


def parse_album_folder(folder: str) -> Tuple[str, str]:
    """
    Split an album folder name into album name and artist.

    Splits on the first ``" - "`` only, so artists containing the separator
    keep the remainder intact.

    Args:
        folder: Raw album folder name.

    Returns:
        Tuple of (album_name, artist).
    """
    if ALBUM_ARTIST_SEPARATOR in folder:
        album_name, artist = folder.split(ALBUM_ARTIST_SEPARATOR, 1)
        return album_name.strip(), artist.strip()
    return folder, UNKNOWN_ARTIST


def is_cover_file(file_name: str) -> bool:
    """Check whether a file name looks like album art."""
    lowered = file_name.lower()
    return any(marker in lowered for marker in COVER_MARKERS)


def strip_extension(name: str) -> str:
    """Remove a trailing ``.ext`` from a file name."""
    return EXTENSION_PATTERN.sub("", name)


def parse_track_file(file_name: str) -> Tuple[int, str]:
    """
    Parse a track file name into its number and display name.

    Args:
        file_name: File name such as ``"01 - Song.mp3"``.

    Returns:
        Tuple of (track_number, display_name). Files without a leading
        ``"NN - "`` get track number 0 and keep their full name.
    """
    match = TRACK_PATTERN.match(file_name)
    if match:
        number = int(match.group(1), 10)
        raw_name = match.group(2).strip()
    else:
        number = 0
        raw_name = file_name
    return number, strip_extension(raw_name)


def _relative_path(prefix: str, key: str) -> str:
    if prefix and key.startswith(prefix):
        return key[len(prefix):]
    return key


def group_keys(
    prefix: str,
    keys: Iterable[str],
    resolve_url: Callable[[str], str],
) -> Dict[str, Album]:
    """
    Group storage keys into albums keyed by their raw folder name.

    Albums appear in the order their folders were first seen. Tracks inside
    each album are sorted by parsed track number; ties keep listing order.

    Args:
        prefix: Key prefix all album folders live under.
        keys: Storage keys in listing order.
        resolve_url: Maps a storage key to a public URL.

    Returns:
        Dict of folder name to Album.
    """
    albums: Dict[str, Album] = {}
    skipped = 0

    for key in keys:
        if key == prefix:
            skipped += 1
            continue

        parts = _relative_path(prefix, key).split("/")
        # An empty folder segment ("<prefix>/x.mp3") is skipped too; grouping
        # it under "" is an open product question.
        if len(parts) < 2 or not parts[0]:
            skipped += 1
            continue

        folder, file_name = parts[0], parts[1]

        album = albums.get(folder)
        if album is None:
            album_name, artist = parse_album_folder(folder)
            album = Album(folder=folder, album_name=album_name, artist=artist)
            albums[folder] = album

        # Folder placeholder objects ("<prefix><folder>/") add no track. Whether
        # they should yield an empty-named track is an open product question.
        if not file_name:
            continue

        if is_cover_file(file_name):
            album.cover_url = resolve_url(key)
            continue

        number, name = parse_track_file(file_name)
        album.tracks.append(
            Track(name=name, url=resolve_url(key), parsed_number=number)
        )

    for album in albums.values():
        album.sort_tracks()

    if skipped:
        logger.debug("Skipped %d keys outside album folders", skipped)

    return albums
