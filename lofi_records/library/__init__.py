"""
Bucket listing parsing.

Turns a flat list of storage keys into Album records.
"""

from lofi_records.library.parser import (
    group_keys,
    parse_album_folder,
    parse_track_file,
    is_cover_file,
    strip_extension,
)

__all__ = [
    "group_keys",
    "parse_album_folder",
    "parse_track_file",
    "is_cover_file",
    "strip_extension",
]
